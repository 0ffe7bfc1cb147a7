from __future__ import annotations

import sys

from treescaffold.main import main

sys.exit(main())
