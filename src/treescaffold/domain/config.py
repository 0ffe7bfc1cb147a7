from __future__ import annotations

"""
Configuration Domain Management.

Defines the runtime configuration of a scaffold run. Every run starts from
these defaults; only flags given on the command line change them. No state
is read from or written to the user's home directory.
"""

import os
from typing import Any, Dict

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "target_dir": os.getcwd(),
        "dry_run": False,
        "encoding": "utf-8",
        "log_file": "",
    }
