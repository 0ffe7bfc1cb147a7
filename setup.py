# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="treescaffold",
    version="0.1.0",
    description="Create directory and file hierarchies from textual tree descriptions",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["treescaffold*"]),
    python_requires=">=3.9",
    install_requires=[
        "pyperclip",  # Clipboard input when no tree file is given
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'treescaffold=treescaffold.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
