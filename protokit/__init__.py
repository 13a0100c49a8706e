"""Top-level protokit package.

Sub-packages
------------
protokit.backend
    FastAPI server (api/), storage and utilities (core/), shared schemas/,
    command line (cli/) and the prototype sites (sites/)
"""

from __future__ import annotations

__version__ = "0.1.0"
