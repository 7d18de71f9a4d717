from __future__ import annotations

"""
Domain Constants.

Centralizes the fixed shape of the generated module tree (fan-out, file
naming, leaf markers) together with CLI defaults and reporting units.
"""

from typing import List

# -----------------------------------------------------------------------------
# TREE SHAPE
# -----------------------------------------------------------------------------

FAN_OUT = 9
CHILD_PREFIX = "f"
MODULE_EXT = ".js"
INDEX_FILE_NAME = f"index{MODULE_EXT}"

# -----------------------------------------------------------------------------
# CLI DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_OUTPUT_DIR = "./generated-tree"
LARGE_DEPTH_THRESHOLD = 5
HELP_TABLE_MAX_DEPTH = 5
AFFIRMATIVE_ANSWERS = ("y", "yes")

# -----------------------------------------------------------------------------
# REPORTING
# -----------------------------------------------------------------------------

SIZE_UNITS: List[str] = ["B", "KB", "MB", "GB"]
SIZE_STEP = 1024
