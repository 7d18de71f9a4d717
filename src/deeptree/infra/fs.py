from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path normalization and the destructive directory reset used before a tree
is regenerated. Errors from the underlying 'os'/'shutil' calls propagate to
the caller untouched.
"""

import logging
import os
import shutil
from typing import Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use when the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# DIRECTORY LIFECYCLE API
# -----------------------------------------------------------------------------

def reset_directory(path: str) -> bool:
    """
    Ensure 'path' exists as a fresh, empty directory.

    Any previous content is removed recursively without confirmation.

    Args:
        path: Directory to (re)create.

    Returns:
        bool: True if something already existed at 'path' and was removed.
    """
    replaced = False
    if os.path.lexists(path):
        logger.warning(f"Directory {path} already exists. Removing it...")
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)
        replaced = True

    os.makedirs(path, exist_ok=True)
    return replaced


def write_text(path: str, content: str) -> None:
    """Write 'content' to 'path' as UTF-8 with LF line endings."""
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)
