from __future__ import annotations

"""
Module Tree Generator.

Materializes a synthetic JavaScript module graph on disk. Every directory
gets an 'index.js' importing nine sibling modules; each sibling imports the
index of its same-named subdirectory until the maximum depth is reached,
where siblings become leaf modules carrying a depth marker.

Directories are visited depth-first in label order through an explicit work
stack, so the output is reproducible and deep trees never touch the
interpreter recursion limit.
"""

import logging
import os
from typing import List, Tuple

from deeptree.domain.constants import (
    CHILD_PREFIX,
    FAN_OUT,
    INDEX_FILE_NAME,
    MODULE_EXT,
)
from deeptree.domain.estimator import expected_file_count
from deeptree.infra.fs import reset_directory, write_text

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CONTENT RENDERING
# -----------------------------------------------------------------------------

def child_labels() -> List[str]:
    """Return the sibling labels of a directory, in generation order."""
    return [f"{CHILD_PREFIX}{i}" for i in range(1, FAN_OUT + 1)]


def render_index() -> str:
    """Body of an index module: one import per sibling module."""
    return "".join(f'import "./{label}{MODULE_EXT}"\n' for label in child_labels())


def render_branch(label: str) -> str:
    """Body of a sibling module that pulls in its subdirectory's index."""
    return f'import "./{label}/{INDEX_FILE_NAME}"\n'


def render_leaf(depth: int) -> str:
    """Body of a sibling module at the deepest level."""
    return f"// Leaf file at depth {depth}\n"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_tree(max_depth: int, root_dir: str) -> bool:
    """
    Build the full module tree under 'root_dir'.

    An existing 'root_dir' is deleted recursively before generation starts.
    Filesystem errors are not caught; a failure may leave a partial tree.

    Args:
        max_depth: Number of directory levels, root counted as 1.
        root_dir: Destination directory.

    Returns:
        bool: True if a previous tree (or file) at 'root_dir' was removed.
    """
    # Validates the depth before anything is deleted
    total = expected_file_count(max_depth)

    replaced = reset_directory(root_dir)
    logger.info(f"Generating depth {max_depth} tree ({total:,} files) in {root_dir}")

    stack: List[Tuple[str, int]] = [(root_dir, 1)]
    while stack:
        current_path, current_depth = stack.pop()
        subdirs = _generate_level(current_path, current_depth, max_depth)
        # Reversed so that f1 is expanded first
        stack.extend((path, current_depth + 1) for path in reversed(subdirs))

    logger.debug(f"Tree generation finished for {root_dir}")
    return replaced

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _generate_level(current_path: str, current_depth: int, max_depth: int) -> List[str]:
    """
    Write one directory's modules and create its subdirectories.

    Returns:
        List[str]: Subdirectories still to be populated, in label order.
    """
    write_text(os.path.join(current_path, INDEX_FILE_NAME), render_index())

    subdirs: List[str] = []
    for label in child_labels():
        file_path = os.path.join(current_path, f"{label}{MODULE_EXT}")

        if current_depth < max_depth:
            write_text(file_path, render_branch(label))
            sub_path = os.path.join(current_path, label)
            os.makedirs(sub_path, exist_ok=True)
            subdirs.append(sub_path)
        else:
            write_text(file_path, render_leaf(current_depth))

    return subdirs
