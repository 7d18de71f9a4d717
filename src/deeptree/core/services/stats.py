from __future__ import annotations

"""
Tree Statistics Collector.

Read-only walk that counts files, nested directories and total bytes under
a root directory. Each directory is summarized on its own and the partial
results are folded together by value.
"""

import logging
import os
from typing import List, Tuple

from deeptree.domain.tree_models import TreeStats

logger = logging.getLogger(__name__)


def collect_tree_stats(dir_path: str) -> TreeStats:
    """
    Aggregate file, directory and byte counts for a subtree.

    The root directory itself is not counted. Symlinks are not followed.

    Args:
        dir_path: Existing, readable directory.

    Returns:
        TreeStats: Totals for everything below 'dir_path'.
    """
    total = TreeStats()
    pending: List[str] = [dir_path]

    while pending:
        level_stats, subdirs = _scan_directory(pending.pop())
        total = total + level_stats
        pending.extend(subdirs)

    logger.debug(
        f"Collected stats for {dir_path}: {total.files} files, "
        f"{total.directories} directories, {total.size} bytes"
    )
    return total


def _scan_directory(path: str) -> Tuple[TreeStats, List[str]]:
    """Summarize the immediate entries of 'path' and list its subdirectories."""
    files = 0
    size = 0
    subdirs: List[str] = []

    with os.scandir(path) as entries:
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                subdirs.append(entry.path)
            else:
                files += 1
                size += entry.stat(follow_symlinks=False).st_size

    return TreeStats(files=files, directories=len(subdirs), size=size), subdirs
