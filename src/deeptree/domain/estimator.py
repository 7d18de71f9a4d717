from __future__ import annotations

"""
Tree Size Estimator.

Closed-form node counts for a tree of a given depth. Each level multiplies
the directory count by the fan-out, so level k (1-based) holds FAN_OUT**(k-1)
directories, each with one index plus FAN_OUT sibling modules.
"""

from typing import List, Tuple

from deeptree.domain.constants import FAN_OUT, HELP_TABLE_MAX_DEPTH
from deeptree.domain.errors import InvalidDepthError


def _level_directories(depth: int) -> int:
    """Directories across all levels, root included."""
    _require_depth(depth)
    return (FAN_OUT ** depth - 1) // (FAN_OUT - 1)


def expected_file_count(depth: int) -> int:
    """
    Total files produced for a tree of the given depth.

    Args:
        depth: Tree depth, root level counted as 1.

    Returns:
        int: 10 * (9**depth - 1) / 8 for the default fan-out.
    """
    return (FAN_OUT + 1) * _level_directories(depth)


def expected_directory_count(depth: int) -> int:
    """Nested directories produced for a tree of the given depth (root excluded)."""
    return _level_directories(depth) - 1


def depth_table(max_depth: int = HELP_TABLE_MAX_DEPTH) -> List[Tuple[int, int]]:
    """
    Build (depth, file count) rows for the help screen.

    Args:
        max_depth: Last depth listed.

    Returns:
        List[Tuple[int, int]]: One row per depth starting at 1.
    """
    return [(d, expected_file_count(d)) for d in range(1, max_depth + 1)]


def _require_depth(depth: int) -> None:
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 1:
        raise InvalidDepthError(depth)
