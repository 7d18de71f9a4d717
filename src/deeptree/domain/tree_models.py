from __future__ import annotations

"""
Tree Data Models.

Immutable value objects exchanged between the generation services and the
interface layer.
"""

from dataclasses import dataclass, field

# -----------------------------------------------------------------------------
# STATISTICS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TreeStats:
    """
    Aggregate counters for a directory subtree.

    Attributes:
        files: Number of regular files (and other non-directory entries).
        directories: Number of nested directories, excluding the root.
        size: Total byte length of all counted files.
    """
    files: int = 0
    directories: int = 0
    size: int = 0

    def __add__(self, other: TreeStats) -> TreeStats:
        if not isinstance(other, TreeStats):
            return NotImplemented
        return TreeStats(
            files=self.files + other.files,
            directories=self.directories + other.directories,
            size=self.size + other.size,
        )

# -----------------------------------------------------------------------------
# RUN RESULT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of a single CLI-driven generation run.

    Attributes:
        ok: False only when the run did not complete.
        depth: Requested tree depth.
        output_dir: Absolute path of the tree root.
        expected_files: Closed-form file count for the depth.
        expected_directories: Closed-form nested directory count.
        stats: Counters measured on disk after generation.
        cancelled: True when the confirmation gate was declined.
        dry_run: True when nothing was written on purpose.
        replaced_existing: True when a previous tree was removed first.
    """
    ok: bool
    depth: int
    output_dir: str
    expected_files: int
    expected_directories: int
    stats: TreeStats = field(default_factory=TreeStats)
    cancelled: bool = False
    dry_run: bool = False
    replaced_existing: bool = False
