from __future__ import annotations

"""
Generation Run Orchestrator.

Chains the generator and the statistics collector for one depth/output pair
and packages the outcome as a GenerationResult for the interface layer.
"""

import logging

from deeptree.core.services.generator import generate_tree
from deeptree.core.services.stats import collect_tree_stats
from deeptree.domain.estimator import expected_directory_count, expected_file_count
from deeptree.domain.tree_models import GenerationResult

logger = logging.getLogger(__name__)


def plan_generation(depth: int, output_dir: str) -> GenerationResult:
    """
    Describe a run without touching the filesystem.

    Args:
        depth: Validated tree depth.
        output_dir: Absolute destination directory.

    Returns:
        GenerationResult: Dry-run result carrying the projected counts.
    """
    return GenerationResult(
        ok=True,
        depth=depth,
        output_dir=output_dir,
        expected_files=expected_file_count(depth),
        expected_directories=expected_directory_count(depth),
        dry_run=True,
    )


def cancelled_result(depth: int, output_dir: str) -> GenerationResult:
    """Result for a run the user declined before anything was written."""
    return GenerationResult(
        ok=False,
        depth=depth,
        output_dir=output_dir,
        expected_files=expected_file_count(depth),
        expected_directories=expected_directory_count(depth),
        cancelled=True,
    )


def run_generation(depth: int, output_dir: str) -> GenerationResult:
    """
    Generate the tree and measure what landed on disk.

    OSError from either step propagates to the caller.

    Args:
        depth: Validated tree depth.
        output_dir: Absolute destination directory.

    Returns:
        GenerationResult: Successful result with on-disk statistics.
    """
    replaced = generate_tree(depth, output_dir)
    stats = collect_tree_stats(output_dir)

    expected_files = expected_file_count(depth)
    if stats.files != expected_files:
        logger.warning(
            f"File count mismatch in {output_dir}: expected {expected_files:,}, found {stats.files:,}"
        )

    return GenerationResult(
        ok=True,
        depth=depth,
        output_dir=output_dir,
        expected_files=expected_files,
        expected_directories=expected_directory_count(depth),
        stats=stats,
        replaced_existing=replaced,
    )
