from __future__ import annotations

"""
CLI Argument Definition.

Declares the command-line schema. The depth stays a raw string here so that
validation (and its exit code) is owned by the application controller
rather than by argparse.
"""

import argparse

from deeptree.domain.constants import DEFAULT_OUTPUT_DIR, HELP_TABLE_MAX_DEPTH
from deeptree.domain.estimator import depth_table

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the deeptree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="deeptree",
        description=(
            "Generate a JavaScript module tree where every directory holds an "
            "index.js importing f1.js through f9.js, and each fN.js imports "
            "the fN/ subdirectory until the requested depth is reached."
        ),
        epilog=build_epilog(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # --- Positional Arguments ---
    p.add_argument(
        "depth",
        nargs="?",
        default=None,
        help="Maximum depth of the tree (required, positive integer)",
    )
    p.add_argument(
        "output_dir",
        nargs="?",
        default=None,
        help=f"Output directory path (optional, default: {DEFAULT_OUTPUT_DIR})",
    )

    # --- Runtime Safety ---
    p.add_argument(
        "-y", "--yes",
        dest="assume_yes",
        action="store_true",
        help="Skip the confirmation prompt for large depths.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Only report how many files and directories would be generated.",
    )

    # --- Output and Diagnostics ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run result as JSON.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating log file.",
    )

    return p

# -----------------------------------------------------------------------------
# HELP TEXT
# -----------------------------------------------------------------------------

def build_epilog(max_depth: int = HELP_TABLE_MAX_DEPTH) -> str:
    """
    Render the examples and the depth/file-count table shown by --help.

    Args:
        max_depth: Last depth listed in the table.

    Returns:
        str: Pre-formatted epilog text.
    """
    lines = [
        "Examples:",
        "  deeptree 3",
        "  deeptree 5 ./my-tree",
        "  deeptree 2 /tmp/test-tree",
        "",
        "Note: Be careful with large depth values as the number of files grows exponentially!",
    ]
    for depth, files in depth_table(max_depth):
        lines.append(f"  Depth {depth}: {files:,} files")
    return "\n".join(lines)
