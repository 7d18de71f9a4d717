from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Owns every process-level concern: argument parsing, logging bootstrap,
the large-depth confirmation gate, exit codes and result rendering. The
services it calls take explicit parameters and return explicit results.
"""

import json
import sys
from dataclasses import asdict
from typing import Callable, List, Optional

from deeptree.core.services.runner import cancelled_result, plan_generation, run_generation
from deeptree.core.services.validator import is_affirmative, parse_depth, requires_confirmation
from deeptree.domain.constants import DEFAULT_OUTPUT_DIR
from deeptree.domain.errors import InvalidDepthError
from deeptree.domain.estimator import expected_file_count
from deeptree.domain.tree_models import GenerationResult
from deeptree.infra.fs import normalize_path
from deeptree.infra.logging import LoggingConfig, configure_logging, get_logger
from deeptree.interface.cli import args as cli_args
from deeptree.utils.formatting import format_bytes

logger = get_logger(__name__)

PROMPT_TEXT = "   Do you want to continue? (y/N): "

PromptFn = Callable[[str], str]

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(
        argv: Optional[List[str]] = None,
        *,
        auto_confirm: Optional[bool] = None,
        prompt: PromptFn = input,
) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv[1:].
        auto_confirm: Answer for the large-depth gate. None asks via 'prompt'.
        prompt: Callable used to read the confirmation answer.

    Returns:
        int: Process exit code.
    """
    # 1. Argument parsing phase (-h/--help exits here with status 0)
    parser = cli_args.build_parser()
    args, extra = parser.parse_known_args(argv)

    if args.depth is None:
        parser.print_help()
        return 0

    # 2. Input validation (before anything can touch the disk)
    try:
        depth = parse_depth(args.depth)
    except InvalidDepthError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # 3. Logging bootstrap (console only until the run is confirmed)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True))
    if extra:
        logger.warning(f"Ignoring extra arguments: {' '.join(extra)}")

    output_dir = normalize_path(args.output_dir, DEFAULT_OUTPUT_DIR)
    verbose = not args.json_output

    if args.dry_run:
        _render(plan_generation(depth, output_dir), args.json_output)
        return 0

    # 4. Confirmation gate
    if requires_confirmation(depth):
        if args.assume_yes:
            auto_confirm = True
        if not confirm_large_depth(depth, auto_confirm=auto_confirm, prompt=prompt):
            if verbose:
                print("Generation cancelled")
            else:
                _render(cancelled_result(depth, output_dir), True)
            return 0
        if verbose:
            print("\nStarting generation...\n")
    elif verbose:
        print(f"Generating file tree with depth {depth}...\n")

    # 5. Generation phase
    if args.log_file:
        configure_logging(
            LoggingConfig(level=log_level, console=True, log_file=args.log_file),
            force=True,
        )

    try:
        result = run_generation(depth, output_dir)
    except KeyboardInterrupt:
        logger.warning("Generation interrupted; a partial tree may remain.")
        print("Generation interrupted by user.", file=sys.stderr)
        return 130
    except OSError as e:
        logger.critical(f"Filesystem failure while generating {output_dir}: {e}", exc_info=args.debug)
        print(f"Error: Generation failed: {e}", file=sys.stderr)
        return 1

    # 6. Output rendering phase
    _render(result, args.json_output)
    return 0

# -----------------------------------------------------------------------------
# CONFIRMATION GATE
# -----------------------------------------------------------------------------

def confirm_large_depth(
        depth: int,
        *,
        auto_confirm: Optional[bool] = None,
        prompt: PromptFn = input,
) -> bool:
    """
    Warn about the projected size and obtain a go-ahead.

    Args:
        depth: Validated depth above the warning threshold.
        auto_confirm: Preset answer; skips the prompt when not None.
        prompt: Blocking reader for the interactive answer.

    Returns:
        bool: True to proceed.
    """
    estimated = expected_file_count(depth)
    print(f"Warning: Depth {depth} will generate approximately {estimated:,} files!", file=sys.stderr)
    print("   This may take a long time and use significant disk space.", file=sys.stderr)

    if auto_confirm is not None:
        logger.info(f"Confirmation preset to {'yes' if auto_confirm else 'no'}")
        return auto_confirm

    try:
        answer = prompt(PROMPT_TEXT)
    except (EOFError, KeyboardInterrupt):
        print(file=sys.stderr)
        return False

    return is_affirmative(answer)

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _render(result: GenerationResult, as_json: bool) -> None:
    if as_json:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)


def _print_human_summary(result: GenerationResult) -> None:
    """Print the run outcome for a terminal reader."""
    if result.dry_run:
        print(
            f"Dry run: depth {result.depth} would generate {result.expected_files:,} files "
            f"in {result.expected_directories:,} directories under {result.output_dir}"
        )
        return

    stats = result.stats
    print(f"File tree generated successfully with depth {result.depth} in {result.output_dir}")
    print("Statistics:")
    print(f"   - Total files: {stats.files:,}")
    print(f"   - Total directories: {stats.directories:,}")
    print(f"   - Total size: {format_bytes(stats.size)}")


if __name__ == "__main__":
    sys.exit(main())
