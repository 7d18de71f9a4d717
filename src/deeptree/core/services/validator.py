from __future__ import annotations

"""
Input Validation Service.

Turns raw user input (CLI strings, prompt answers) into validated values.
"""

from typing import Any, Optional

from deeptree.domain.constants import AFFIRMATIVE_ANSWERS, LARGE_DEPTH_THRESHOLD
from deeptree.domain.errors import InvalidDepthError


def parse_depth(raw: Any) -> int:
    """
    Convert a raw depth value into a positive integer.

    Args:
        raw: String from the command line, or an int from a caller.

    Returns:
        int: Depth >= 1.

    Raises:
        InvalidDepthError: If the value is not an integer or is below 1.
    """
    if isinstance(raw, bool):
        raise InvalidDepthError(raw)

    if isinstance(raw, int):
        depth = raw
    else:
        try:
            depth = int(str(raw).strip(), 10)
        except (TypeError, ValueError):
            raise InvalidDepthError(raw) from None

    if depth < 1:
        raise InvalidDepthError(raw)
    return depth


def requires_confirmation(depth: int) -> bool:
    """True when the depth is large enough to warrant an explicit go-ahead."""
    return depth > LARGE_DEPTH_THRESHOLD


def is_affirmative(answer: Optional[str]) -> bool:
    """Interpret a yes/no answer; anything but 'y'/'yes' means no."""
    if not answer:
        return False
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS
