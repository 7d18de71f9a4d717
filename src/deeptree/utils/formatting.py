from __future__ import annotations

"""
Human-Readable Formatting Helpers.
"""

from typing import Union

from deeptree.domain.constants import SIZE_STEP, SIZE_UNITS


def format_bytes(num_bytes: Union[int, float]) -> str:
    """
    Render a byte count with a binary unit suffix.

    Scaling stops at the last known unit (GB), so very large values keep
    growing in GB instead of switching to TB.

    Args:
        num_bytes: Non-negative byte count.

    Returns:
        str: Value with two decimals and unit, e.g. '1.50 KB'.
    """
    if num_bytes < 0:
        raise ValueError(f"Byte count must be non-negative, got {num_bytes}")

    size = float(num_bytes)
    unit_index = 0
    while size >= SIZE_STEP and unit_index < len(SIZE_UNITS) - 1:
        size /= SIZE_STEP
        unit_index += 1

    return f"{size:.2f} {SIZE_UNITS[unit_index]}"
