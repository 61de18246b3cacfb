"""Conversion of legacy (unbounded, lower-is-more-urgent) priorities.

The batch side, which rewrites stored job properties, lives in
:mod:`priority_sorter.migration`.
"""

from __future__ import annotations

from collections.abc import Iterable

from .entries import LegacyRange
from .scaling import scale


def detect_legacy_range(priorities: Iterable[int | None]) -> LegacyRange | None:
    """Scan legacy priorities for their observed extremes.

    Args:
        priorities: Legacy priority per job, None where a job has none

    Returns:
        The observed range, or None when no job carries a legacy priority
    """
    minimum: int | None = None
    maximum: int | None = None
    for priority in priorities:
        if priority is None:
            continue
        minimum = priority if minimum is None else min(minimum, priority)
        maximum = priority if maximum is None else max(maximum, priority)

    if minimum is None or maximum is None:
        return None
    return LegacyRange(minimum=minimum, maximum=maximum)


def normalized_offset(minimum: int) -> int:
    """Amount to add to a legacy value so the range starts at 1."""
    return -minimum + 1


def inverse_and_normalize(minimum: int, maximum: int, value: int) -> int:
    """Shift into the positive range and flip lower-is-urgent to higher-is-urgent."""
    offset = normalized_offset(minimum)
    maximum += offset
    value += offset
    return maximum - value + 1


def legacy_to_advanced(minimum: int, maximum: int, bucket_count: int, value: int) -> int:
    """Convert one legacy priority into an advanced bucket priority.

    Args:
        minimum: Smallest legacy priority currently configured
        maximum: Largest legacy priority currently configured
        bucket_count: Number of advanced priority buckets
        value: Legacy priority to convert

    Returns:
        Advanced priority in [1, bucket_count]
    """
    offset = normalized_offset(minimum)
    normalized = inverse_and_normalize(minimum, maximum, value)
    return scale(maximum + offset, bucket_count, normalized)
