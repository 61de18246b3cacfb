"""Rescaling of bucket priorities between bucket counts."""

from __future__ import annotations

from .entries import USE_DEFAULT_PRIORITY


def scale(old_bucket_count: int, new_bucket_count: int, priority: int) -> int:
    """Map a 1-based priority in [1, old] onto [1, new].

    With ``p = (priority - 1) / (old - 1)`` the lower half of the range rounds
    down and the upper half rounds up, so the extremes always map onto the
    extremes. Integer arithmetic keeps ``scale(n, n, p) == p`` exact.

    Args:
        old_bucket_count: Bucket count the priority was expressed in
        new_bucket_count: Target bucket count
        priority: Priority to rescale

    Returns:
        Rescaled priority; USE_DEFAULT_PRIORITY is passed through unchanged
    """
    if priority == USE_DEFAULT_PRIORITY:
        return priority
    if old_bucket_count == 1:
        return 1

    numerator = (priority - 1) * (new_bucket_count - 1)
    denominator = old_bucket_count - 1
    if 2 * (priority - 1) <= denominator:
        return numerator // denominator + 1
    return -(-numerator // denominator) + 1
