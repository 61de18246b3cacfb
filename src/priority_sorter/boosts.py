"""Multiplicative priority boosts from build duration and job health.

All functions are pure. Durations are in milliseconds but any common unit works.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Final

from .entries import FULL_HEALTH, UNKNOWN_DURATION

MIN_DURATION_BOOST: Final[float] = 0.25
MAX_DURATION_BOOST: Final[float] = 4.0


def duration_boost(average_duration: float, wait_time: float, threshold: float) -> float:
    """Compute the boost for a build from its average duration and wait time.

    Slow builds (average >= threshold) are penalised by threshold / average,
    softened by half the wait time relative to the average. Once a slow build
    has waited at least its own average duration it is boosted by
    wait / average instead. Fast builds are boosted by threshold / average,
    multiplied by wait / average once the wait exceeds the average.

    Args:
        average_duration: Average completed-run duration, or UNKNOWN_DURATION
        wait_time: Time the item has been buildable
        threshold: Slow build threshold

    Returns:
        Boost factor clamped to [MIN_DURATION_BOOST, MAX_DURATION_BOOST]
    """
    if average_duration < 0:
        return 1.0
    if average_duration == 0:
        return MAX_DURATION_BOOST

    if average_duration >= threshold:
        if wait_time >= average_duration:
            boost = wait_time / average_duration
        else:
            boost = threshold / average_duration
            if wait_time > 0:
                boost += wait_time / (2 * average_duration)
    else:
        boost = threshold / average_duration
        if wait_time > average_duration:
            boost *= wait_time / average_duration

    return min(MAX_DURATION_BOOST, max(MIN_DURATION_BOOST, boost))


def average_duration(durations: Sequence[float], min_builds: int) -> float:
    """Arithmetic mean of completed-run durations.

    Returns UNKNOWN_DURATION when fewer than ``min_builds`` runs exist, so a
    small sample never influences ordering.
    """
    if not durations or len(durations) < min_builds:
        return UNKNOWN_DURATION
    return sum(durations) / len(durations)


def health_boost(health: int, positive: bool) -> float:
    """Boost in [0.5, 1.5] from a 0-100 health score.

    A positive boost moves unhealthy jobs up (retry sooner), a negative one
    moves them down (make them wait).
    """
    adjust = (FULL_HEALTH - health) / 200
    if positive:
        return 1.0 + adjust
    return 1.0 - adjust


def health_of(task: Any) -> int:
    """Health score of a task; task kinds without a health concept are fully healthy."""
    accessor = getattr(task, "get_health_score", None)
    if not callable(accessor):
        return FULL_HEALTH
    return accessor()
