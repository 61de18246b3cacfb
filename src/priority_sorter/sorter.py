"""Queue comparator: higher score first, FIFO among equal scores."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from functools import cmp_to_key

from .boosts import duration_boost, health_boost
from .entries import QueueEntry
from .resolver import resolve_priority
from .schemas import BoostConfig

Comparator = Callable[[QueueEntry, QueueEntry], int]


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def fifo_compare(lhs: QueueEntry, rhs: QueueEntry) -> int:
    """Default comparator: whichever became buildable first goes first."""
    return _sign(lhs.buildable_since - rhs.buildable_since)


class QueueComparator:
    """Total-order comparator over a frozen queue snapshot.

    Holds no mutable state; the configuration and the pass start time are
    fixed at construction so every comparison in one sort pass sees the same
    wait times. Safe to share between threads.

    Example:
        comparator = QueueComparator(Config.boost_config())
        ordered = sorted(entries, key=comparator.sort_key)
    """

    def __init__(
        self,
        config: BoostConfig,
        now: int | None = None,
        fallback: Comparator = fifo_compare,
    ):
        """Initialize comparator.

        Args:
            config: Configuration snapshot for this sort pass
            now: Pass start time in ms since epoch, defaults to the current time
            fallback: Tie-break comparator, must order by arrival
        """
        self.config: BoostConfig = config
        self.now: int = int(time.time() * 1000) if now is None else now
        self.fallback: Comparator = fallback
        self.sort_key = cmp_to_key(self.compare)

    def score_of(self, entry: QueueEntry) -> float:
        """Resolved base priority multiplied by the enabled boosts."""
        score = float(resolve_priority(entry, self.config.default_priority))
        if self.config.duration_boost_enabled:
            wait_time = max(0, self.now - entry.buildable_since)
            score *= duration_boost(
                entry.average_duration, wait_time, self.config.slow_build_threshold_ms
            )
        if self.config.health_boost_enabled:
            score *= health_boost(entry.health, self.config.health_boost_positive)
        return score

    def compare(self, lhs: QueueEntry, rhs: QueueEntry) -> int:
        # Reversed so that higher scores sort first
        c = _sign(self.score_of(rhs) - self.score_of(lhs))
        if c == 0:
            return self.fallback(lhs, rhs)
        return c


def sort_queue(
    entries: Iterable[QueueEntry], config: BoostConfig, now: int | None = None
) -> list[QueueEntry]:
    """Return the queue snapshot in build order."""
    comparator = QueueComparator(config, now=now)
    return sorted(entries, key=comparator.sort_key)
