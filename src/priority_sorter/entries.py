"""Value objects read by the priority engine.

Everything here is immutable and transient: a QueueEntry lives for one sort
pass, a LegacyRange for one legacy check.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final, Protocol, runtime_checkable

UNKNOWN_DURATION: Final[int] = -1
LOWEST_PRIORITY: Final[int] = 0
USE_DEFAULT_PRIORITY: Final[int] = -1
FULL_HEALTH: Final[int] = 100


@dataclass(frozen=True)
class PriorityProperty:
    """Priority configured on a job.

    Attributes:
        priority: Stored priority. Unbounded when ``legacy`` is set, otherwise a bucket in [1, N]
        use_job_priority: Advanced model only; derive priority from job performance
        legacy: True for the old flat scale where lower numbers meant more urgent
    """

    priority: int
    use_job_priority: bool = False
    legacy: bool = False


@runtime_checkable
class PrioritizedTask(Protocol):
    """A task kind that can carry a PriorityProperty."""

    def get_priority_property(self) -> PriorityProperty | None: ...


@dataclass(frozen=True)
class LegacyRange:
    """Observed [minimum, maximum] over all legacy priorities."""

    minimum: int
    maximum: int


@dataclass(frozen=True)
class QueueEntry:
    """Snapshot of one buildable item.

    Attributes:
        task_id: Identifier of the underlying task
        buildable_since: Time (ms since epoch) the item became buildable
        supports_priority: Whether the task exposes a priority property accessor
        priority_property: Property read at wrap time, None when not configured
        average_duration: Mean completed-run duration in ms, or UNKNOWN_DURATION
        health: Health score in [0, 100]
    """

    task_id: str
    buildable_since: int
    supports_priority: bool = False
    priority_property: PriorityProperty | None = None
    average_duration: float = UNKNOWN_DURATION
    health: int = FULL_HEALTH

    @classmethod
    def from_task(
        cls,
        task: Any,
        buildable_since: int,
        *,
        average_duration: float = UNKNOWN_DURATION,
        health: int | None = None,
    ) -> QueueEntry:
        """Wrap a host task, resolving its capabilities once.

        Args:
            task: Host task object of any kind
            buildable_since: Time (ms since epoch) the task became buildable
            average_duration: Already-extracted average duration or UNKNOWN_DURATION
            health: Already-extracted health score; looked up on the task when None

        Returns:
            Frozen QueueEntry
        """
        from .boosts import health_of
        from .resolver import priority_property_of

        supports_priority, priority_property = priority_property_of(task)
        return cls(
            task_id=str(getattr(task, "name", task)),
            buildable_since=buildable_since,
            supports_priority=supports_priority,
            priority_property=priority_property,
            average_duration=average_duration,
            health=health_of(task) if health is None else health,
        )
