"""Base priority lookup."""

from __future__ import annotations

from typing import Any

from .entries import LOWEST_PRIORITY, PriorityProperty, QueueEntry


def priority_property_of(task: Any) -> tuple[bool, PriorityProperty | None]:
    """Return (supports_priority, property) for a host task.

    A task supports priorities when it exposes a callable
    ``get_priority_property``.
    """
    accessor = getattr(task, "get_priority_property", None)
    if not callable(accessor):
        return (False, None)
    return (True, accessor())


def resolve_priority(entry: QueueEntry, default_priority: int) -> int:
    """Resolve the base priority of a queue entry.

    Args:
        entry: Wrapped queue entry
        default_priority: System default for tasks without a configured priority

    Returns:
        LOWEST_PRIORITY for unrecognized task kinds, the default when no
        property is set, otherwise the stored priority verbatim
    """
    if not entry.supports_priority:
        # Should not happen, but rank unknown kinds below everything else.
        return LOWEST_PRIORITY
    if entry.priority_property is None:
        return default_priority
    return entry.priority_property.priority


def resolve_task_priority(task: Any, default_priority: int) -> int:
    """Resolve the base priority of an unwrapped host task."""
    supports_priority, priority_property = priority_property_of(task)
    if not supports_priority:
        return LOWEST_PRIORITY
    if priority_property is None:
        return default_priority
    return priority_property.priority
