"""Unit tests for base priority resolution and queue entry wrapping."""

from conftest import ForeignTask, ProjectTask

from priority_sorter import PriorityProperty, QueueEntry, resolve_priority, resolve_task_priority
from priority_sorter.entries import UNKNOWN_DURATION


class TestResolvePriority:
    """Test suite for resolve_priority and resolve_task_priority."""

    def test_unknown_kind_gets_lowest_priority(self):
        """Test that tasks without a priority accessor resolve to 0."""
        entry = QueueEntry.from_task(ForeignTask("other"), 0)
        assert resolve_priority(entry, default_priority=3) == 0
        assert resolve_task_priority(ForeignTask("other"), default_priority=3) == 0

    def test_missing_property_uses_default(self):
        entry = QueueEntry.from_task(ProjectTask("job"), 0)
        assert resolve_priority(entry, default_priority=3) == 3
        assert resolve_task_priority(ProjectTask("job"), default_priority=7) == 7

    def test_property_is_returned_verbatim(self):
        """Test that stored priorities are not clamped."""
        for priority in (1, 5, 42, -8):
            task = ProjectTask("job", PriorityProperty(priority=priority))
            entry = QueueEntry.from_task(task, 0)
            assert resolve_priority(entry, default_priority=3) == priority
            assert resolve_task_priority(task, default_priority=3) == priority

    def test_unrecognized_object_never_raises(self):
        assert resolve_task_priority(object(), default_priority=3) == 0
        assert resolve_task_priority(None, default_priority=3) == 0


class TestQueueEntryFromTask:
    """Test suite for QueueEntry.from_task."""

    def test_capability_resolved_once(self):
        """Test that comparisons do not go back to the task."""
        task = ProjectTask("job", PriorityProperty(priority=4))
        entry = QueueEntry.from_task(task, 1000)
        for _ in range(5):
            _ = resolve_priority(entry, default_priority=3)
        assert task.lookups == 1

    def test_fields(self):
        task = ProjectTask("job", PriorityProperty(priority=4, use_job_priority=True), health=60)
        entry = QueueEntry.from_task(task, 1000, average_duration=2500.0)

        assert entry.task_id == "job"
        assert entry.buildable_since == 1000
        assert entry.supports_priority is True
        assert entry.priority_property == PriorityProperty(priority=4, use_job_priority=True)
        assert entry.average_duration == 2500.0
        assert entry.health == 60

    def test_unknown_kind_defaults(self):
        entry = QueueEntry.from_task(ForeignTask("other"), 5)

        assert entry.supports_priority is False
        assert entry.priority_property is None
        assert entry.average_duration == UNKNOWN_DURATION
        assert entry.health == 100

    def test_explicit_health_wins(self):
        entry = QueueEntry.from_task(ProjectTask("job", health=10), 0, health=90)
        assert entry.health == 90
