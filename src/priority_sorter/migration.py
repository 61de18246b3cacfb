"""Administrative priority migrations.

Two batch operations rewrite stored priorities:
- Rescaling every advanced job and job group priority when the number of
  priority buckets changes
- Converting legacy priorities into advanced ones

Both read everything first, compute new values with the pure functions in
:mod:`priority_sorter.scaling` and :mod:`priority_sorter.legacy`, then write
job by job. A failed write is logged, recorded in the report and skipped.

Callers must serialize migrations against each other and against sort passes.
"""

import logging
from dataclasses import dataclass, field

from .entries import LegacyRange
from .legacy import detect_legacy_range, legacy_to_advanced
from .mqtt import Broadcaster, NoOpBroadcaster
from .scaling import scale
from .schemas import BoostConfig
from .task_store import TaskStore, TaskStoreError

logger = logging.getLogger(__name__)

PRIORITY_CHANGED_EVENT = "priority_changed"


@dataclass
class MigrationFailure:
    name: str
    operation: str
    error: str


@dataclass
class MigrationReport:
    """Outcome of one migration batch."""

    updated: dict[str, int] = field(default_factory=dict)
    updated_groups: dict[str, int] = field(default_factory=dict)
    removed_legacy: list[str] = field(default_factory=list)
    failures: list[MigrationFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class PriorityMigrationService:
    """Rewrites stored priorities on configuration changes.

    Example:
        service = PriorityMigrationService(store)
        report = service.apply_configuration(previous, new, convert_legacy=True)
        for failure in report.failures:
            print(failure.name, failure.error)
    """

    def __init__(self, store: TaskStore, broadcaster: Broadcaster | None = None):
        """Initialize service.

        Args:
            store: Job configuration store
            broadcaster: Receives a priority_changed event per rewritten job
        """
        self.store: TaskStore = store
        self.broadcaster: Broadcaster = broadcaster or NoOpBroadcaster()

    def check_legacy(self) -> LegacyRange | None:
        """Scan all jobs for legacy priorities.

        Computed fresh on every call since jobs may have been added, removed
        or edited since the last check.

        Returns:
            Observed legacy range, or None when legacy mode is inactive
        """
        jobs = self.store.list_jobs()
        return detect_legacy_range(job.legacy_priority for job in jobs)

    def update_priorities(self, previous_count: int, new_count: int) -> MigrationReport:
        """Rescale all advanced job and job group priorities to a new bucket count.

        Args:
            previous_count: Bucket count the stored priorities are expressed in
            new_count: New bucket count

        Returns:
            MigrationReport with every rescaled job and group
        """
        report = MigrationReport()
        logger.info(f"Rescaling priorities from {previous_count} to {new_count} buckets")

        for job in self.store.list_jobs():
            if job.advanced_priority is None:
                continue
            new_priority = scale(previous_count, new_count, job.advanced_priority)
            try:
                self.store.save_advanced_priority(job.name, new_priority, job.use_job_priority)
            except TaskStoreError as e:
                logger.warning(f"Failed to update advanced job priority of {job.name}: {e}")
                report.failures.append(MigrationFailure(job.name, "rescale", str(e)))
                continue
            report.updated[job.name] = new_priority
            self._publish(job.name, job.advanced_priority, new_priority)

        for group in self.store.list_job_groups():
            new_priority = scale(previous_count, new_count, group.priority)
            try:
                self.store.save_job_group_priority(group.name, new_priority)
            except TaskStoreError as e:
                logger.warning(f"Failed to update priority of job group {group.name}: {e}")
                report.failures.append(MigrationFailure(group.name, "rescale_group", str(e)))
                continue
            report.updated_groups[group.name] = new_priority

        return report

    def convert_legacy_to_advanced(self, config: BoostConfig) -> MigrationReport:
        """Replace every legacy priority with an equivalent advanced priority.

        The legacy range is re-detected first so values are never converted
        against a stale range. Advanced properties are only attached when the
        configuration allows priorities on jobs; legacy properties are removed
        either way.

        Args:
            config: Configuration providing the bucket count

        Returns:
            MigrationReport; empty when no legacy priorities exist
        """
        report = MigrationReport()
        legacy_range = self.check_legacy()
        if legacy_range is None:
            logger.info("No legacy priorities found, nothing to convert")
            return report

        logger.info(
            f"Converting legacy priorities in [{legacy_range.minimum}, {legacy_range.maximum}] "
            f"to {config.number_of_priorities} buckets"
        )
        for job in self.store.list_jobs():
            if job.legacy_priority is None:
                continue
            if config.allow_priority_on_jobs:
                advanced_priority = legacy_to_advanced(
                    legacy_range.minimum,
                    legacy_range.maximum,
                    config.number_of_priorities,
                    job.legacy_priority,
                )
                try:
                    self.store.save_advanced_priority(job.name, advanced_priority, True)
                except TaskStoreError as e:
                    logger.warning(f"Failed to add advanced job priority to {job.name}: {e}")
                    report.failures.append(MigrationFailure(job.name, "add_advanced", str(e)))
                else:
                    report.updated[job.name] = advanced_priority
                    self._publish(job.name, job.legacy_priority, advanced_priority)
            try:
                self.store.remove_legacy_priority(job.name)
            except TaskStoreError as e:
                logger.warning(f"Failed to remove legacy job priority from {job.name}: {e}")
                report.failures.append(MigrationFailure(job.name, "remove_legacy", str(e)))
            else:
                report.removed_legacy.append(job.name)

        return report

    def apply_configuration(
        self,
        previous: BoostConfig,
        new: BoostConfig,
        *,
        convert_legacy: bool = False,
    ) -> MigrationReport:
        """Bring stored priorities in line with a new configuration.

        In legacy mode priorities are converted when requested and otherwise
        left alone. Outside legacy mode they are rescaled if the bucket count
        changed.
        """
        if self.check_legacy() is not None:
            if convert_legacy:
                return self.convert_legacy_to_advanced(new)
            return MigrationReport()
        if previous.number_of_priorities != new.number_of_priorities:
            return self.update_priorities(previous.number_of_priorities, new.number_of_priorities)
        return MigrationReport()

    def _publish(self, name: str, previous: int, priority: int) -> None:
        _ = self.broadcaster.publish_event(
            PRIORITY_CHANGED_EVENT, name, {"previous": previous, "priority": priority}
        )
