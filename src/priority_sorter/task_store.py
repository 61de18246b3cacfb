"""Interface to the host's job configuration store."""

from abc import ABC, abstractmethod

from .schemas import JobGroupRecord, JobRecord


class TaskStoreError(Exception):
    """Raised when the store fails to read or persist a job's configuration."""


class TaskStore(ABC):
    """Read-all / write-each access to stored priorities.

    Used by the migration flows. Each write covers a single job or group so a
    failure can be reported and skipped without affecting the rest of a batch.
    """

    @abstractmethod
    def list_jobs(self) -> list[JobRecord]:
        """Return the priority configuration of every job."""

    @abstractmethod
    def save_advanced_priority(self, name: str, priority: int, use_job_priority: bool) -> None:
        """Attach (or replace) the advanced priority property of a job.

        Raises:
            TaskStoreError: If the job is unknown or the write fails
        """

    @abstractmethod
    def remove_legacy_priority(self, name: str) -> None:
        """Remove the legacy priority property of a job.

        Raises:
            TaskStoreError: If the job is unknown or the write fails
        """

    @abstractmethod
    def list_job_groups(self) -> list[JobGroupRecord]:
        """Return every job group."""

    @abstractmethod
    def save_job_group_priority(self, name: str, priority: int) -> None:
        """Set the priority of a job group.

        Raises:
            TaskStoreError: If the group is unknown or the write fails
        """
