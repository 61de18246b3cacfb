"""SQLAlchemy implementation of the TaskStore interface.

Besides the read-all / write-each operations used by migrations, the store
holds the host-side bookkeeping the sorter consumes:
- Completed build durations (for average durations)
- Queued items (for queue snapshots)
"""

import logging
import time
from typing import override

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from .boosts import average_duration
from .entries import UNKNOWN_DURATION, QueueEntry
from .models import Build, Job, JobGroup, QueuedItem
from .schemas import JobGroupRecord, JobRecord
from .task_store import TaskStore, TaskStoreError

logger = logging.getLogger(__name__)


class _UnknownTask:
    """Queued task without a job row; has neither priority nor health."""

    def __init__(self, name: str):
        self.name = name


class SQLAlchemyTaskStore(TaskStore):
    """SQLAlchemy implementation of TaskStore.

    Example:
        session_factory = create_session_factory(engine)
        store = SQLAlchemyTaskStore(session_factory)

        store.add_job(JobRecord(name="nightly", advanced_priority=4))
        store.enqueue("nightly")

        entries = store.queue_snapshot(min_builds=3)
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        """Initialize store with session factory.

        Args:
            session_factory: SQLAlchemy session factory (sessionmaker)
        """
        self.session_factory: sessionmaker[Session] = session_factory

    # -------------------------------------------------------------------------
    # Jobs
    # -------------------------------------------------------------------------

    def add_job(self, job: JobRecord) -> bool:
        """Save a job's priority configuration.

        Args:
            job: Pydantic JobRecord to save

        Returns:
            True if the job was saved, False if a job with that name exists
        """
        with self.session_factory() as session:
            session.add(
                Job(
                    name=job.name,
                    legacy_priority=job.legacy_priority,
                    advanced_priority=job.advanced_priority,
                    use_job_priority=job.use_job_priority,
                    health_score=job.health_score,
                    updated_at=int(time.time() * 1000),
                )
            )
            try:
                session.commit()
            except IntegrityError:
                session.rollback()
                logger.warning(f"Job {job.name} already exists")
                return False
            return True

    def get_job(self, name: str) -> JobRecord | None:
        with self.session_factory() as session:
            db_job = session.execute(select(Job).where(Job.name == name)).scalar_one_or_none()
            if db_job:
                return db_job.to_job_record()
            return None

    @override
    def list_jobs(self) -> list[JobRecord]:
        with self.session_factory() as session:
            db_jobs = session.execute(select(Job).order_by(Job.id)).scalars().all()
            return [db_job.to_job_record() for db_job in db_jobs]

    @override
    def save_advanced_priority(self, name: str, priority: int, use_job_priority: bool) -> None:
        self._update_job(
            name,
            advanced_priority=priority,
            use_job_priority=use_job_priority,
        )

    @override
    def remove_legacy_priority(self, name: str) -> None:
        self._update_job(name, legacy_priority=None)

    def set_health_score(self, name: str, health_score: int) -> None:
        self._update_job(name, health_score=health_score)

    def _update_job(self, name: str, **values: object) -> None:
        values["updated_at"] = int(time.time() * 1000)
        stmt = update(Job).where(Job.name == name).values(**values).returning(Job.name)
        try:
            with self.session_factory() as session:
                updated_name: str | None = session.execute(stmt).scalar_one_or_none()
                session.commit()
        except SQLAlchemyError as e:
            raise TaskStoreError(f"Failed to update job {name}: {e}") from e

        if updated_name is None:
            raise TaskStoreError(f"Job {name} not found")

    # -------------------------------------------------------------------------
    # Job groups
    # -------------------------------------------------------------------------

    def add_job_group(self, group: JobGroupRecord) -> None:
        with self.session_factory() as session:
            session.add(JobGroup(name=group.name, priority=group.priority))
            session.commit()

    @override
    def list_job_groups(self) -> list[JobGroupRecord]:
        with self.session_factory() as session:
            groups = session.execute(select(JobGroup).order_by(JobGroup.id)).scalars().all()
            return [group.to_job_group_record() for group in groups]

    @override
    def save_job_group_priority(self, name: str, priority: int) -> None:
        stmt = (
            update(JobGroup)
            .where(JobGroup.name == name)
            .values(priority=priority)
            .returning(JobGroup.name)
        )
        try:
            with self.session_factory() as session:
                updated_name: str | None = session.execute(stmt).scalar_one_or_none()
                session.commit()
        except SQLAlchemyError as e:
            raise TaskStoreError(f"Failed to update job group {name}: {e}") from e

        if updated_name is None:
            raise TaskStoreError(f"Job group {name} not found")

    # -------------------------------------------------------------------------
    # Build history
    # -------------------------------------------------------------------------

    def record_build(self, job_name: str, duration_ms: int, completed_at: int | None = None) -> None:
        """Record a completed run of a job."""
        with self.session_factory() as session:
            session.add(
                Build(
                    job_name=job_name,
                    duration_ms=duration_ms,
                    completed_at=completed_at
                    if completed_at is not None
                    else int(time.time() * 1000),
                )
            )
            session.commit()

    def average_duration(self, job_name: str, min_builds: int) -> float:
        """Average completed-run duration, UNKNOWN_DURATION below ``min_builds`` runs."""
        with self.session_factory() as session:
            durations = (
                session.execute(select(Build.duration_ms).where(Build.job_name == job_name))
                .scalars()
                .all()
            )
        return average_duration(durations, min_builds)

    # -------------------------------------------------------------------------
    # Queue
    # -------------------------------------------------------------------------

    def enqueue(self, job_name: str, buildable_since: int | None = None) -> None:
        """Add a buildable item for a job; its arrival time defaults to now."""
        with self.session_factory() as session:
            session.add(
                QueuedItem(
                    job_name=job_name,
                    buildable_since=buildable_since
                    if buildable_since is not None
                    else int(time.time() * 1000),
                )
            )
            session.commit()

    def dequeue(self, job_name: str) -> bool:
        with self.session_factory() as session:
            stmt = delete(QueuedItem).where(QueuedItem.job_name == job_name)
            deleted = session.execute(stmt).rowcount
            session.commit()
            return deleted > 0

    def queue_snapshot(self, min_builds: int | None = None) -> list[QueueEntry]:
        """Freeze the current queue into QueueEntry values.

        Args:
            min_builds: Completed runs required for an average duration; when
                None durations are not looked up and stay unknown

        Returns:
            Entries in arrival order
        """
        with self.session_factory() as session:
            rows = session.execute(
                select(QueuedItem, Job)
                .join(Job, Job.name == QueuedItem.job_name, isouter=True)
                .order_by(QueuedItem.buildable_since, QueuedItem.id)
            ).all()
            tasks = [
                (
                    job.to_job_record() if job is not None else _UnknownTask(item.job_name),
                    item.buildable_since,
                )
                for item, job in rows
            ]

        entries: list[QueueEntry] = []
        for task, buildable_since in tasks:
            duration = (
                self.average_duration(task.name, min_builds)
                if min_builds is not None
                else UNKNOWN_DURATION
            )
            entries.append(
                QueueEntry.from_task(task, buildable_since, average_duration=duration)
            )
        return entries
