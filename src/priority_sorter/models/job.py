"""Job and job group models holding configured priorities."""

from typing import TYPE_CHECKING, override

from sqlalchemy import BigInteger, Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base

if TYPE_CHECKING:
    from ..schemas import JobGroupRecord, JobRecord


class Job(Base):
    """Job model storing its priority properties and health.

    A job carries at most one of:
    - legacy_priority: unbounded integer, lower means more urgent
    - advanced_priority: bucket in [1, N], higher means more urgent

    health_score is maintained by the host's health pipeline (0-100).
    """

    __tablename__ = "jobs"  # pyright: ignore[reportUnannotatedClassAttribute]

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, unique=True, nullable=False, index=True)

    legacy_priority: Mapped[int | None] = mapped_column(Integer, nullable=True)
    advanced_priority: Mapped[int | None] = mapped_column(Integer, nullable=True)
    use_job_priority: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    health_score: Mapped[int] = mapped_column(Integer, default=100, nullable=False)

    updated_at: Mapped[int | None] = mapped_column(BigInteger, nullable=True)

    @override
    def __repr__(self) -> str:
        return (
            f"<Job(name={self.name}, legacy_priority={self.legacy_priority}, "
            f"advanced_priority={self.advanced_priority})>"
        )

    def to_job_record(self) -> "JobRecord":
        """Convert SQLAlchemy Job to Pydantic JobRecord."""
        from ..schemas import JobRecord

        return JobRecord(
            name=self.name,
            legacy_priority=self.legacy_priority,
            advanced_priority=self.advanced_priority,
            use_job_priority=self.use_job_priority,
            health_score=self.health_score,
        )


class JobGroup(Base):
    """Named group of jobs sharing a priority bucket."""

    __tablename__ = "job_groups"  # pyright: ignore[reportUnannotatedClassAttribute]

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    priority: Mapped[int] = mapped_column(Integer, nullable=False)

    @override
    def __repr__(self) -> str:
        return f"<JobGroup(name={self.name}, priority={self.priority})>"

    def to_job_group_record(self) -> "JobGroupRecord":
        from ..schemas import JobGroupRecord

        return JobGroupRecord(name=self.name, priority=self.priority)
