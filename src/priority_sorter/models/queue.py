"""Queued item model for priority-based build ordering."""

from typing import override

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class QueuedItem(Base):
    """Buildable item waiting in the build queue.

    job_name may refer to a task that has no row in the jobs table; such
    items are treated as an unrecognized task kind when sorted.
    """

    __tablename__ = "queued_items"  # pyright: ignore[reportUnannotatedClassAttribute]

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    job_name: Mapped[str] = mapped_column(String, unique=True, nullable=False, index=True)
    buildable_since: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)

    @override
    def __repr__(self):
        return f"<QueuedItem(job_name={self.job_name}, buildable_since={self.buildable_since})>"
