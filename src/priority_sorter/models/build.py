"""Completed build model used to derive average durations."""

from typing import override

from sqlalchemy import BigInteger, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Build(Base):
    """One completed run of a job."""

    __tablename__ = "builds"  # pyright: ignore[reportUnannotatedClassAttribute]

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    job_name: Mapped[str] = mapped_column(String, nullable=False, index=True)
    duration_ms: Mapped[int] = mapped_column(BigInteger, nullable=False)
    completed_at: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)

    @override
    def __repr__(self):
        return f"<Build(job_name={self.job_name}, duration_ms={self.duration_ms})>"
