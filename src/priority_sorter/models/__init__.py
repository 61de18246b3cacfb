"""Shared database models."""

from .base import Base
from .build import Build
from .job import Job, JobGroup
from .queue import QueuedItem

__all__ = ["Base", "Build", "Job", "JobGroup", "QueuedItem"]
