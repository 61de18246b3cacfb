"""Build queue ordering by configured priority, duration and health boosts."""

# Public API - pure priority engine
from .boosts import average_duration, duration_boost, health_boost
from .entries import LegacyRange, PriorityProperty, QueueEntry
from .legacy import detect_legacy_range, legacy_to_advanced
from .resolver import resolve_priority, resolve_task_priority
from .scaling import scale
from .sorter import QueueComparator, fifo_compare, sort_queue

# Public API - configuration and services
from .config import Config
from .migration import MigrationReport, PriorityMigrationService
from .schemas import BoostConfig, JobGroupRecord, JobRecord
from .shared_db import SQLAlchemyTaskStore
from .task_store import TaskStore, TaskStoreError

__all__ = [
    # Engine
    "QueueComparator",
    "QueueEntry",
    "PriorityProperty",
    "LegacyRange",
    "average_duration",
    "detect_legacy_range",
    "duration_boost",
    "fifo_compare",
    "health_boost",
    "legacy_to_advanced",
    "resolve_priority",
    "resolve_task_priority",
    "scale",
    "sort_queue",
    # Configuration
    "Config",
    "BoostConfig",
    # Services
    "PriorityMigrationService",
    "MigrationReport",
    "SQLAlchemyTaskStore",
    "TaskStore",
    "TaskStoreError",
    # Pydantic Models
    "JobRecord",
    "JobGroupRecord",
]
