"""
Pydantic schemas for sorter configuration and stored job priorities.
Shared between the queue sorter and the administrative migration flows.
"""

from pydantic import BaseModel, ConfigDict, Field

from .entries import FULL_HEALTH, PriorityProperty


class BoostConfig(BaseModel):
    """Immutable configuration snapshot for one sort pass or migration call."""

    model_config = ConfigDict(frozen=True)

    number_of_priorities: int = Field(5, ge=1, description="Number of priority buckets (N)")
    default_priority: int = Field(3, description="Priority of jobs without a configured priority")
    slow_build_threshold_ms: int = Field(
        10 * 60 * 1000, gt=0, description="Average duration at which a build counts as slow"
    )
    min_builds_for_average: int = Field(
        3, ge=1, description="Completed runs required before an average duration is trusted"
    )
    duration_boost_enabled: bool = False
    health_boost_enabled: bool = False
    health_boost_positive: bool = Field(
        True, description="Boost unhealthy jobs up (True) or down (False)"
    )
    allow_priority_on_jobs: bool = True


class JobRecord(BaseModel):
    """Stored priority configuration of a job.

    Implements the task capability interface (``get_priority_property`` and
    ``get_health_score``) so it can be wrapped straight into a QueueEntry.
    """

    name: str
    legacy_priority: int | None = None
    advanced_priority: int | None = None
    use_job_priority: bool = False
    health_score: int = Field(FULL_HEALTH, ge=0, le=100)

    def get_priority_property(self) -> PriorityProperty | None:
        if self.advanced_priority is not None:
            return PriorityProperty(
                priority=self.advanced_priority, use_job_priority=self.use_job_priority
            )
        if self.legacy_priority is not None:
            return PriorityProperty(priority=self.legacy_priority, legacy=True)
        return None

    def get_health_score(self) -> int:
        return self.health_score


class JobGroupRecord(BaseModel):
    """A named group of jobs sharing one priority."""

    name: str
    priority: int
