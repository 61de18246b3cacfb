"""Shared test fixtures for priority_sorter tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from priority_sorter import BoostConfig, PriorityProperty, SQLAlchemyTaskStore
from priority_sorter.models import Base
from priority_sorter.mqtt import shutdown_broadcaster

if TYPE_CHECKING:
    from collections.abc import Generator

    from sqlalchemy.engine import Engine

MINUTE_MS = 60 * 1000


class ProjectTask:
    """Task kind that carries a priority property and a health score."""

    def __init__(
        self,
        name: str,
        priority_property: PriorityProperty | None = None,
        health: int = 100,
    ):
        self.name = name
        self.priority_property = priority_property
        self.health = health
        self.lookups = 0

    def get_priority_property(self) -> PriorityProperty | None:
        self.lookups += 1
        return self.priority_property

    def get_health_score(self) -> int:
        return self.health


class ForeignTask:
    """Task kind with neither a priority property nor a health concept."""

    def __init__(self, name: str):
        self.name = name


@pytest.fixture
def in_memory_engine() -> Generator[Engine, None, None]:
    """Create SQLite in-memory engine with all tables created.

    Yields:
        Engine: SQLAlchemy engine with in-memory SQLite database
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(in_memory_engine: Engine) -> sessionmaker[Session]:
    """Create session factory bound to in-memory engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=in_memory_engine)


@pytest.fixture
def task_store(session_factory: sessionmaker[Session]) -> SQLAlchemyTaskStore:
    """Create SQLAlchemyTaskStore backed by the in-memory database."""
    return SQLAlchemyTaskStore(session_factory)


@pytest.fixture
def boost_config() -> BoostConfig:
    """Ten buckets, default priority 3, no boosts."""
    return BoostConfig(number_of_priorities=10, default_priority=3)


@pytest.fixture(autouse=True)
def reset_broadcaster() -> Generator[None, None, None]:
    """Make sure no global broadcaster leaks between tests."""
    yield
    shutdown_broadcaster()
