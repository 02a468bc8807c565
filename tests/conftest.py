"""Pytest configuration for global fixtures and logging setup."""
from __future__ import annotations

import os
from typing import Callable, Iterable

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ["DATABASE_URL"] = os.environ.get("TEST_DATABASE_URL") or "sqlite://"
os.environ["SEED_ON_STARTUP"] = "false"

from app.logging_config import configure_logging

configure_logging()

from app.database import Base, get_db
from app.main import app
from app.models.database_models import Exercise


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database shared by every connection in a test."""

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Session:
    """Session bound to the per-test database."""

    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def test_client(engine) -> TestClient:
    """Provide a FastAPI test client backed by the per-test database."""

    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def add_exercise(db_session: Session) -> Callable[..., Exercise]:
    """Factory inserting a catalog exercise with sensible defaults."""

    def _add(
        name: str,
        muscle_group: str = "Legs",
        equipment: Iterable[str] = ("bodyweight_only",),
    ) -> Exercise:
        exercise = Exercise(
            name=name,
            muscle_group=muscle_group,
            equipment_needed=list(equipment),
            instructions=f"Perform {name} with control",
            runner_benefit=f"{name} builds strength for running",
        )
        db_session.add(exercise)
        db_session.commit()
        return exercise

    return _add
