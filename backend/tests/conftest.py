"""
Fixtures communes : base SQLite en memoire par test, services isoles, client HTTP.
"""
import os

# Configuration de test avant tout import de l'application
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel

from app.core.database import build_engine, create_db_and_tables, get_session
from app.domain.entities import DayCreate
from app.domain.services.day_locks import DayLockRegistry
from app.domain.services.day_service import DayService
from app.domain.services.reminder_service import ReminderService


@pytest.fixture
def engine():
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    create_db_and_tables(test_engine)
    yield test_engine
    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as s:
        yield s


@pytest.fixture
def locks():
    return DayLockRegistry()


@pytest.fixture
def days(locks):
    return DayService(locks=locks, max_target=60)


@pytest.fixture
def reminders(locks):
    return ReminderService(locks=locks)


@pytest.fixture
def make_day(session, days):
    """Cree une journee via le service (valeurs par defaut : 06:00-23:00, 2 cigarettes)."""
    def _make(day_date="2024-01-01", wake_time="06:00", sleep_time="23:00", target=2):
        return days.create(session, DayCreate(
            date=day_date,
            wake_time=wake_time,
            sleep_time=sleep_time,
            target_cigarettes=target,
        ))
    return _make


@pytest.fixture
def client(engine):
    from app.main import app

    def _get_test_session():
        with Session(engine) as s:
            yield s

    app.dependency_overrides[get_session] = _get_test_session
    yield TestClient(app)
    app.dependency_overrides.clear()
