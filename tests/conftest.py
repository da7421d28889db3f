# tests/conftest.py
import os

# The database module refuses to import without a URL; tests build their own engines.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FILE", os.devnull)

from datetime import date, datetime
from types import SimpleNamespace

import pytest
from sqlalchemy.orm import sessionmaker

from moodjournal.core.database import Base, build_engine, get_db
from moodjournal.core.clock import get_today, get_now
import moodjournal.db.models  # registers mood_entries on Base.metadata

TODAY = date(2024, 1, 20)
NOW = datetime(2024, 1, 20, 9, 30)


@pytest.fixture
def engine():
    eng = build_engine("sqlite://")
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def clock():
    """Mutable fixed clock shared by the API overrides."""
    return SimpleNamespace(today=TODAY, now=NOW)


@pytest.fixture
def client(session_factory, clock):
    from fastapi.testclient import TestClient
    from moodjournal.main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: clock.today
    app.dependency_overrides[get_now] = lambda: clock.now

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
