"""
Every test gets its own in-memory store. DB_URL is pinned before the app is
imported so nothing ever touches a database file on disk.
"""
import os

os.environ.setdefault("DB_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from gainz.db import get_db, init_db, make_in_memory_engine
from gainz.fixtures import seed_preview
from gainz.main import app
from gainz.repositories import SessionRepository, WorkoutRepository


@pytest.fixture
def engine():
    eng = make_in_memory_engine()
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    with session_factory() as s:
        yield s


@pytest.fixture
def client(session_factory):
    def override_get_db():
        s = session_factory()
        try:
            yield s
        finally:
            s.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_session(db):
    """Factory: a session holding workouts with the given names, in order."""
    def _make(*names):
        sess = SessionRepository(db, single_active=False).create()
        repo = WorkoutRepository(db)
        for name in names:
            repo.add(sess.uid, name)
        return sess
    return _make


@pytest.fixture
def seeded(db):
    return seed_preview(db)
