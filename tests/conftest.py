"""Pytest configuration and fixtures for phonebook tests."""

import pytest
from fastapi.testclient import TestClient

from phonebook.database import create_db_engine, init_db
from phonebook.main import create_app
from phonebook.storage import PersonStore


@pytest.fixture
def engine(tmp_path):
    """Engine on a fresh SQLite file for each test."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'phonebook.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def person_store(engine):
    return PersonStore(engine)


@pytest.fixture
def app(person_store, tmp_path):
    """Application without a static frontend."""
    return create_app(person_store=person_store, static_dir=tmp_path / "no-dist")


@pytest.fixture
def client(app):
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def sample_person():
    return {"name": "Ada Lovelace", "number": "39-445323523"}
