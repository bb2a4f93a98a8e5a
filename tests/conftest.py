"""Test bootstrap.

Point settings at an in-memory SQLite store before anything imports
telesurvey.main, and hand each test a fresh store. Route tests swap the
store dependency through ``app.dependency_overrides``.
"""

import os

os.environ["STORE_BACKEND"] = "sql"
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from telesurvey.db.base import build_engine
from telesurvey.deps import get_store
from telesurvey.main import app
from telesurvey.services.sql_store import SqlSurveyStore

from fakes import FakeStore


@pytest.fixture
def sql_store() -> SqlSurveyStore:
    return SqlSurveyStore(build_engine("sqlite://"), create_tables=True)


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def client_for():
    """Build a TestClient bound to the given store."""

    def _client(store) -> TestClient:
        app.dependency_overrides[get_store] = lambda: store
        return TestClient(app)

    yield _client
    app.dependency_overrides.clear()
