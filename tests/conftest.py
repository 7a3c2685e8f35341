# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from stmta.config import Settings
from stmta.tasks.task_store import TaskStore

from .fakes import FakeClient, FakeCollection


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Explicit settings for tests; never read from the developer's env or .env.
    The URI points nowhere: tests use FakeCollection, not a real server.
    """
    return Settings(
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path,
        mongo_uri="mongodb://invalid.test:27017",
        db_name="todoApp_test",
        collection_name="todos",
        server_timeout_ms=50,
    )


@pytest.fixture()
def collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture()
def client() -> FakeClient:
    return FakeClient()


@pytest.fixture()
def store(collection: FakeCollection, client: FakeClient) -> TaskStore:
    return TaskStore(collection, client=client)
