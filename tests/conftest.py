"""
Shared pytest fixtures: an in-memory MongoDB per test, wired into the app.
"""
import os
from unittest.mock import MagicMock

os.environ["TESTING"] = "1"

import mongomock
import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from hospital_records.core.database import get_db
from hospital_records.main import app


@pytest.fixture
def test_db():
    """A fresh in-memory records database."""
    mongo_client = mongomock.MongoClient()
    yield mongo_client["hospital_records_test"]
    mongo_client.close()


@pytest.fixture
def client(test_db):
    app.dependency_overrides[get_db] = lambda: test_db
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def broken_db():
    """A database handle whose every collection and command fails like an unreachable server."""
    failure = ServerSelectionTimeoutError("connection refused")
    db = MagicMock()
    collection = db.__getitem__.return_value
    for operation in ("find", "find_one", "insert_one", "update_one", "delete_one"):
        getattr(collection, operation).side_effect = failure
    db.command.side_effect = failure
    return db


@pytest.fixture
def broken_client(broken_db):
    app.dependency_overrides[get_db] = lambda: broken_db
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client
    app.dependency_overrides.clear()
