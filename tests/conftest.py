import pytest
from fastapi.testclient import TestClient

from todo_api.db import Database, open_database
from todo_api.main import create_app


@pytest.fixture
def database(tmp_path) -> Database:
    """A fresh sqlite database with the todos table in place."""
    return open_database("sqlite3", str(tmp_path / "todos.db"))


@pytest.fixture
def app(database):
    return create_app(database)


@pytest.fixture
def client(app):
    return TestClient(app)
