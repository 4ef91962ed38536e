"""
Shared test fixtures and configuration for REM Server tests.
"""
import json
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from remserver import create_app
from remserver.config import TestConfig
from remserver.services.remserver import RemServer
from remserver.storage.session_store import MemorySessionStore


SAMPLE_USERS = [
    {"id": 1, "name": "Ada"},
    {"id": 2, "name": "Brian"},
    {"id": 3, "name": "Cleo"},
]


@pytest.fixture
def dataset_dir(tmp_path: Path) -> Path:
    """Create a temporary directory holding a users and an empty books dataset."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    write_dataset(data_dir / "users.json", SAMPLE_USERS)
    write_dataset(data_dir / "books.json", [])
    return data_dir


@pytest.fixture
def dataset_files(dataset_dir: Path) -> list[str]:
    return [str(dataset_dir / "books.json"), str(dataset_dir / "users.json")]


@pytest.fixture
def app(dataset_files, tmp_path: Path) -> Flask:
    """Create a test Flask application seeded from the temporary datasets."""

    class _Config(TestConfig):
        REMSERVER_DATASETS = dataset_files
        SESSION_DIR = tmp_path / "sessions"

    app = create_app(_Config)
    app.config.update({
        "TESTING": True,
    })
    yield app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a Flask test client. One client is one session."""
    return app.test_client()


@pytest.fixture
def session_store() -> MemorySessionStore:
    return MemorySessionStore()


@pytest.fixture
def remserver(session_store, dataset_files) -> RemServer:
    """An engine over an in-memory session, configured but not initiated."""
    return RemServer(session_store).configure(dataset_files)


# Helper functions for tests

def write_dataset(path: Path, items) -> Path:
    """Write a JSON dataset file."""
    path.write_text(json.dumps(items), encoding="utf-8")
    return path
