"""Shared test fixtures for inkpost-core."""

import os
import sqlite3
import tempfile
from pathlib import Path

# Required configuration must exist before the app is imported
_startup_dir = tempfile.mkdtemp(prefix="inkpost-tests-")
os.environ["DATABASE_URL"] = os.path.join(_startup_dir, "inkpost.db")
os.environ["JWT_SECRET"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["EXPIRES_IN"] = "1d"
os.environ["BCRYPT_WORK_FACTOR"] = "4"

import pytest

from inkpost_core.main import app
from inkpost_core.config import settings
from inkpost_core.db import Core
from inkpost_core.auth import schemas, service


SCHEMA_PATH = Path(__file__).parent.parent / "inkpost_core" / "schema" / "schema.sql"


@pytest.fixture
def test_db():
    """Create in-memory test database with schema."""
    db = sqlite3.connect(":memory:")
    db.row_factory = sqlite3.Row
    db.executescript(SCHEMA_PATH.read_text())
    db.commit()

    yield db

    db.close()


@pytest.fixture
def core(test_db):
    """Core over the in-memory test database."""
    return Core(test_db)


@pytest.fixture
def client():
    """Create test client for API testing.

    Each test gets a fresh temp-file database.
    """
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    os.unlink(db_path)

    original_database_url = settings.database_url
    settings.database_url = db_path
    try:
        from inkpost_core.db import init_db
        init_db()

        app.config['TESTING'] = True
        with app.test_client() as client:
            yield client

    finally:
        settings.database_url = original_database_url
        try:
            os.unlink(db_path)
        except OSError:
            pass


@pytest.fixture
def test_user(core):
    """Create a registered user.

    Returns a tuple of (user, password) where user is the UserResponse.
    """
    password = "TestPass123"
    data = schemas.UserCreate(username="testuser", email="test@example.com", password=password)
    user = service.register_user(core, data)
    return user, password


@pytest.fixture
def blog_payload():
    """Complete body for POST /api/v1/blogs."""
    return {
        "title": "First post",
        "description": "Hello from the blog",
        "author_name": "Ann Writer",
        "blog_image": "https://example.com/cover.png",
        "publish_date": "2026-10-19",
        "total_likes": 3,
    }
