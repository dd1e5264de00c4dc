import os

# Must be set before rollcall modules read their settings
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("ADMIN_KEY", "test-admin-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./rollcall-test.db")

import pytest
from fastapi.testclient import TestClient

from rollcall.config import settings
from rollcall.database import database
from rollcall.main import app

ADMIN_KEY = "test-admin-key"


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "admin_key", ADMIN_KEY)
    database.url = f"sqlite+aiosqlite:///{tmp_path / 'rollcall.db'}"

    with TestClient(app) as test_client:
        yield test_client

    database.url = None


@pytest.fixture
def admin_headers():
    return {"x-admin-key": ADMIN_KEY}


@pytest.fixture
def api():
    """Prefix every route is mounted under"""
    return settings.api_prefix
