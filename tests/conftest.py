"""
pytest configuration (fixtures).

Endpoint tests talk to the real FastAPI app through ``TestClient`` with
the auto service replaced by a mock, so they exercise only the HTTP
mapping.  Service tests run against a throwaway SQLite file.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from autos_api.app.api.deps import get_auto_service
from autos_api.app.core import db
from autos_api.app.core.config import settings
from autos_api.app.main import app
from autos_api.app.schemas.auto import Auto
from autos_api.app.services.auto_service import AutoService


@pytest.fixture
def auto_service():
    """Mock service wired into the app for the duration of a test."""
    service = AsyncMock(spec=AutoService)
    app.dependency_overrides[get_auto_service] = lambda: service
    yield service
    app.dependency_overrides.clear()


@pytest.fixture
def client(auto_service):
    # Not used as a context manager: startup (and so the database) is skipped.
    return TestClient(app)


@pytest.fixture
def database(tmp_path, monkeypatch):
    """Point the app at a fresh, migrated SQLite file."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "autos.db"))
    db.init_db()
    return db.get_database_path()


def make_auto(year: int = 2000, vin: str = "XX89DM", **overrides) -> Auto:
    fields = {"color": "red", "make": "Honda", "model": "Civic", "year": year, "vin": vin}
    fields.update(overrides)
    return Auto(**fields)
