"""
Tests for Habits API endpoints
"""
from unittest.mock import AsyncMock, Mock, patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.dao.session_maker import get_session
from app.habit.dao import HabitDAO
from app.main import app


@pytest.fixture
def mock_session():
    """Mock database session for API tests"""
    session = Mock()

    async def _override():
        yield session

    app.dependency_overrides[get_session] = _override
    yield session
    app.dependency_overrides.clear()


@pytest.fixture
def client(mock_session):
    """Test client for FastAPI, lifespan not started"""
    return TestClient(app, raise_server_exceptions=False)


def test_get_habits_empty(client):
    """Empty store returns an empty array"""
    with patch.object(HabitDAO, "find_all", new=AsyncMock(return_value=[])):
        response = client.get("/api/habits")

    assert response.status_code == 200
    assert response.json() == []


def test_get_habits_single_measurable_habit(client, mock_session, make_habit):
    """Measurable weekly habit without milestone"""
    find_all = AsyncMock(return_value=[make_habit()])
    with patch.object(HabitDAO, "find_all", new=find_all):
        response = client.get("/api/habits")

    assert response.status_code == 200
    assert response.json() == [
        {
            "id": "h_0194e8d2-7b6e-7c61-9f5e-2d6a1c3b4e5f",
            "name": "Running",
            "description": "Run around the park",
            "type": "Measurable",
            "frequency": {"type": "Weekly", "timesPerPeriod": 2},
            "target": {"value": 10, "unit": "km"},
            "status": "Ongoing",
            "isArchived": False,
            "endDate": None,
            "milestone": None,
            "createdAtUtc": "2025-01-19T12:00:00Z",
            "updatedAtUtc": None,
            "lastCompletedAtUtc": None,
        }
    ]
    find_all.assert_awaited_once_with(session=mock_session, filters=None)


def test_get_habits_keeps_store_order(client, make_habit, full_habit):
    habits = [make_habit(id="h_b"), full_habit, make_habit(id="h_a")]
    with patch.object(HabitDAO, "find_all", new=AsyncMock(return_value=habits)):
        response = client.get("/api/habits")

    data = response.json()
    assert [item["id"] for item in data] == ["h_b", "h_full", "h_a"]
    assert data[1]["milestone"] == {"target": 100, "current": 42}
    assert data[1]["endDate"] == "2025-12-31"
    assert data[1]["lastCompletedAtUtc"] == "2025-02-02T21:15:00Z"


def test_get_habits_store_failure_is_server_error(client):
    """Store errors are not translated and surface as 500"""
    error = OperationalError("SELECT", {}, Exception("connection refused"))
    with patch.object(HabitDAO, "find_all", new=AsyncMock(side_effect=error)):
        response = client.get("/api/habits")

    assert response.status_code == 500


def test_startup_aborts_when_migrations_fail():
    """Lifespan re-raises the migration error, the app never becomes ready"""
    with patch("app.main.apply_migrations", new=AsyncMock(side_effect=RuntimeError("migration failed"))):
        with pytest.raises(RuntimeError, match="migration failed"):
            with TestClient(app):
                pass


def test_startup_applies_migrations_before_serving(mock_session):
    apply_migrations = AsyncMock()
    with patch("app.main.apply_migrations", new=apply_migrations):
        with patch.object(HabitDAO, "find_all", new=AsyncMock(return_value=[])):
            with TestClient(app) as client:
                response = client.get("/api/habits")

    apply_migrations.assert_awaited_once_with()
    assert response.status_code == 200


def test_shutdown_disposes_engine(mock_session):
    """Connection pool is closed when the app stops"""
    engine = Mock()
    engine.dispose = AsyncMock()
    with patch("app.main.apply_migrations", new=AsyncMock()), patch("app.main.engine", new=engine):
        with TestClient(app):
            engine.dispose.assert_not_awaited()

    engine.dispose.assert_awaited_once_with()
