"""
Test fixtures for the FitTrack API.

Runs the app against a throwaway SQLite file (aiosqlite) so the suite needs
no PostgreSQL. Settings are read from the environment, so it is configured
here before anything under ``fittrack`` is imported.
"""

import os
import sys
import tempfile
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

_DB_DIR = tempfile.mkdtemp(prefix="fittrack-tests-")
os.environ["DATABASE_URL_OVERRIDE"] = f"sqlite+aiosqlite:///{_DB_DIR}/test.db"
os.environ["AUTO_CREATE_TABLES"] = "true"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["ENVIRONMENT"] = "test"

from fastapi.testclient import TestClient  # noqa: E402

from fittrack.main import app  # noqa: E402


# ---------------------------------------------------------------------------
# Core Test Client
# ---------------------------------------------------------------------------


@pytest.fixture
def client() -> TestClient:
    """TestClient with lifespan (creates tables on first use)."""
    with TestClient(app) as c:
        yield c


def register_user(client: TestClient, email: str | None = None, password: str = "secret-pass-1") -> Dict[str, Any]:
    email = email or f"user-{uuid.uuid4().hex[:12]}@fittrack.io"
    response = client.post("/api/v1/auth/register", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def auth_headers(client: TestClient) -> Dict[str, str]:
    """Bearer header for a freshly registered user (each test gets its own)."""
    body = register_user(client)
    return {"Authorization": f"Bearer {body['token']}"}


# ---------------------------------------------------------------------------
# Sample Data Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def push_day_payload() -> Dict[str, Any]:
    """Strength workout in the wire format the app pushes."""
    return {
        "workout_name": "Push Day",
        "workout_date": "2025-11-09T17:30:00Z",
        "duration_hours": 1,
        "duration_minutes": 30,
        "overall_rpe": 7,
        "estimated_calories": 1080,
        "activity_type": "strength",
        "exercises": [
            {
                "name": "Bench Press",
                "notes": "felt strong",
                "order": 0,
                "sets": [
                    {"weight": "185", "reps": "8", "rpe": 7.5},
                    {"weight": "195", "reps": "6", "rpe": None},
                ],
            },
            {
                "name": "Overhead Press",
                "notes": "",
                "order": 1,
                "sets": [{"weight": "95", "reps": "10", "rpe": 8}],
            },
        ],
    }


@pytest.fixture
def cardio_payload() -> Dict[str, Any]:
    return {
        "workout_name": "Morning Run",
        "workout_date": "2025-11-10T07:00:00Z",
        "duration_hours": 0,
        "duration_minutes": 40,
        "overall_rpe": 6,
        "estimated_calories": 0,
        "activity_type": "cardio",
        "exercises": [
            {
                "name": "Tempo",
                "notes": "",
                "order": 0,
                "sets": [{"weight": "3.1", "reps": "25", "rpe": 8.1}],
            }
        ],
    }


@pytest.fixture
def utc_date() -> datetime:
    return datetime(2025, 11, 9, 17, 30, tzinfo=timezone.utc)
