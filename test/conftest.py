from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Iterable

import httpx
import pytest
from dotenv import load_dotenv

TEST_ROOT = Path(__file__).resolve().parent
# Load test/.env first, then fallback to test/.env.example for defaults
load_dotenv(TEST_ROOT / ".env", override=False)
load_dotenv(TEST_ROOT / ".env.example", override=False)

# The application engine is built at import time, so point it at SQLite first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENABLE_FILE_LOGGING", "false")
os.environ.setdefault("SWAT_SECRET_KEY", "test-secret-key-with-enough-length-for-hs256")

# Import test settings after dotenv is loaded
from test.settings import test_settings  # noqa: E402


@pytest.fixture(scope="session")
def test_config():
    """Fixture providing test configuration from Pydantic settings model.

    Returns:
        TestSettings: Test configuration with all environment variables loaded
    """
    return test_settings


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    allowed_prefixes: Iterable[str] = (
        "http://mock",
        "https://mock",
        "http://localhost",
        "http://127.0.0.1",
        "http://0.0.0.0",
        "/",  # Allow relative paths (used by ASGI transport)
    )

    orig_sync = httpx._client.Client.request
    orig_async = httpx._client.AsyncClient.request

    def _is_allowed(url_str: str) -> bool:
        return any(url_str.startswith(p) for p in allowed_prefixes)

    def offline_sync(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return orig_sync(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard: {url_str}")

    async def offline_async(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return await orig_async(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard (async): {url_str}")

    monkeypatch.setattr(httpx._client.Client, "request", offline_sync, raising=True)
    monkeypatch.setattr(httpx._client.AsyncClient, "request", offline_async, raising=True)


# =====================================================================
# Sample data
# =====================================================================


@pytest.fixture
def sample_agency_data() -> Dict[str, Any]:
    return {
        "name": "Los Angeles Police Department",
        "jurisdiction": "Los Angeles, CA",
        "contact_name": "John Smith",
        "contact_email": "jsmith@lapd.gov",
        "contact_phone": "213-555-1234",
        "paid_status": False,
    }


@pytest.fixture
def sample_user_data() -> Dict[str, Any]:
    return {
        "first_name": "Jane",
        "last_name": "Doe",
        "email": "jane.doe@lapd.gov",
        "role": "agency",
        "password_hash": "$2b$12$abcdefghijklmnopqrstuuN2o1k3Ck0pFQ4m1i9b7S0ZpI8oQm1e",
    }


@pytest.fixture
def sample_personnel_data() -> Dict[str, Any]:
    return {
        "first_name": "Mike",
        "last_name": "Ramirez",
        "badge_number": "LA-1042",
        "email": "mramirez@lapd.gov",
        "role": "Entry Operator",
        "status": "available",
        "specialties": ["breaching"],
    }


@pytest.fixture
def sample_equipment_data() -> Dict[str, Any]:
    return {
        "name": "Ballistic Shield",
        "serial_number": "BS-2231",
        "category": "protective",
        "manufacturer": "Point Blank",
        "condition": "good",
        "status": "operational",
    }


@pytest.fixture
def sample_event_data() -> Dict[str, Any]:
    return {
        "title": "Monthly breaching drill",
        "date": "2026-10-20",
        "time": "09:30",
        "event_type": "training",
        "priority": "high",
    }


@pytest.fixture
def sample_message_data() -> Dict[str, Any]:
    return {
        "subject": "Assessment question",
        "content": "Should reserve operators be counted in the team size?",
        "category": "assessment",
    }

