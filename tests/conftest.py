"""
Pytest configuration and shared fixtures

Nothing here talks to the real Adzuna API: HTTP goes through
httpx.MockTransport and backoff delays are recorded instead of slept.

Learn more: https://docs.pytest.org/en/stable/fixture.html
"""

import logging
from typing import Callable, List

import httpx
import pytest

from jobagent.settings import AdzunaSettings


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logger() rewires the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def settings() -> AdzunaSettings:
    """Settings with fake credentials and the production timeout/retry policy."""
    return AdzunaSettings(app_id="test-id", app_key="test-key")


@pytest.fixture
def no_env_credentials(monkeypatch):
    """Make sure a developer's real credentials don't leak into a test."""
    monkeypatch.delenv("ADZUNA_APP_ID", raising=False)
    monkeypatch.delenv("ADZUNA_APP_KEY", raising=False)


@pytest.fixture
def adzuna_job() -> dict:
    """A single entry from Adzuna's "results" array."""
    return {
        "id": "4820938471",
        "title": "Senior Data Engineer",
        "company": {"display_name": "Acme Corp"},
        "location": {
            "display_name": "San Francisco, California",
            "area": ["US", "California", "San Francisco"],
        },
        "description": "Bachelor's degree required. 5 years experience with Python and SQL.",
        "salary_min": 80000,
        "salary_max": 120000,
        "redirect_url": "https://www.adzuna.com/land/ad/4820938471",
        "category": {"label": "IT Jobs"},
        "contract_type": "permanent",
        "created": "2025-09-26T07:20:13Z",
    }


@pytest.fixture
def adzuna_payload(adzuna_job) -> dict:
    """A full search response with two results."""
    second = {
        "id": "4820938472",
        "title": "Analytics Engineer",
        "company": {"display_name": "Globex Inc"},
        "location": {"display_name": "Remote"},
        "description": "Build dbt models for the finance team.",
        "redirect_url": "https://www.adzuna.com/land/ad/4820938472",
    }
    return {"results": [adzuna_job, second], "count": 2, "mean": 100000.0}


class SleepRecorder:
    """Async stand-in for asyncio.sleep that only remembers the delays."""

    def __init__(self):
        self.delays: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def fake_sleep() -> SleepRecorder:
    return SleepRecorder()


class RecordingTransport(httpx.MockTransport):
    """MockTransport that also keeps every request it served."""

    def __init__(self, handler: Callable):
        self.requests: List[httpx.Request] = []

        async def _handler(request: httpx.Request):
            self.requests.append(request)
            response = handler(request)
            if hasattr(response, "__await__"):
                response = await response
            return response

        super().__init__(_handler)


@pytest.fixture
def make_transport() -> Callable[[Callable], RecordingTransport]:
    """Build a RecordingTransport from a request handler (sync or async)."""
    return RecordingTransport


def pytest_configure(config):
    """
    Register custom pytest markers.

    - pytest -m unit        (run only unit tests)
    - pytest -m "not slow"  (skip slow tests)
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test (isolated, fast)"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running (>1 second)"
    )
