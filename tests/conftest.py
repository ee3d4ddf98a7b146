"""Shared pytest fixtures."""

from datetime import UTC, datetime, timedelta

import pytest

from careerhub.config import Config
from careerhub.core.core import Core


class FakeClock:
    """Controllable time source for session expiry tests."""

    def __init__(self, start: datetime) -> None:
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current += delta


@pytest.fixture
def data_path(tmp_path):
    """Location of the posts file for a test."""
    return tmp_path / "data" / "posts.json"


@pytest.fixture
def config(data_path):
    """Configuration with default admin credentials and no notification channels."""
    return Config(_env_file=None, data_path=str(data_path), debug=True)


@pytest.fixture
def core(config):
    """Core wired to a temporary posts file."""
    return Core(config)


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 3, 1, 9, 0, tzinfo=UTC))


@pytest.fixture
def sample_post_fields():
    """Fields as the admin panel submits them."""
    return {
        "title": "Junior Backend Developer",
        "excerpt": "Python role for recent graduates",
        "content": "Build APIs with FastAPI.",
        "category": "job",
        "company": "Acme",
        "location": "Pune",
        "salary": "6-8 LPA",
        "experience": "fresher",
        "tags": ["python", "backend"],
        "isRemote": True,
        "applicationDeadline": "2026-12-01",
    }
