"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire
import pytest

from fakeso.domain.model import User
from fakeso.domain.value import UserId

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="session", autouse=True)
def quiet_logfire():
    """Keep spans local and off the console during tests."""
    logfire.configure(send_to_logfire=False, console=False)


def at(minutes: int) -> datetime:
    """Timestamp ``minutes`` after a fixed base time.

    Ordering tests need distinct, predictable timestamps.
    """
    return BASE_TIME + timedelta(minutes=minutes)


def make_user(username: str = "alice", email: str | None = None) -> User:
    """Helper function to build a user account for tests.

    Args:
        username: Display name
        email: E-mail address (derived from the username by default)

    Returns:
        User entity with a fresh ID
    """
    return User(
        id=UserId(uuid4()),
        username=username,
        email=email or f"{username}@example.com",
        created_at=BASE_TIME,
    )
