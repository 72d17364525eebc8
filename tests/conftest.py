"""Pytest configuration and fixtures.

This file contains shared fixtures that can be used across all tests.

These fixtures keep tests fast and deterministic:
- Value objects are built through their factories, like production code does
- Time is controlled with FakeClock instead of sleeping
- Settings are built explicitly and the settings cache is reset per test
"""

import pytest

from identity.domain.entities.user import User
from identity.domain.value_objects import Email, PasswordHash
from identity.infrastructure.config.settings import get_settings
from tests.fakes.clock_fake import FakeClock


@pytest.fixture
def fake_clock(monkeypatch) -> FakeClock:
    """
    Provide a FakeClock wired into the entity timestamp source.

    Every entity created or modified while this fixture is active reads
    its time from the fake clock.
    """
    clock = FakeClock()
    monkeypatch.setattr("identity.domain.common.entity.utc_now", clock)
    return clock


@pytest.fixture
def email() -> Email:
    """A valid, normalized email."""
    return Email.create("john.doe@example.com")


@pytest.fixture
def other_email() -> Email:
    """A second valid email, different from `email`."""
    return Email.create("patrick.malone@domain.co")


@pytest.fixture
def password_hash() -> PasswordHash:
    """
    An opaque password hash.

    The value mimics an Argon2 hash string, but the model never inspects it.
    """
    return PasswordHash.create("$argon2id$v=19$m=65536,t=3,p=4$c29tZXNhbHQ$aGFzaA")


@pytest.fixture
def sample_user(email, password_hash) -> User:
    """Create a sample user with both names set."""
    return User.create(email, "John", "Doe", password_hash)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make sure no test sees settings cached by another test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
