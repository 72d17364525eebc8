"""Fake implementations for testing."""

from tests.fakes.clock_fake import FakeClock
from tests.fakes.entity_fake import FakeEntity, FakeIntEntity, OtherFakeEntity

__all__ = ["FakeClock", "FakeEntity", "FakeIntEntity", "OtherFakeEntity"]
