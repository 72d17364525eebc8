"""Building blocks shared by every domain entity."""

from identity.domain.common.entity import Entity

__all__ = ["Entity"]
