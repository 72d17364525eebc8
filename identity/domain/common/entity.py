"""Generic identity base for domain entities."""

from collections.abc import Hashable
from datetime import UTC, datetime
from typing import Generic, Self, TypeVar

from identity.domain.exceptions import MissingRequiredArgumentException

TId = TypeVar("TId", bound=Hashable)


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


class Entity(Generic[TId]):
    """
    Base class for objects distinguished by identity rather than by value.

    Two entities of the same concrete type are equal if and only if their
    ids are equal; every other attribute is ignored. The hash is the hash of
    the id, so an entity keeps its place in sets and dict keys no matter how
    often it is modified.

    Timestamps:
        created_at: fixed at construction
        updated_at: starts equal to created_at and only moves forward,
            through mark_modified()

    Type Parameters:
        TId: The identifier type (anything hashable: UUID, int, str, ...)
    """

    def __init__(self, id: TId):
        if id is None:
            raise MissingRequiredArgumentException("id")

        now = utc_now()
        self._id = id
        self._created_at = now
        self._updated_at = now

    @property
    def id(self) -> TId:
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def mark_modified(self) -> Self:
        """
        Record that the entity changed.

        This is the only place updated_at is written. A clock that steps
        backwards never moves updated_at behind its previous value.

        Returns:
            The entity itself, for chaining
        """
        self._updated_at = max(utc_now(), self._updated_at)
        return self

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True

        if not isinstance(other, Entity):
            return NotImplemented

        if type(self) is not type(other):
            return False

        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r})"
