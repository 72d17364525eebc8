"""User aggregate - pure business logic, no infrastructure."""

import logging
from typing import Optional
from uuid import UUID, uuid4

from identity.domain.common.entity import Entity
from identity.domain.exceptions import (
    InvalidEntityStateException,
    MissingRequiredArgumentException,
)
from identity.domain.value_objects import Email, PasswordHash

logger = logging.getLogger(__name__)


class User(Entity[UUID]):
    """
    User aggregate representing the business concept of a user.

    A user is identified by a UUID and owns two value objects: its Email and
    its PasswordHash. Both arrive already validated; the aggregate only checks
    that they are present and of the right type.

    Build users through the factories:
        User.create(...)       - brand new user, fresh random id
        User.reconstitute(...) - known identity, e.g. loaded from storage

    The password hash is kept private. It is never hashed, compared, or
    exposed here; that is the authentication collaborator's job.
    """

    def __init__(
        self,
        id: UUID,
        email: Email,
        first_name: Optional[str],
        last_name: Optional[str],
        password_hash: PasswordHash,
    ):
        super().__init__(id)

        if email is None:
            raise MissingRequiredArgumentException("email")
        if password_hash is None:
            raise MissingRequiredArgumentException("password_hash")

        if not isinstance(email, Email):
            raise InvalidEntityStateException(
                f"User email must be an Email value object, got {type(email).__name__}. "
                "Build it with Email.create()."
            )
        if not isinstance(password_hash, PasswordHash):
            raise InvalidEntityStateException(
                f"User password hash must be a PasswordHash value object, got "
                f"{type(password_hash).__name__}. Build it with PasswordHash.create()."
            )

        self._email = email
        self._first_name = first_name
        self._last_name = last_name
        self._password_hash = password_hash

    @classmethod
    def create(
        cls,
        email: Optional[Email],
        first_name: Optional[str],
        last_name: Optional[str],
        password_hash: PasswordHash,
    ) -> "User":
        """
        Create a brand new user with a random id.

        Args:
            email: Validated email address (required)
            first_name: Optional first name
            last_name: Optional last name
            password_hash: Pre-computed password hash (required)

        Returns:
            The new User

        Raises:
            MissingRequiredArgumentException: If email or password_hash is None
            InvalidEntityStateException: If either is not a value object
        """
        user = cls(uuid4(), email, first_name, last_name, password_hash)
        logger.debug("Created user %s", user.id)
        return user

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        email: Optional[Email],
        first_name: Optional[str],
        last_name: Optional[str],
        password_hash: PasswordHash,
    ) -> "User":
        """
        Rebuild a user whose identity is already known.

        Used by the persistence collaborator when loading a stored user.
        The id must be a real identifier; there is no "empty" user.

        Raises:
            MissingRequiredArgumentException: If id, email or password_hash is None
            InvalidEntityStateException: If email or password_hash is not a value object
        """
        user = cls(id, email, first_name, last_name, password_hash)
        logger.debug("Reconstituted user %s", user.id)
        return user

    @property
    def email(self) -> Email:
        return self._email

    @property
    def first_name(self) -> Optional[str]:
        return self._first_name

    @property
    def last_name(self) -> Optional[str]:
        return self._last_name

    @property
    def full_name(self) -> str:
        """
        Display name derived from the current first and last name.

        Recomputed on every access:
            both present  -> "First Last"
            one present   -> that name
            none present  -> ""
        """
        return " ".join(
            name for name in (self._first_name, self._last_name) if name is not None
        )

    def update_first_name(self, first_name: Optional[str]) -> None:
        """
        Replace the first name (None clears it) and mark the user modified.

        Args:
            first_name: The new first name, or None
        """
        self._first_name = first_name
        self.mark_modified()
        logger.debug("Updated first name of user %s", self.id)

    def update_last_name(self, last_name: Optional[str]) -> None:
        """
        Replace the last name (None clears it) and mark the user modified.

        Args:
            last_name: The new last name, or None
        """
        self._last_name = last_name
        self.mark_modified()
        logger.debug("Updated last name of user %s", self.id)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, email={str(self._email)!r})"
