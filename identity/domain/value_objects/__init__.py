"""Value objects - immutable, self-validating wrappers around primitives."""

from identity.domain.value_objects.email import Email
from identity.domain.value_objects.password_hash import PasswordHash

__all__ = ["Email", "PasswordHash"]
