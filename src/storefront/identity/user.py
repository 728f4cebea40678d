"""User aggregate and its repository.

A user is created once, on first checkout, through the users endpoint, or
by the seeder, and is never modified afterwards. Email addresses are stored
trimmed and lower-cased so lookups ignore case.
"""

import re
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, String

from storefront.domain import storefront
from storefront.identity.events import UserRegistered

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class UserRole(Enum):
    ADMIN = "admin"
    CUSTOMER = "customer"


def normalize_email(email):
    return (email or "").strip().lower()


@storefront.aggregate(limit=-1)
class User:
    """A person who can place orders, identified by a unique email address."""

    email: String(required=True, max_length=254, unique=True)
    name: String(required=True, max_length=255)
    role: String(choices=UserRole, default=UserRole.CUSTOMER.value)
    created_at: DateTime(default=lambda: datetime.now(UTC))

    @invariant.post
    def email_must_be_well_formed(self):
        if self.email and not _EMAIL_PATTERN.match(self.email):
            raise ValidationError({"email": [f"Invalid email address: {self.email!r}"]})

    @classmethod
    def register(cls, email, name, role=UserRole.CUSTOMER.value):
        now = datetime.now(UTC)
        user = cls(
            email=normalize_email(email),
            name=(name or "").strip(),
            role=role or UserRole.CUSTOMER.value,
            created_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                email=user.email,
                name=user.name,
                role=user.role,
                registered_at=now,
            )
        )
        return user


@storefront.repository(part_of=User)
class UserRepository:
    def get_user(self, user_id) -> User:
        try:
            return self.get(user_id)
        except ObjectNotFoundError:
            raise ObjectNotFoundError(f"User {user_id} not found") from None

    def find_by_id(self, user_id) -> User | None:
        try:
            return self.get(user_id)
        except ObjectNotFoundError:
            return None

    def find_by_email(self, email: str) -> User | None:
        return self._dao.query.filter(email=normalize_email(email)).all().first

    def list_all(self) -> list[User]:
        return self._dao.query.order_by("name").all().items

    def count(self) -> int:
        return self._dao.query.all().total
