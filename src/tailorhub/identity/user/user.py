"""User aggregate: the identity record behind customers and tailors.

A user's role is fixed at registration; there is no path that changes it.
Tailor-role users always own exactly one Tailor profile in the catalogue,
created in the same unit of work as the user (see registration).
"""

from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, String

from tailorhub.domain import tailorhub
from tailorhub.identity.shared.email import is_valid_email, normalize_email
from tailorhub.identity.shared.passwords import MIN_PASSWORD_LENGTH, hash_password, verify_password
from tailorhub.identity.user.events import UserRegistered


class UserRole(Enum):
    CUSTOMER = "customer"
    TAILOR = "tailor"


@tailorhub.aggregate
class User:
    """A registered account: a customer who books, or a tailor who serves."""

    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=255)
    name: String(required=True, max_length=200)
    phone: String(max_length=20)
    role: String(choices=UserRole, default=UserRole.CUSTOMER.value)
    created_at: DateTime()

    @invariant.post
    def email_must_be_well_formed(self):
        if self.email is not None and not is_valid_email(self.email):
            raise ValidationError({"email": [f"Invalid email address: {self.email!r}"]})

    @invariant.post
    def name_must_not_be_blank(self):
        if self.name is not None and not self.name.strip():
            raise ValidationError({"name": ["Name cannot be empty"]})

    @classmethod
    def register(cls, email, password, name, phone=None, role=UserRole.CUSTOMER.value):
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError({"password": [f"Password must be at least {MIN_PASSWORD_LENGTH} characters"]})

        now = datetime.now(UTC)
        user = cls(
            email=normalize_email(email),
            password_hash=hash_password(password),
            name=name,
            phone=phone,
            role=role,
            created_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                email=user.email,
                name=name,
                role=user.role,
                registered_at=now,
            )
        )
        return user

    @property
    def is_tailor(self) -> bool:
        return self.role == UserRole.TAILOR.value

    def check_password(self, password) -> bool:
        return verify_password(password, self.password_hash)
