"""Credential service port (abstract interface).

Bearer tokens are issued and validated by an external identity service.
The domain only needs the (user id, role) pair a token is bound to, so this
port hides how tokens are minted and checked.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, passed explicitly into every operation."""

    user_id: str
    role: str

    @property
    def is_tailor(self) -> bool:
        return self.role == "tailor"


class CredentialService(ABC):
    """Abstract credential service interface."""

    @abstractmethod
    def issue(self, user_id: str, role: str) -> str:
        """Issue a bearer token bound to the user id and role."""
        ...

    @abstractmethod
    def verify(self, token: str) -> Identity | None:
        """Return the identity bound to a token, or None if it is invalid."""
        ...

    @abstractmethod
    def revoke(self, token: str) -> None:
        """Invalidate a previously issued token."""
        ...
