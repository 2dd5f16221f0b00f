"""Credential service factory.

Provides get_credential_service() / set_credential_service() to swap
implementations. Defaults to the in-process FakeCredentialService.
"""

from tailorhub.identity.credentials.fake_adapter import FakeCredentialService
from tailorhub.identity.credentials.port import CredentialService, Identity

_current_service: CredentialService | None = None


def get_credential_service() -> CredentialService:
    """Return the current credential service. Defaults to FakeCredentialService."""
    global _current_service
    if _current_service is None:
        _current_service = FakeCredentialService()
    return _current_service


def set_credential_service(service: CredentialService) -> None:
    """Override the active credential service (useful for tests)."""
    global _current_service
    _current_service = service


def reset_credential_service() -> None:
    """Reset to default credential service."""
    global _current_service
    _current_service = None


__all__ = [
    "CredentialService",
    "Identity",
    "get_credential_service",
    "reset_credential_service",
    "set_credential_service",
]
