"""In-process credential service for development and testing.

Tokens are opaque random strings kept in memory, so they do not survive a
restart. A production deployment plugs a real identity provider in through
set_credential_service().
"""

from secrets import token_urlsafe

from tailorhub.identity.credentials.port import CredentialService, Identity


class FakeCredentialService(CredentialService):
    """Token store backed by a dict."""

    def __init__(self) -> None:
        self._tokens: dict[str, Identity] = {}

    def issue(self, user_id: str, role: str) -> str:
        token = token_urlsafe(32)
        self._tokens[token] = Identity(user_id=str(user_id), role=role)
        return token

    def verify(self, token: str) -> Identity | None:
        if not token:
            return None
        return self._tokens.get(token)

    def revoke(self, token: str) -> None:
        self._tokens.pop(token, None)
