"""Request dependencies: bearer-token identity and the admin key."""

import os

from fastapi import Header, HTTPException

from tailorhub.identity.credentials.port import Identity
from tailorhub.identity.user.authentication import resolve_identity

DEFAULT_ADMIN_KEY = "admin123"


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


def optional_identity(authorization: str | None = Header(default=None)) -> Identity | None:
    return resolve_identity(_bearer_token(authorization))


def require_identity(authorization: str | None = Header(default=None)) -> Identity:
    identity = resolve_identity(_bearer_token(authorization))
    if identity is None:
        raise HTTPException(status_code=401, detail="Could not validate credentials")
    return identity


def require_admin(x_admin_key: str | None = Header(default=None)) -> None:
    if x_admin_key != os.getenv("ADMIN_KEY", DEFAULT_ADMIN_KEY):
        raise HTTPException(status_code=403, detail="Admin access required")
