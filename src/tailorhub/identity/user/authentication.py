"""Login and bearer-token resolution.

Tokens come from the configured CredentialService; this module only ties a
token to a stored User.
"""

from protean.utils.globals import current_domain

from tailorhub.identity.credentials import get_credential_service
from tailorhub.identity.credentials.port import Identity
from tailorhub.identity.user.user import User
from tailorhub.utils.logging import get_logger

logger = get_logger(__name__)


def authenticate(email: str, password: str) -> tuple[str, User] | None:
    """Check credentials and issue a token, or None when they don't match.

    Unknown email and wrong password are indistinguishable to the caller.
    """
    user = current_domain.repository_for(User).find_by_email(email)
    if user is None or not user.check_password(password):
        logger.info("login_failed")
        return None

    token = get_credential_service().issue(str(user.id), user.role)
    logger.info("login_succeeded", user_id=str(user.id))
    return token, user


def resolve_identity(token: str | None) -> Identity | None:
    if not token:
        return None
    return get_credential_service().verify(token)


def current_user(identity: Identity) -> User | None:
    return current_domain.repository_for(User).find(identity.user_id)


def logout(token: str) -> None:
    get_credential_service().revoke(token)
