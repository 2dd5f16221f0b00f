"""Repository for the User aggregate."""

from protean.exceptions import ObjectNotFoundError

from tailorhub.domain import tailorhub
from tailorhub.identity.shared.email import normalize_email
from tailorhub.identity.user.user import User


@tailorhub.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> User | None:
        users = self._dao.query.filter(email=normalize_email(email)).all().items
        return users[0] if users else None

    def find(self, user_id) -> User | None:
        """Like get(), but a missing user is None rather than an error."""
        if not user_id:
            return None
        try:
            return self.get(str(user_id))
        except ObjectNotFoundError:
            return None
