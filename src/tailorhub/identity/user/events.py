"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String

from tailorhub.domain import tailorhub


@tailorhub.event(part_of="User")
class UserRegistered:
    """A new customer or tailor account was created."""

    __version__ = 1

    user_id: Identifier(required=True)
    email: String(required=True)
    name: String(required=True)
    role: String(required=True)
    registered_at: DateTime(required=True)
