"""Domain events for the Tailor aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from tailorhub.domain import tailorhub


@tailorhub.event(part_of="Tailor")
class TailorProfileCreated:
    """A tailor-role user's catalogue profile was created."""

    __version__ = 1

    tailor_id: Identifier(required=True)
    user_id: Identifier(required=True)
    location: String(required=True)
    created_at: DateTime(required=True)


@tailorhub.event(part_of="Tailor")
class TailorProfileUpdated:
    __version__ = 1

    tailor_id: Identifier(required=True)
    location: String()
    updated_at: DateTime(required=True)


@tailorhub.event(part_of="Tailor")
class TailorVerified:
    """The tailor passed verification and is now visible in search."""

    __version__ = 1

    tailor_id: Identifier(required=True)
    verified_at: DateTime(required=True)


@tailorhub.event(part_of="Tailor")
class TailorRatingUpdated:
    """The tailor's aggregate rating changed after a review."""

    __version__ = 1

    tailor_id: Identifier(required=True)
    rating: Float(required=True)
    total_reviews: Integer(required=True)
    updated_at: DateTime(required=True)
