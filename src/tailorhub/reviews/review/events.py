"""Domain events for the Review aggregate."""

from protean.fields import DateTime, Identifier, Integer

from tailorhub.domain import tailorhub


@tailorhub.event(part_of="Review")
class ReviewSubmitted:
    __version__ = 1

    review_id: Identifier(required=True)
    order_id: Identifier(required=True)
    customer_id: Identifier(required=True)
    tailor_id: Identifier(required=True)
    rating: Integer(required=True)
    submitted_at: DateTime(required=True)
