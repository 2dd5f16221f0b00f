"""Review aggregate: a customer's rating of one delivered order.

Reviews are write-once: there is no edit or delete path, so the tailor's
running (sum, count) aggregate only ever grows by one review at a time.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, Text, ValueObject

from tailorhub.domain import tailorhub
from tailorhub.reviews.review.events import ReviewSubmitted

MIN_SCORE = 1
MAX_SCORE = 5


@tailorhub.value_object(part_of="Review")
class Rating:
    """A star rating from 1 to 5."""

    score: Integer(required=True)

    @invariant.post
    def score_must_be_in_range(self):
        if self.score is not None and not MIN_SCORE <= self.score <= MAX_SCORE:
            raise ValidationError({"score": [f"Rating must be between {MIN_SCORE} and {MAX_SCORE}"]})


@tailorhub.aggregate
class Review:
    order_id: Identifier(required=True, unique=True)
    customer_id: Identifier(required=True)
    tailor_id: Identifier(required=True)
    rating: ValueObject(Rating, required=True)
    comment: Text()
    created_at: DateTime()

    @classmethod
    def submit(cls, order_id, customer_id, tailor_id, score, comment=None):
        now = datetime.now(UTC)
        review = cls(
            order_id=order_id,
            customer_id=customer_id,
            tailor_id=tailor_id,
            rating=Rating(score=score),
            comment=comment,
            created_at=now,
        )
        review.raise_(
            ReviewSubmitted(
                review_id=str(review.id),
                order_id=str(order_id),
                customer_id=str(customer_id),
                tailor_id=str(tailor_id),
                rating=score,
                submitted_at=now,
            )
        )
        return review

    @property
    def score(self) -> int:
        return self.rating.score
