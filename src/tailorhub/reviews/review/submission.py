"""SubmitReview: review a delivered order and fold it into the tailor's rating.

The review insert and the tailor's aggregate update happen in the same unit
of work. Callers go through aggregation.submit_review(), which holds the
tailor's lock around the whole command.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer, Text
from protean.utils.globals import current_domain

from tailorhub.catalogue.tailor.tailor import Tailor
from tailorhub.domain import tailorhub
from tailorhub.ordering.order.lifecycle import OrderStatus
from tailorhub.ordering.order.order import Order
from tailorhub.reviews.review.review import Review
from tailorhub.utils.logging import get_logger

logger = get_logger(__name__)


@tailorhub.command(part_of="Review")
class SubmitReview:
    order_id: Identifier(required=True)
    customer_id: Identifier(required=True)
    rating: Integer(required=True)
    comment: Text()
    tailor_id: Identifier()  # optional; must agree with the order when given


@tailorhub.command(part_of="Review")
class RecomputeTailorRating:
    tailor_id: Identifier(required=True)


@tailorhub.command_handler(part_of=Review)
class ReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        order = current_domain.repository_for(Order).get(command.order_id)

        if str(order.customer_id) != str(command.customer_id):
            raise ValidationError({"order_id": ["You can only review your own orders"]})
        if order.status != OrderStatus.DELIVERED.value:
            raise ValidationError({"order_id": ["Only delivered orders can be reviewed"]})
        if command.tailor_id and str(command.tailor_id) != str(order.tailor_id):
            raise ValidationError({"tailor_id": ["Tailor does not match the order"]})

        review_repo = current_domain.repository_for(Review)
        if review_repo.find_by_order(order.id) is not None:
            raise ValidationError({"order_id": ["This order has already been reviewed"]})

        review = Review.submit(
            order_id=str(order.id),
            customer_id=str(command.customer_id),
            tailor_id=str(order.tailor_id),
            score=command.rating,
            comment=command.comment,
        )

        tailor_repo = current_domain.repository_for(Tailor)
        tailor = tailor_repo.get(order.tailor_id)
        tailor.record_review_rating(review.score)

        review_repo.add(review)
        tailor_repo.add(tailor)

        logger.info(
            "review_submitted",
            review_id=str(review.id),
            tailor_id=str(tailor.id),
            rating=tailor.rating,
            total_reviews=tailor.total_reviews,
        )
        return str(review.id)

    @handle(RecomputeTailorRating)
    def recompute_tailor_rating(self, command):
        tailor_repo = current_domain.repository_for(Tailor)
        tailor = tailor_repo.get(command.tailor_id)

        reviews = current_domain.repository_for(Review).find_by_tailor(tailor.id)
        tailor.apply_rating_aggregate(
            rating_sum=sum(r.score for r in reviews),
            review_count=len(reviews),
        )
        tailor_repo.add(tailor)
        return tailor.rating
