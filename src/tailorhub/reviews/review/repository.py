"""Repository for the Review aggregate."""

from tailorhub.domain import tailorhub
from tailorhub.reviews.review.review import Review


@tailorhub.repository(part_of=Review)
class ReviewRepository:
    def find_by_order(self, order_id) -> Review | None:
        reviews = self._dao.query.filter(order_id=str(order_id)).all().items
        return reviews[0] if reviews else None

    def find_by_tailor(self, tailor_id) -> list[Review]:
        return self._dao.query.filter(tailor_id=str(tailor_id)).limit(None).all().items
