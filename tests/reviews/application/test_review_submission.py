import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from tailorhub.catalogue.tailor.tailor import Tailor
from tailorhub.reviews.aggregation import recompute_tailor_rating, submit_review
from tailorhub.reviews.review.review import Review


def _tailor(tailor_id):
    return current_domain.repository_for(Tailor).get(tailor_id)


class TestSubmitReview:
    def test_review_persisted_with_order_tailor(self, delivered_order):
        review_id = submit_review(
            order_id=delivered_order["order_id"],
            customer_id=delivered_order["customer_id"],
            rating=4,
            comment="Neat stitching",
        )

        review = current_domain.repository_for(Review).get(review_id)
        assert review.tailor_id == delivered_order["tailor_id"]
        assert review.score == 4
        assert review.comment == "Neat stitching"

    def test_rating_sequence(self, delivered_order, place_order, advance_order):
        tailor = _tailor(delivered_order["tailor_id"])
        assert (tailor.rating, tailor.total_reviews) == (0.0, 0)

        submit_review(order_id=delivered_order["order_id"], customer_id=delivered_order["customer_id"], rating=4)
        tailor = _tailor(delivered_order["tailor_id"])
        assert (tailor.rating, tailor.total_reviews) == (4.0, 1)

        second = place_order(
            delivered_order["customer_id"], delivered_order["tailor_id"], delivered_order["service_id"]
        )
        advance_order(second, "delivered")
        submit_review(order_id=second, customer_id=delivered_order["customer_id"], rating=2)
        tailor = _tailor(delivered_order["tailor_id"])
        assert (tailor.rating, tailor.total_reviews) == (3.0, 2)

    def test_duplicate_review_rejected(self, delivered_order):
        submit_review(order_id=delivered_order["order_id"], customer_id=delivered_order["customer_id"], rating=5)

        with pytest.raises(ValidationError) as exc:
            submit_review(order_id=delivered_order["order_id"], customer_id=delivered_order["customer_id"], rating=1)
        assert "order_id" in exc.value.messages

        tailor = _tailor(delivered_order["tailor_id"])
        assert tailor.total_reviews == 1
        assert tailor.rating == 5.0

    def test_undelivered_order_rejected(self, marketplace, place_order, advance_order):
        order_id = place_order(marketplace["customer_id"], marketplace["tailor_id"], marketplace["service_id"])
        advance_order(order_id, "ready")

        with pytest.raises(ValidationError):
            submit_review(order_id=order_id, customer_id=marketplace["customer_id"], rating=5)
        assert _tailor(marketplace["tailor_id"]).total_reviews == 0

    def test_other_customer_rejected(self, delivered_order, register_customer):
        stranger = register_customer()
        with pytest.raises(ValidationError):
            submit_review(order_id=delivered_order["order_id"], customer_id=stranger, rating=5)

    def test_mismatched_tailor_rejected(self, delivered_order, register_tailor):
        _, other_tailor = register_tailor()
        with pytest.raises(ValidationError) as exc:
            submit_review(
                order_id=delivered_order["order_id"],
                customer_id=delivered_order["customer_id"],
                rating=5,
                tailor_id=other_tailor,
            )
        assert "tailor_id" in exc.value.messages
        assert _tailor(other_tailor).total_reviews == 0

    def test_out_of_range_rating_rejected(self, delivered_order):
        with pytest.raises(ValidationError):
            submit_review(order_id=delivered_order["order_id"], customer_id=delivered_order["customer_id"], rating=6)
        assert _tailor(delivered_order["tailor_id"]).total_reviews == 0

    def test_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            submit_review(order_id="missing", customer_id="someone", rating=3)


class TestRecomputeTailorRating:
    def test_recompute_matches_running_aggregate(self, delivered_order, place_order, advance_order):
        scores = [5, 4, 4]
        order_ids = [delivered_order["order_id"]]
        for _ in scores[1:]:
            order_id = place_order(
                delivered_order["customer_id"], delivered_order["tailor_id"], delivered_order["service_id"]
            )
            advance_order(order_id, "delivered")
            order_ids.append(order_id)

        for order_id, score in zip(order_ids, scores):
            submit_review(order_id=order_id, customer_id=delivered_order["customer_id"], rating=score)

        running = _tailor(delivered_order["tailor_id"])
        assert recompute_tailor_rating(delivered_order["tailor_id"]) == running.rating == 4.33

        rebuilt = _tailor(delivered_order["tailor_id"])
        assert rebuilt.total_reviews == 3
        assert rebuilt.rating_sum == 13

    def test_recompute_repairs_drift(self, register_tailor):
        _, tailor_id = register_tailor()
        repo = current_domain.repository_for(Tailor)
        tailor = repo.get(tailor_id)
        tailor.apply_rating_aggregate(rating_sum=50, review_count=10)
        repo.add(tailor)

        assert recompute_tailor_rating(tailor_id) == 0.0
        assert _tailor(tailor_id).total_reviews == 0

    def test_recompute_counts_every_review(self, register_tailor, register_customer):
        _, tailor_id = register_tailor()
        customer_id = register_customer()
        repo = current_domain.repository_for(Review)
        for i in range(110):
            score = 5 if i < 100 else 1
            repo.add(Review.submit(order_id=f"order-{i}", customer_id=customer_id, tailor_id=tailor_id, score=score))

        assert recompute_tailor_rating(tailor_id) == 4.64
        rebuilt = _tailor(tailor_id)
        assert (rebuilt.total_reviews, rebuilt.rating_sum) == (110, 510)
