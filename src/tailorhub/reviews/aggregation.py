"""Rating aggregation entry points.

Updates for one tailor are serialized by a per-tailor lock held across the
whole command, so the duplicate check, the review insert and the running
aggregate update see a consistent view. Locks come from a fixed pool of
stripes keyed by tailor id, so two tailors only contend when they hash to
the same stripe.
"""

import threading
from contextlib import contextmanager

from protean.utils.globals import current_domain

from tailorhub.ordering.order.order import Order
from tailorhub.reviews.review.submission import RecomputeTailorRating, SubmitReview

LOCK_STRIPES = 64

_locks: tuple[threading.Lock, ...] = tuple(threading.Lock() for _ in range(LOCK_STRIPES))


def _lock_for(tailor_id: str) -> threading.Lock:
    return _locks[hash(tailor_id) % LOCK_STRIPES]


@contextmanager
def tailor_lock(tailor_id):
    lock = _lock_for(str(tailor_id))
    with lock:
        yield


def submit_review(order_id, customer_id, rating, comment=None, tailor_id=None) -> str:
    """Record a review and update the tailor's rating; returns the review id."""
    order = current_domain.repository_for(Order).get(order_id)

    with tailor_lock(order.tailor_id):
        return current_domain.process(
            SubmitReview(
                order_id=order_id,
                customer_id=customer_id,
                rating=rating,
                comment=comment,
                tailor_id=tailor_id,
            ),
            asynchronous=False,
        )


def recompute_tailor_rating(tailor_id) -> float:
    """Rebuild the aggregate from every stored review."""
    with tailor_lock(tailor_id):
        return current_domain.process(RecomputeTailorRating(tailor_id=tailor_id), asynchronous=False)
