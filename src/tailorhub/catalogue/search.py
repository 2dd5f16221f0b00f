"""Catalogue read side: tailor search and lookups.

Lookups return None for "not found", which is a normal outcome here.
Unexpected repository failures propagate to the caller.
"""

from dataclasses import dataclass

from protean.utils.globals import current_domain

from tailorhub.catalogue.service.service import Service
from tailorhub.catalogue.tailor.tailor import Tailor
from tailorhub.identity.user.user import User
from tailorhub.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TailorWithUser:
    tailor: Tailor
    user: User


def _with_user(tailor: Tailor) -> TailorWithUser | None:
    user = current_domain.repository_for(User).find(tailor.user_id)
    if user is None:
        logger.warning("tailor_user_missing", tailor_id=str(tailor.id), user_id=str(tailor.user_id))
        return None
    return TailorWithUser(tailor=tailor, user=user)


def search_tailors(
    location: str | None = None,
    service_type: str | None = None,
    min_rating: float | None = None,
) -> list[TailorWithUser]:
    """Verified tailors matching every given filter, best rated first."""
    tailors = current_domain.repository_for(Tailor).find_verified()

    if location:
        needle = location.strip().lower()
        tailors = [t for t in tailors if needle in (t.location or "").lower()]

    if min_rating is not None:
        tailors = [t for t in tailors if (t.rating or 0.0) >= min_rating]

    if service_type:
        offering = {
            str(s.tailor_id) for s in current_domain.repository_for(Service).find_active_by_type(service_type)
        }
        tailors = [t for t in tailors if str(t.id) in offering]

    tailors = sorted(tailors, key=lambda t: t.rating or 0.0, reverse=True)

    results = []
    for tailor in tailors:
        view = _with_user(tailor)
        if view is not None:
            results.append(view)
    return results


def get_tailor(tailor_id) -> TailorWithUser | None:
    tailor = current_domain.repository_for(Tailor).find(tailor_id)
    if tailor is None:
        return None
    return _with_user(tailor)


def get_tailor_by_user_id(user_id) -> TailorWithUser | None:
    tailor = current_domain.repository_for(Tailor).find_by_user_id(user_id)
    if tailor is None:
        return None
    return _with_user(tailor)


def get_services_by_tailor(tailor_id) -> list[Service]:
    """Active services only; deactivated ones are hidden from booking."""
    return current_domain.repository_for(Service).find_active_by_tailor(tailor_id)


def get_service(service_id) -> Service | None:
    return current_domain.repository_for(Service).find(service_id)


def get_reviews_by_tailor(tailor_id) -> list:
    from tailorhub.reviews.review.review import Review

    reviews = current_domain.repository_for(Review).find_by_tailor(tailor_id)
    return sorted(reviews, key=lambda r: r.created_at, reverse=True)
