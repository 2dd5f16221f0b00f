"""Tailor aggregate: a service provider's public profile.

The profile is a one-to-one extension of a tailor-role User. `rating`,
`total_reviews` and `rating_sum` are derived state: they change only through
record_review_rating() and apply_rating_aggregate(), which the rating
aggregator calls while holding the tailor's lock.

`is_verified` gates visibility in public search.
"""

import json
from datetime import UTC, datetime

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String, Text

from tailorhub.catalogue.tailor.events import (
    TailorProfileCreated,
    TailorProfileUpdated,
    TailorRatingUpdated,
    TailorVerified,
)
from tailorhub.domain import tailorhub

MAX_RATING = 5.0

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


def mean_rating(rating_sum: int, review_count: int) -> float:
    """Arithmetic mean rounded to the stored two-decimal precision."""
    if review_count == 0:
        return 0.0
    return round(rating_sum / review_count, 2)


@tailorhub.aggregate
class Tailor:
    user_id: Identifier(required=True, unique=True)
    business_name: String(max_length=200)
    location: String(required=True, max_length=200)
    address: Text()
    specializations: Text()  # JSON array of tags
    description: Text()

    rating: Float(default=0.0)
    total_reviews: Integer(default=0)
    rating_sum: Integer(default=0)

    is_verified: Boolean(default=False)
    avg_delivery_days: Integer(default=3, min_value=1)
    starting_price: Float(min_value=0.0)
    created_at: DateTime()

    @invariant.post
    def location_must_not_be_blank(self):
        if self.location is not None and not self.location.strip():
            raise ValidationError({"location": ["Location cannot be empty"]})

    @invariant.post
    def rating_must_be_in_range(self):
        if self.rating is not None and not 0.0 <= self.rating <= MAX_RATING:
            raise ValidationError({"rating": ["Rating must be between 0 and 5"]})

    @invariant.post
    def review_counters_must_not_be_negative(self):
        if (self.total_reviews or 0) < 0 or (self.rating_sum or 0) < 0:
            raise ValidationError({"total_reviews": ["Review counters cannot be negative"]})

    @classmethod
    def create_profile(
        cls,
        user_id,
        location,
        business_name=None,
        address=None,
        specializations=None,
        description=None,
        avg_delivery_days=3,
        starting_price=None,
    ):
        now = datetime.now(UTC)
        tailor = cls(
            user_id=user_id,
            location=location,
            business_name=business_name,
            address=address,
            specializations=json.dumps(specializations or []),
            description=description,
            avg_delivery_days=avg_delivery_days or 3,
            starting_price=starting_price,
            rating=0.0,
            total_reviews=0,
            rating_sum=0,
            is_verified=False,
            created_at=now,
        )
        tailor.raise_(
            TailorProfileCreated(
                tailor_id=str(tailor.id),
                user_id=str(user_id),
                location=location,
                created_at=now,
            )
        )
        return tailor

    @property
    def specialization_list(self) -> list[str]:
        return json.loads(self.specializations) if self.specializations else []

    def update_profile(
        self,
        business_name=_UNSET,
        location=_UNSET,
        address=_UNSET,
        specializations=_UNSET,
        description=_UNSET,
        avg_delivery_days=_UNSET,
        starting_price=_UNSET,
    ):
        with atomic_change(self):
            if business_name is not _UNSET:
                self.business_name = business_name
            if location is not _UNSET:
                self.location = location
            if address is not _UNSET:
                self.address = address
            if specializations is not _UNSET:
                self.specializations = json.dumps(specializations or [])
            if description is not _UNSET:
                self.description = description
            if avg_delivery_days is not _UNSET:
                self.avg_delivery_days = avg_delivery_days
            if starting_price is not _UNSET:
                self.starting_price = starting_price

        self.raise_(
            TailorProfileUpdated(
                tailor_id=str(self.id),
                location=self.location,
                updated_at=datetime.now(UTC),
            )
        )

    def verify(self):
        if self.is_verified:
            raise ValidationError({"is_verified": ["Tailor is already verified"]})

        now = datetime.now(UTC)
        self.is_verified = True
        self.raise_(TailorVerified(tailor_id=str(self.id), verified_at=now))

    # -------------------------------------------------------------------
    # Rating aggregate
    # -------------------------------------------------------------------
    def record_review_rating(self, score: int):
        """Fold one new review score into the running aggregate."""
        with atomic_change(self):
            self.rating_sum = (self.rating_sum or 0) + score
            self.total_reviews = (self.total_reviews or 0) + 1
            self.rating = mean_rating(self.rating_sum, self.total_reviews)

        self._raise_rating_updated()

    def apply_rating_aggregate(self, rating_sum: int, review_count: int):
        """Overwrite the aggregate with totals from a full scan of reviews."""
        with atomic_change(self):
            self.rating_sum = rating_sum
            self.total_reviews = review_count
            self.rating = mean_rating(rating_sum, review_count)

        self._raise_rating_updated()

    def _raise_rating_updated(self):
        self.raise_(
            TailorRatingUpdated(
                tailor_id=str(self.id),
                rating=self.rating,
                total_reviews=self.total_reviews,
                updated_at=datetime.now(UTC),
            )
        )
