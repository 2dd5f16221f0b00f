"""Pydantic request/response schemas for the Reviews API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class SubmitReviewRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "order_id": "ord-001",
                    "rating": 5,
                    "comment": "Perfect fit, delivered a day early.",
                }
            ]
        }
    }

    order_id: str
    rating: int = Field(..., ge=1, le=5)
    comment: str | None = None
    tailor_id: str | None = None


class ReviewIdResponse(BaseModel):
    review_id: str


class ReviewResponse(BaseModel):
    id: str
    order_id: str
    customer_id: str
    tailor_id: str
    rating: int
    comment: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_review(cls, review) -> ReviewResponse:
        return cls(
            id=str(review.id),
            order_id=str(review.order_id),
            customer_id=str(review.customer_id),
            tailor_id=str(review.tailor_id),
            rating=review.score,
            comment=review.comment,
            created_at=review.created_at,
        )
