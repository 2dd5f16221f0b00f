"""FastAPI endpoints for reviews."""

from fastapi import APIRouter, Depends

from tailorhub.identity.api.dependencies import require_identity
from tailorhub.identity.credentials.port import Identity
from tailorhub.reviews.aggregation import submit_review
from tailorhub.reviews.api.schemas import ReviewIdResponse, SubmitReviewRequest

review_router = APIRouter(prefix="/reviews", tags=["reviews"])


@review_router.post("", status_code=201, response_model=ReviewIdResponse)
async def create_review(body: SubmitReviewRequest, identity: Identity = Depends(require_identity)) -> ReviewIdResponse:
    review_id = submit_review(
        order_id=body.order_id,
        customer_id=identity.user_id,
        rating=body.rating,
        comment=body.comment,
        tailor_id=body.tailor_id,
    )
    return ReviewIdResponse(review_id=review_id)
