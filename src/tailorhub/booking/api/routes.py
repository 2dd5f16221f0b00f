"""FastAPI endpoint for the booking workflow."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from tailorhub.booking.api.schemas import BookingConfirmation, BookingError, BookingRequest, PriceLineResponse
from tailorhub.booking.form import BookingFailure, BookingForm
from tailorhub.booking.pricing import price_breakdown
from tailorhub.booking.workflow import BookingWorkflow
from tailorhub.identity.api.dependencies import optional_identity
from tailorhub.identity.credentials.port import Identity
from tailorhub.ordering.order.order import Order

booking_router = APIRouter(prefix="/bookings", tags=["bookings"])

_FAILURE_STATUS = {
    BookingFailure.AUTHENTICATION_REQUIRED: 401,
    BookingFailure.TAILOR_NOT_FOUND: 404,
    BookingFailure.VALIDATION: 400,
    BookingFailure.INVALID_SERVICE: 400,
    BookingFailure.SUBMISSION_FAILED: 400,
}


@booking_router.post(
    "",
    status_code=201,
    response_model=BookingConfirmation,
    responses={400: {"model": BookingError}, 401: {"model": BookingError}, 404: {"model": BookingError}},
)
async def book(body: BookingRequest, identity: Identity | None = Depends(optional_identity)):
    form = BookingForm(**body.model_dump())
    outcome = BookingWorkflow(identity).submit(form)

    if not outcome.success:
        error = BookingError(
            failure=outcome.failure.value,
            title=outcome.title,
            message=outcome.message,
            errors=outcome.errors,
        )
        return JSONResponse(status_code=_FAILURE_STATUS[outcome.failure], content=error.model_dump())

    order_repo = current_domain.repository_for(Order)
    order = order_repo.get(outcome.order_id)
    first_order = len(order_repo.find_by_customer(order.customer_id)) == 1
    breakdown = price_breakdown(order.total_amount, order.payment_method, first_order=first_order)

    return BookingConfirmation(
        order_id=outcome.order_id,
        title=outcome.title,
        message=outcome.message,
        price_breakdown=[PriceLineResponse(label=line.label, amount=line.amount) for line in breakdown.lines],
        estimated_total=breakdown.total,
    )
