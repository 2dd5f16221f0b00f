"""Booking form and the outcome of submitting it."""

from dataclasses import dataclass, field
from enum import Enum

# Offered pickup slots (24h clock)
PICKUP_SLOTS = ("09:00", "12:00", "15:00", "18:00")
DEFAULT_PICKUP_TIME = "10:00"


class MeasurementChoice(Enum):
    EXISTING = "existing"
    NEW = "new"
    HOME_VISIT = "home-visit"


class BookingFailure(Enum):
    AUTHENTICATION_REQUIRED = "authentication_required"
    TAILOR_NOT_FOUND = "tailor_not_found"
    VALIDATION = "validation"
    INVALID_SERVICE = "invalid_service"
    SUBMISSION_FAILED = "submission_failed"


@dataclass
class BookingForm:
    """What the customer filled in. Left untouched by a failed submission."""

    tailor_id: str
    service_type: str | None = None
    garment_type: str | None = None
    pickup_date: str | None = None  # ISO date, e.g. "2026-11-02"
    pickup_time: str | None = None  # one of PICKUP_SLOTS
    pickup_address: str | None = None
    special_instructions: str | None = None
    measurements: str = MeasurementChoice.EXISTING.value
    payment_method: str = "online"
    reference_images: list[str] = field(default_factory=list)

    def missing_fields(self) -> list[str]:
        required = ("service_type", "garment_type", "pickup_date", "pickup_address")
        return [name for name in required if not (getattr(self, name) or "").strip()]


@dataclass(frozen=True)
class BookingOutcome:
    success: bool
    form: BookingForm
    order_id: str | None = None
    failure: BookingFailure | None = None
    title: str = ""
    message: str = ""
    errors: dict = field(default_factory=dict)

    @classmethod
    def booked(cls, form, order_id):
        return cls(
            success=True,
            form=form,
            order_id=order_id,
            title="Booking confirmed!",
            message="Your tailor will contact you soon.",
        )

    @classmethod
    def failed(cls, form, failure, message, title="Booking failed", errors=None):
        return cls(
            success=False,
            form=form,
            failure=failure,
            title=title,
            message=message,
            errors=errors or {},
        )
