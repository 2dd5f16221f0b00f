"""Booking workflow: turn a filled form into an order.

Checks run in a fixed order and stop at the first failure: identity, tailor,
required fields, field formats, then service resolution. Only a fully
resolved booking reaches CreateOrder, so a failed booking never leaves an
order behind.
"""

import json
from datetime import date, datetime, time

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from tailorhub.booking.form import (
    DEFAULT_PICKUP_TIME,
    PICKUP_SLOTS,
    BookingFailure,
    BookingForm,
    BookingOutcome,
    MeasurementChoice,
)
from tailorhub.catalogue.search import get_services_by_tailor
from tailorhub.catalogue.service.service import GarmentType, Service
from tailorhub.catalogue.tailor.tailor import Tailor
from tailorhub.identity.credentials.port import Identity
from tailorhub.ordering.order.creation import CreateOrder
from tailorhub.ordering.order.order import PaymentMethod
from tailorhub.utils.logging import get_logger

logger = get_logger(__name__)

_MEASUREMENT_CHOICES = {m.value for m in MeasurementChoice}
_GARMENT_TYPES = {g.value for g in GarmentType}
_PAYMENT_METHODS = {p.value for p in PaymentMethod}


def pickup_timestamp(pickup_date: str, pickup_time: str | None) -> datetime:
    """Combine the ISO date and a slot into one timestamp; no slot means 10:00."""
    slot = pickup_time or DEFAULT_PICKUP_TIME
    return datetime.combine(date.fromisoformat(pickup_date), time.fromisoformat(slot))


def serialize_measurements(choice: str) -> str:
    return json.dumps({"type": choice})


def resolve_service(tailor_id, service_type) -> Service | None:
    """The tailor's active service of exactly this type, if any."""
    for service in get_services_by_tailor(tailor_id):
        if service.service_type == service_type:
            return service
    return None


class BookingWorkflow:
    def __init__(self, identity: Identity | None):
        self.identity = identity

    def submit(self, form: BookingForm) -> BookingOutcome:
        if self.identity is None:
            return BookingOutcome.failed(
                form,
                BookingFailure.AUTHENTICATION_REQUIRED,
                "Please log in to book a service",
                title="Authentication required",
            )

        if current_domain.repository_for(Tailor).find(form.tailor_id) is None:
            return BookingOutcome.failed(form, BookingFailure.TAILOR_NOT_FOUND, "Tailor not found")

        missing = form.missing_fields()
        if missing:
            return BookingOutcome.failed(
                form,
                BookingFailure.VALIDATION,
                f"Please fill in all required fields: {', '.join(missing)}",
                title="Missing information",
                errors={name: ["This field is required"] for name in missing},
            )

        errors = self._format_errors(form)
        if errors:
            return BookingOutcome.failed(
                form,
                BookingFailure.VALIDATION,
                "Please correct the highlighted fields",
                title="Invalid information",
                errors=errors,
            )

        service = resolve_service(form.tailor_id, form.service_type)
        if service is None:
            return BookingOutcome.failed(
                form,
                BookingFailure.INVALID_SERVICE,
                "Selected service is not available",
                title="Invalid service",
            )

        try:
            command = CreateOrder(
                customer_id=self.identity.user_id,
                tailor_id=form.tailor_id,
                service_id=str(service.id),
                service_type=form.service_type,
                garment_type=form.garment_type,
                total_amount=service.price,
                pickup_address=form.pickup_address,
                pickup_date=pickup_timestamp(form.pickup_date, form.pickup_time),
                special_instructions=form.special_instructions,
                measurements=serialize_measurements(form.measurements),
                reference_images=json.dumps(form.reference_images),
                payment_method=form.payment_method,
            )
            order_id = current_domain.process(command, asynchronous=False)
        except ValidationError as exc:
            logger.info("booking_rejected", tailor_id=form.tailor_id, errors=exc.messages)
            return BookingOutcome.failed(
                form,
                BookingFailure.SUBMISSION_FAILED,
                "Failed to create booking. Please try again.",
                errors=dict(exc.messages),
            )
        except ObjectNotFoundError:
            logger.info("booking_target_vanished", tailor_id=form.tailor_id)
            return BookingOutcome.failed(
                form,
                BookingFailure.SUBMISSION_FAILED,
                "Failed to create booking. Please try again.",
            )

        logger.info("booking_confirmed", order_id=order_id, customer_id=self.identity.user_id)
        return BookingOutcome.booked(form, order_id)

    @staticmethod
    def _format_errors(form: BookingForm) -> dict:
        errors = {}
        try:
            date.fromisoformat(form.pickup_date)
        except ValueError:
            errors["pickup_date"] = ["Pickup date must be an ISO date (YYYY-MM-DD)"]

        if form.pickup_time and form.pickup_time not in PICKUP_SLOTS:
            errors["pickup_time"] = [f"Pickup time must be one of {', '.join(PICKUP_SLOTS)}"]

        if form.garment_type not in _GARMENT_TYPES:
            errors["garment_type"] = [f"Unknown garment type: {form.garment_type!r}"]

        if form.measurements not in _MEASUREMENT_CHOICES:
            errors["measurements"] = [f"Unknown measurements option: {form.measurements!r}"]

        if form.payment_method not in _PAYMENT_METHODS:
            errors["payment_method"] = [f"Unknown payment method: {form.payment_method!r}"]

        return errors
