"""Order aggregate: one booked engagement between a customer and a tailor.

After placement the parties, the service and `total_amount` are fixed.
Only `status`, `is_paid`, `delivery_date` and `updated_at` move afterwards,
and status moves only along the edges in lifecycle.py.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, String, Text

from tailorhub.catalogue.service.service import GarmentType, ServiceType
from tailorhub.domain import tailorhub
from tailorhub.ordering.order.events import (
    DeliveryScheduled,
    OrderPaid,
    OrderPlaced,
    OrderStatusChanged,
)
from tailorhub.ordering.order.lifecycle import (
    TERMINAL_STATUSES,
    OrderStatus,
    check_transition,
    parse_status,
    tracking_step,
)


class PaymentMethod(Enum):
    ONLINE = "online"
    COD = "cod"


@tailorhub.aggregate
class Order:
    customer_id: Identifier(required=True)
    tailor_id: Identifier(required=True)
    service_id: Identifier(required=True)
    service_type: String(required=True, choices=ServiceType)
    garment_type: String(required=True, choices=GarmentType)
    status: String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    total_amount: Float(required=True, min_value=0.0)

    pickup_address: Text(required=True)
    pickup_date: DateTime(required=True)
    delivery_date: DateTime()
    special_instructions: Text()
    measurements: Text()  # opaque serialized string
    reference_images: Text()  # JSON array of image URLs

    payment_method: String(choices=PaymentMethod, default=PaymentMethod.ONLINE.value)
    is_paid: Boolean(default=False)
    created_at: DateTime()
    updated_at: DateTime()

    @invariant.post
    def pickup_address_must_not_be_blank(self):
        if self.pickup_address is not None and not self.pickup_address.strip():
            raise ValidationError({"pickup_address": ["Pickup address cannot be empty"]})

    @classmethod
    def place(
        cls,
        customer_id,
        tailor_id,
        service_id,
        service_type,
        garment_type,
        total_amount,
        pickup_address,
        pickup_date,
        special_instructions=None,
        measurements=None,
        reference_images=None,
        payment_method=PaymentMethod.ONLINE.value,
    ):
        now = datetime.now(UTC)
        order = cls(
            customer_id=customer_id,
            tailor_id=tailor_id,
            service_id=service_id,
            service_type=service_type,
            garment_type=garment_type,
            status=OrderStatus.PENDING.value,
            total_amount=total_amount,
            pickup_address=pickup_address,
            pickup_date=pickup_date,
            special_instructions=special_instructions,
            measurements=measurements,
            reference_images=json.dumps(reference_images or []),
            payment_method=payment_method or PaymentMethod.ONLINE.value,
            is_paid=False,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_id=str(customer_id),
                tailor_id=str(tailor_id),
                service_id=str(service_id),
                total_amount=total_amount,
                placed_at=now,
            )
        )
        return order

    @property
    def reference_image_list(self) -> list[str]:
        return json.loads(self.reference_images) if self.reference_images else []

    @property
    def is_terminal(self) -> bool:
        return parse_status(self.status) in TERMINAL_STATUSES

    @property
    def tracking_step(self) -> int:
        return tracking_step(self.status)

    def transition_to(self, target: str):
        """Move to `target`, raising InvalidStatusTransition before any change."""
        previous = self.status
        check_transition(previous, target)

        now = datetime.now(UTC)
        self.status = target
        self.updated_at = now
        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                tailor_id=str(self.tailor_id),
                previous_status=previous,
                new_status=target,
                changed_at=now,
            )
        )

    def mark_paid(self):
        if self.is_paid:
            raise ValidationError({"is_paid": ["Order is already paid"]})
        if self.status == OrderStatus.CANCELLED.value:
            raise ValidationError({"status": ["Cannot pay for a cancelled order"]})

        now = datetime.now(UTC)
        self.is_paid = True
        self.updated_at = now
        self.raise_(
            OrderPaid(
                order_id=str(self.id),
                amount=self.total_amount,
                payment_method=self.payment_method,
                paid_at=now,
            )
        )

    def schedule_delivery(self, delivery_date: datetime):
        if self.is_terminal:
            raise ValidationError({"status": [f"Cannot schedule delivery for a {self.status} order"]})

        self.delivery_date = delivery_date
        self.updated_at = datetime.now(UTC)
        self.raise_(
            DeliveryScheduled(
                order_id=str(self.id),
                delivery_date=delivery_date,
            )
        )
