"""CreateOrder: turn a resolved booking request into a pending order.

`total_amount` arrives already resolved from the service price and is
stored as given. The handler checks that the referenced customer, tailor and
service exist and belong together before anything is written.
"""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, String, Text
from protean.utils.globals import current_domain

from tailorhub.catalogue.service.service import GarmentType, Service, ServiceType
from tailorhub.catalogue.tailor.tailor import Tailor
from tailorhub.domain import tailorhub
from tailorhub.identity.user.user import User
from tailorhub.ordering.order.order import Order, PaymentMethod
from tailorhub.utils.logging import get_logger

logger = get_logger(__name__)


@tailorhub.command(part_of="Order")
class CreateOrder:
    customer_id: Identifier(required=True)
    tailor_id: Identifier(required=True)
    service_id: Identifier(required=True)
    service_type: String(required=True, choices=ServiceType)
    garment_type: String(required=True, choices=GarmentType)
    total_amount: Float(required=True, min_value=0.0)
    pickup_address: Text(required=True)
    pickup_date: DateTime(required=True)
    special_instructions: Text()
    measurements: Text()
    reference_images: Text()  # JSON array of image URLs
    payment_method: String(choices=PaymentMethod, default=PaymentMethod.ONLINE.value)


@tailorhub.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        if current_domain.repository_for(User).find(command.customer_id) is None:
            raise ValidationError({"customer_id": ["Customer not found"]})

        tailor = current_domain.repository_for(Tailor).find(command.tailor_id)
        if tailor is None:
            raise ValidationError({"tailor_id": ["Tailor not found"]})

        service = current_domain.repository_for(Service).find(command.service_id)
        if service is None:
            raise ValidationError({"service_id": ["Service not found"]})
        if str(service.tailor_id) != str(tailor.id):
            raise ValidationError({"service_id": ["Service is not offered by this tailor"]})
        if not service.is_active:
            raise ValidationError({"service_id": ["Service is no longer offered"]})
        if service.service_type != command.service_type:
            raise ValidationError({"service_type": ["Service type does not match the selected service"]})

        if not service.covers_garment(command.garment_type):
            logger.warning(
                "garment_not_in_service",
                service_id=str(service.id),
                garment_type=command.garment_type,
            )

        order = Order.place(
            customer_id=command.customer_id,
            tailor_id=str(tailor.id),
            service_id=str(service.id),
            service_type=command.service_type,
            garment_type=command.garment_type,
            total_amount=command.total_amount,
            pickup_address=command.pickup_address,
            pickup_date=command.pickup_date,
            special_instructions=command.special_instructions,
            measurements=command.measurements,
            reference_images=json.loads(command.reference_images) if command.reference_images else [],
            payment_method=command.payment_method,
        )
        current_domain.repository_for(Order).add(order)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            customer_id=str(order.customer_id),
            tailor_id=str(order.tailor_id),
            total_amount=order.total_amount,
        )
        return str(order.id)
