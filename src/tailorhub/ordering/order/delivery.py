"""ScheduleDelivery: set or move the expected delivery date."""

from protean import handle
from protean.fields import DateTime, Identifier
from protean.utils.globals import current_domain

from tailorhub.domain import tailorhub
from tailorhub.ordering.order.order import Order


@tailorhub.command(part_of="Order")
class ScheduleDelivery:
    order_id: Identifier(required=True)
    delivery_date: DateTime(required=True)


@tailorhub.command_handler(part_of=Order)
class ScheduleDeliveryHandler:
    @handle(ScheduleDelivery)
    def schedule_delivery(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.schedule_delivery(command.delivery_date)
        repo.add(order)
