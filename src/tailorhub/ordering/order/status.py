"""UpdateOrderStatus: move an order one step along its lifecycle."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from tailorhub.domain import tailorhub
from tailorhub.ordering.order.order import Order
from tailorhub.utils.logging import get_logger

logger = get_logger(__name__)


@tailorhub.command(part_of="Order")
class UpdateOrderStatus:
    order_id: Identifier(required=True)
    status: String(required=True, max_length=30)


@tailorhub.command_handler(part_of=Order)
class UpdateOrderStatusHandler:
    @handle(UpdateOrderStatus)
    def update_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)

        previous = order.status
        order.transition_to(command.status)
        repo.add(order)

        logger.info(
            "order_status_changed",
            order_id=str(order.id),
            previous_status=previous,
            new_status=order.status,
        )
        return order.status
