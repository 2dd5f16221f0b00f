"""MarkOrderPaid: record that the customer has paid.

No gateway is involved; this only flips the flag.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from tailorhub.domain import tailorhub
from tailorhub.ordering.order.order import Order


@tailorhub.command(part_of="Order")
class MarkOrderPaid:
    order_id: Identifier(required=True)


@tailorhub.command_handler(part_of=Order)
class MarkOrderPaidHandler:
    @handle(MarkOrderPaid)
    def mark_paid(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.mark_paid()
        repo.add(order)
