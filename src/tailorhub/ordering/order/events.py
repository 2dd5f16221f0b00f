"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from tailorhub.domain import tailorhub


@tailorhub.event(part_of="Order")
class OrderPlaced:
    """A booking became a pending order."""

    __version__ = 1

    order_id: Identifier(required=True)
    customer_id: Identifier(required=True)
    tailor_id: Identifier(required=True)
    service_id: Identifier(required=True)
    total_amount: Float(required=True)
    placed_at: DateTime(required=True)


@tailorhub.event(part_of="Order")
class OrderStatusChanged:
    __version__ = 1

    order_id: Identifier(required=True)
    tailor_id: Identifier(required=True)
    previous_status: String(required=True)
    new_status: String(required=True)
    changed_at: DateTime(required=True)


@tailorhub.event(part_of="Order")
class OrderPaid:
    __version__ = 1

    order_id: Identifier(required=True)
    amount: Float(required=True)
    payment_method: String()
    paid_at: DateTime(required=True)


@tailorhub.event(part_of="Order")
class DeliveryScheduled:
    __version__ = 1

    order_id: Identifier(required=True)
    delivery_date: DateTime(required=True)
