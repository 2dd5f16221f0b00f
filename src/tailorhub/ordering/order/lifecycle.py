"""Order status state machine.

    pending → confirmed → pickup_scheduled → in_progress → ready
            → out_for_delivery → delivered

Any non-terminal status may also move to cancelled. delivered and cancelled
are terminal. pending is only ever an initial status.
"""

from enum import Enum

from protean.exceptions import InvalidOperationError, ValidationError


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    PICKUP_SCHEDULED = "pickup_scheduled"
    IN_PROGRESS = "in_progress"
    READY = "ready"
    OUT_FOR_DELIVERY = "out_for_delivery"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.CANCELLED},
    OrderStatus.CONFIRMED: {OrderStatus.PICKUP_SCHEDULED, OrderStatus.CANCELLED},
    OrderStatus.PICKUP_SCHEDULED: {OrderStatus.IN_PROGRESS, OrderStatus.CANCELLED},
    OrderStatus.IN_PROGRESS: {OrderStatus.READY, OrderStatus.CANCELLED},
    OrderStatus.READY: {OrderStatus.OUT_FOR_DELIVERY, OrderStatus.CANCELLED},
    OrderStatus.OUT_FOR_DELIVERY: {OrderStatus.DELIVERED, OrderStatus.CANCELLED},
    OrderStatus.DELIVERED: set(),
    OrderStatus.CANCELLED: set(),
}

# Progress indicator shown to customers; cancelled orders have no step
_TRACKING_STEPS = {
    OrderStatus.PENDING: 1,
    OrderStatus.CONFIRMED: 2,
    OrderStatus.PICKUP_SCHEDULED: 3,
    OrderStatus.IN_PROGRESS: 4,
    OrderStatus.READY: 5,
    OrderStatus.OUT_FOR_DELIVERY: 6,
    OrderStatus.DELIVERED: 7,
    OrderStatus.CANCELLED: 0,
}

TERMINAL_STATUSES = frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED})

ACTIVE_STATUSES = frozenset(
    {
        OrderStatus.CONFIRMED,
        OrderStatus.PICKUP_SCHEDULED,
        OrderStatus.IN_PROGRESS,
        OrderStatus.READY,
        OrderStatus.OUT_FOR_DELIVERY,
    }
)


class InvalidStatusTransition(InvalidOperationError):
    """The requested status change is not an edge of the state machine."""

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        self.message = f"Cannot transition from {current} to {target}"
        super().__init__(self.message)


def parse_status(value: str) -> OrderStatus:
    try:
        return OrderStatus(value)
    except ValueError:
        raise ValidationError({"status": [f"Unknown order status: {value!r}"]}) from None


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    return target in _VALID_TRANSITIONS[current]


def check_transition(current: str, target: str) -> OrderStatus:
    """Return the target status, or raise if the move is not allowed."""
    target_status = parse_status(target)
    if not can_transition(parse_status(current), target_status):
        raise InvalidStatusTransition(current, target)
    return target_status


def tracking_step(status: str) -> int:
    return _TRACKING_STEPS[parse_status(status)]
