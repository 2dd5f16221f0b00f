"""Dashboard figures computed from a party's orders."""

from dataclasses import dataclass
from datetime import UTC, datetime

from protean.utils.globals import current_domain

from tailorhub.ordering.order.lifecycle import ACTIVE_STATUSES, OrderStatus
from tailorhub.ordering.order.order import Order


@dataclass(frozen=True)
class TailorSummary:
    pending_orders: int
    in_progress_orders: int
    completed_orders: int
    monthly_earnings: float


@dataclass(frozen=True)
class CustomerSummary:
    total_orders: int
    active_orders: int
    completed_orders: int
    total_spent: float


def _status(order: Order) -> OrderStatus:
    return OrderStatus(order.status)


def _same_month(moment: datetime | None, now: datetime) -> bool:
    return moment is not None and moment.year == now.year and moment.month == now.month


def tailor_summary(tailor_id, now: datetime | None = None) -> TailorSummary:
    """Earnings count delivered orders last touched in the current month."""
    now = now or datetime.now(UTC)
    orders = current_domain.repository_for(Order).find_by_tailor(tailor_id)

    delivered = [o for o in orders if _status(o) is OrderStatus.DELIVERED]
    return TailorSummary(
        pending_orders=sum(1 for o in orders if _status(o) is OrderStatus.PENDING),
        in_progress_orders=sum(1 for o in orders if _status(o) in ACTIVE_STATUSES),
        completed_orders=len(delivered),
        monthly_earnings=round(sum(o.total_amount for o in delivered if _same_month(o.updated_at, now)), 2),
    )


def customer_summary(customer_id) -> CustomerSummary:
    orders = current_domain.repository_for(Order).find_by_customer(customer_id)

    active = [o for o in orders if _status(o) is OrderStatus.PENDING or _status(o) in ACTIVE_STATUSES]
    delivered = [o for o in orders if _status(o) is OrderStatus.DELIVERED]
    return CustomerSummary(
        total_orders=len(orders),
        active_orders=len(active),
        completed_orders=len(delivered),
        total_spent=round(sum(o.total_amount for o in delivered), 2),
    )
