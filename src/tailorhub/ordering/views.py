"""Order read side: the denormalised "order with details" view.

A view is assembled only when every required join target resolves. A
missing customer, tailor, tailor user or service withholds the whole view
(None) rather than returning a partially filled one.
"""

from dataclasses import dataclass

from protean.utils.globals import current_domain

from tailorhub.catalogue.search import TailorWithUser, get_tailor
from tailorhub.catalogue.service.service import Service
from tailorhub.identity.user.user import User
from tailorhub.ordering.order.order import Order
from tailorhub.reviews.review.review import Review
from tailorhub.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class OrderWithDetails:
    order: Order
    customer: User
    tailor: TailorWithUser
    service: Service
    review: Review | None = None

    @property
    def tracking_step(self) -> int:
        return self.order.tracking_step


def assemble_order_view(order: Order) -> OrderWithDetails | None:
    customer = current_domain.repository_for(User).find(order.customer_id)
    tailor = get_tailor(order.tailor_id)
    service = current_domain.repository_for(Service).find(order.service_id)

    if customer is None or tailor is None or service is None:
        logger.warning(
            "order_view_incomplete",
            order_id=str(order.id),
            customer_found=customer is not None,
            tailor_found=tailor is not None,
            service_found=service is not None,
        )
        return None

    review = current_domain.repository_for(Review).find_by_order(order.id)
    return OrderWithDetails(order=order, customer=customer, tailor=tailor, service=service, review=review)


def get_order(order_id) -> OrderWithDetails | None:
    order = current_domain.repository_for(Order).find(order_id)
    if order is None:
        return None
    return assemble_order_view(order)


def _assembled_newest_first(orders: list[Order]) -> list[OrderWithDetails]:
    views = []
    for order in sorted(orders, key=lambda o: o.created_at, reverse=True):
        view = assemble_order_view(order)
        if view is not None:
            views.append(view)
    return views


def get_orders_by_customer(customer_id) -> list[OrderWithDetails]:
    return _assembled_newest_first(current_domain.repository_for(Order).find_by_customer(customer_id))


def get_orders_by_tailor(tailor_id) -> list[OrderWithDetails]:
    return _assembled_newest_first(current_domain.repository_for(Order).find_by_tailor(tailor_id))
