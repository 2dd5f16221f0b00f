"""Repository for the Order aggregate."""

from protean.exceptions import ObjectNotFoundError

from tailorhub.domain import tailorhub
from tailorhub.ordering.order.order import Order


@tailorhub.repository(part_of=Order)
class OrderRepository:
    def find(self, order_id) -> Order | None:
        if not order_id:
            return None
        try:
            return self.get(str(order_id))
        except ObjectNotFoundError:
            return None

    def find_by_customer(self, customer_id) -> list[Order]:
        return self._dao.query.filter(customer_id=str(customer_id)).limit(None).all().items

    def find_by_tailor(self, tailor_id) -> list[Order]:
        return self._dao.query.filter(tailor_id=str(tailor_id)).limit(None).all().items
