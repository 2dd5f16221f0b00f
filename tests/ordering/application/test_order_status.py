from datetime import datetime, timedelta

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError

from tailorhub.ordering.order.delivery import ScheduleDelivery
from tailorhub.ordering.order.lifecycle import InvalidStatusTransition
from tailorhub.ordering.order.order import Order
from tailorhub.ordering.order.payment import MarkOrderPaid
from tailorhub.ordering.order.status import UpdateOrderStatus


@pytest.fixture()
def order_id(marketplace, place_order):
    return place_order(marketplace["customer_id"], marketplace["tailor_id"], marketplace["service_id"])


def _update(order_id, status):
    return current_domain.process(UpdateOrderStatus(order_id=order_id, status=status), asynchronous=False)


class TestUpdateOrderStatus:
    def test_forward_step_persisted(self, order_id):
        assert _update(order_id, "confirmed") == "confirmed"
        assert current_domain.repository_for(Order).get(order_id).status == "confirmed"

    def test_full_lifecycle(self, order_id, advance_order):
        advance_order(order_id, "delivered")
        assert current_domain.repository_for(Order).get(order_id).status == "delivered"

    def test_pending_to_delivered_rejected(self, order_id):
        with pytest.raises(InvalidStatusTransition):
            _update(order_id, "delivered")
        assert current_domain.repository_for(Order).get(order_id).status == "pending"

    def test_delivered_is_terminal(self, order_id, advance_order):
        advance_order(order_id, "delivered")
        with pytest.raises(InvalidStatusTransition):
            _update(order_id, "cancelled")

    def test_cancelled_is_terminal(self, order_id):
        _update(order_id, "cancelled")
        with pytest.raises(InvalidStatusTransition):
            _update(order_id, "confirmed")

    def test_unknown_status(self, order_id):
        with pytest.raises(ValidationError):
            _update(order_id, "lost")

    def test_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            _update("missing", "confirmed")

    def test_status_change_keeps_amount(self, order_id):
        _update(order_id, "confirmed")
        assert current_domain.repository_for(Order).get(order_id).total_amount == 350.0


class TestPaymentAndDelivery:
    def test_mark_paid(self, order_id):
        current_domain.process(MarkOrderPaid(order_id=order_id), asynchronous=False)
        assert current_domain.repository_for(Order).get(order_id).is_paid is True

    def test_schedule_delivery(self, order_id):
        when = datetime.now() + timedelta(days=7)
        current_domain.process(ScheduleDelivery(order_id=order_id, delivery_date=when), asynchronous=False)
        assert current_domain.repository_for(Order).get(order_id).delivery_date is not None
