"""FastAPI endpoints for orders.

Customers see their own orders; a tailor sees and moves the orders booked
with them. Anything else is a 403.
"""

import json
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException
from protean.utils.globals import current_domain

from tailorhub.catalogue.tailor.tailor import Tailor
from tailorhub.identity.api.dependencies import require_identity
from tailorhub.identity.credentials.port import Identity
from tailorhub.ordering.api.schemas import (
    CreateOrderRequest,
    CustomerSummaryResponse,
    OrderDetailResponse,
    OrderIdResponse,
    OrderStatusResponse,
    ScheduleDeliveryRequest,
    TailorSummaryResponse,
    UpdateOrderStatusRequest,
)
from tailorhub.ordering.order.creation import CreateOrder
from tailorhub.ordering.order.delivery import ScheduleDelivery
from tailorhub.ordering.order.order import Order
from tailorhub.ordering.order.payment import MarkOrderPaid
from tailorhub.ordering.order.status import UpdateOrderStatus
from tailorhub.ordering.summaries import customer_summary, tailor_summary
from tailorhub.ordering.views import get_order, get_orders_by_customer, get_orders_by_tailor

order_router = APIRouter(prefix="/orders", tags=["orders"])


def _load_order(order_id: str) -> Order:
    order = current_domain.repository_for(Order).find(order_id)
    if order is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


def _owns_tailor(identity: Identity, tailor_id) -> bool:
    tailor = current_domain.repository_for(Tailor).find(tailor_id)
    return tailor is not None and str(tailor.user_id) == identity.user_id


def _require_tailor_owner(identity: Identity, tailor_id) -> None:
    if not _owns_tailor(identity, tailor_id):
        raise HTTPException(status_code=403, detail="Not authorized for this tailor's orders")


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def create_order(body: CreateOrderRequest, identity: Identity = Depends(require_identity)) -> OrderIdResponse:
    command = CreateOrder(
        customer_id=identity.user_id,
        tailor_id=body.tailor_id,
        service_id=body.service_id,
        service_type=body.service_type,
        garment_type=body.garment_type,
        total_amount=body.total_amount,
        pickup_address=body.pickup_address,
        pickup_date=body.pickup_date,
        special_instructions=body.special_instructions,
        measurements=body.measurements,
        reference_images=json.dumps(body.reference_images),
        payment_method=body.payment_method,
    )
    result = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=result)


@order_router.get("/customer", response_model=list[OrderDetailResponse])
async def list_customer_orders(identity: Identity = Depends(require_identity)) -> list[OrderDetailResponse]:
    return [OrderDetailResponse.from_view(view) for view in get_orders_by_customer(identity.user_id)]


@order_router.get("/customer/summary", response_model=CustomerSummaryResponse)
async def get_customer_summary(identity: Identity = Depends(require_identity)) -> CustomerSummaryResponse:
    return CustomerSummaryResponse(**asdict(customer_summary(identity.user_id)))


@order_router.get("/tailor/{tailor_id}", response_model=list[OrderDetailResponse])
async def list_tailor_orders(
    tailor_id: str,
    identity: Identity = Depends(require_identity),
) -> list[OrderDetailResponse]:
    _require_tailor_owner(identity, tailor_id)
    return [OrderDetailResponse.from_view(view) for view in get_orders_by_tailor(tailor_id)]


@order_router.get("/tailor/{tailor_id}/summary", response_model=TailorSummaryResponse)
async def get_tailor_summary(tailor_id: str, identity: Identity = Depends(require_identity)) -> TailorSummaryResponse:
    _require_tailor_owner(identity, tailor_id)
    return TailorSummaryResponse(**asdict(tailor_summary(tailor_id)))


@order_router.get("/{order_id}", response_model=OrderDetailResponse)
async def get_order_detail(order_id: str, identity: Identity = Depends(require_identity)) -> OrderDetailResponse:
    order = _load_order(order_id)
    if str(order.customer_id) != identity.user_id and not _owns_tailor(identity, order.tailor_id):
        raise HTTPException(status_code=403, detail="Not authorized to view this order")

    view = get_order(order_id)
    if view is None:
        raise HTTPException(status_code=404, detail="Order not found")
    return OrderDetailResponse.from_view(view)


@order_router.patch("/{order_id}/status", response_model=OrderStatusResponse)
async def update_order_status(
    order_id: str,
    body: UpdateOrderStatusRequest,
    identity: Identity = Depends(require_identity),
) -> OrderStatusResponse:
    order = _load_order(order_id)
    _require_tailor_owner(identity, order.tailor_id)

    status = current_domain.process(UpdateOrderStatus(order_id=order_id, status=body.status), asynchronous=False)
    return OrderStatusResponse(order_id=order_id, status=status)


@order_router.put("/{order_id}/delivery-date", response_model=OrderStatusResponse)
async def schedule_delivery(
    order_id: str,
    body: ScheduleDeliveryRequest,
    identity: Identity = Depends(require_identity),
) -> OrderStatusResponse:
    order = _load_order(order_id)
    _require_tailor_owner(identity, order.tailor_id)

    current_domain.process(ScheduleDelivery(order_id=order_id, delivery_date=body.delivery_date), asynchronous=False)
    return OrderStatusResponse(order_id=order_id, status=order.status)


@order_router.post("/{order_id}/payment", response_model=OrderStatusResponse)
async def mark_paid(order_id: str, identity: Identity = Depends(require_identity)) -> OrderStatusResponse:
    order = _load_order(order_id)
    if str(order.customer_id) != identity.user_id:
        raise HTTPException(status_code=403, detail="Only the customer can pay for this order")

    current_domain.process(MarkOrderPaid(order_id=order_id), asynchronous=False)
    return OrderStatusResponse(order_id=order_id, status=order.status)
