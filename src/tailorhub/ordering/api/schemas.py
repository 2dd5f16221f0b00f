"""Pydantic request/response schemas for the Ordering API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from tailorhub.catalogue.api.schemas import ServiceResponse, TailorOwner, TailorResponse
from tailorhub.reviews.api.schemas import ReviewResponse

# --- Request Schemas ---


class CreateOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "tailor_id": "tailor-001",
                    "service_id": "service-001",
                    "service_type": "alterations",
                    "garment_type": "pants",
                    "total_amount": 350.0,
                    "pickup_address": "12 MG Road, Bangalore",
                    "pickup_date": "2026-11-02T09:00:00",
                    "measurements": '{"type": "existing"}',
                }
            ]
        }
    }

    tailor_id: str
    service_id: str
    service_type: str
    garment_type: str
    total_amount: float = Field(..., ge=0)
    pickup_address: str
    pickup_date: datetime
    special_instructions: str | None = None
    measurements: str | None = None
    reference_images: list[str] = []
    payment_method: str = "online"


class UpdateOrderStatusRequest(BaseModel):
    status: str = Field(..., max_length=30)


class ScheduleDeliveryRequest(BaseModel):
    delivery_date: datetime


# --- Response Schemas ---


class OrderIdResponse(BaseModel):
    order_id: str


class OrderStatusResponse(BaseModel):
    order_id: str
    status: str


class OrderDetailResponse(BaseModel):
    id: str
    status: str
    tracking_step: int
    service_type: str
    garment_type: str
    total_amount: float
    pickup_address: str
    pickup_date: datetime
    delivery_date: datetime | None = None
    special_instructions: str | None = None
    measurements: str | None = None
    reference_images: list[str] = []
    payment_method: str
    is_paid: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    customer: TailorOwner
    tailor: TailorResponse
    service: ServiceResponse
    review: ReviewResponse | None = None

    @classmethod
    def from_view(cls, view) -> OrderDetailResponse:
        order = view.order
        return cls(
            id=str(order.id),
            status=order.status,
            tracking_step=view.tracking_step,
            service_type=order.service_type,
            garment_type=order.garment_type,
            total_amount=order.total_amount,
            pickup_address=order.pickup_address,
            pickup_date=order.pickup_date,
            delivery_date=order.delivery_date,
            special_instructions=order.special_instructions,
            measurements=order.measurements,
            reference_images=order.reference_image_list,
            payment_method=order.payment_method,
            is_paid=bool(order.is_paid),
            created_at=order.created_at,
            updated_at=order.updated_at,
            customer=TailorOwner.from_user(view.customer),
            tailor=TailorResponse.from_view(view.tailor),
            service=ServiceResponse.from_service(view.service),
            review=ReviewResponse.from_review(view.review) if view.review else None,
        )


class TailorSummaryResponse(BaseModel):
    pending_orders: int
    in_progress_orders: int
    completed_orders: int
    monthly_earnings: float


class CustomerSummaryResponse(BaseModel):
    total_orders: int
    active_orders: int
    completed_orders: int
    total_spent: float
