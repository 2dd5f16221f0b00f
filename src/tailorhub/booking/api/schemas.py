"""Pydantic request/response schemas for the Booking API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class BookingRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "tailor_id": "tailor-001",
                    "service_type": "alterations",
                    "garment_type": "pants",
                    "pickup_date": "2026-11-02",
                    "pickup_time": "09:00",
                    "pickup_address": "12 MG Road, Bangalore",
                    "measurements": "existing",
                    "payment_method": "online",
                }
            ]
        }
    }

    tailor_id: str
    service_type: str | None = None
    garment_type: str | None = None
    pickup_date: str | None = None
    pickup_time: str | None = None
    pickup_address: str | None = None
    special_instructions: str | None = Field(None, max_length=2000)
    measurements: str = "existing"
    payment_method: str = "online"
    reference_images: list[str] = []


class PriceLineResponse(BaseModel):
    label: str
    amount: float


class BookingConfirmation(BaseModel):
    order_id: str
    title: str
    message: str
    price_breakdown: list[PriceLineResponse]
    estimated_total: float


class BookingError(BaseModel):
    failure: str
    title: str
    message: str
    errors: dict = {}
