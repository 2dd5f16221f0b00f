"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

# --- Tailor Schemas ---


class UpdateTailorProfileRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "business_name": "Ravi Tailors",
                    "location": "Indiranagar, Bangalore",
                    "specializations": ["suits", "sherwani", "alterations"],
                    "avg_delivery_days": 4,
                    "starting_price": 499.0,
                }
            ]
        }
    }

    business_name: str | None = Field(None, max_length=200)
    location: str | None = Field(None, max_length=200)
    address: str | None = None
    specializations: list[str] | None = None
    description: str | None = None
    avg_delivery_days: int | None = Field(None, ge=1)
    starting_price: float | None = Field(None, ge=0)


class TailorOwner(BaseModel):
    """Public contact details of the user behind a tailor profile."""

    id: str
    name: str
    email: str
    phone: str | None = None

    @classmethod
    def from_user(cls, user) -> TailorOwner:
        return cls(id=str(user.id), name=user.name, email=user.email, phone=user.phone)


class TailorProfileResponse(BaseModel):
    id: str
    user_id: str
    business_name: str | None = None
    location: str
    address: str | None = None
    specializations: list[str] = []
    description: str | None = None
    rating: float
    total_reviews: int
    is_verified: bool
    avg_delivery_days: int
    starting_price: float | None = None
    created_at: datetime | None = None

    @classmethod
    def from_tailor(cls, tailor) -> TailorProfileResponse:
        return cls(
            id=str(tailor.id),
            user_id=str(tailor.user_id),
            business_name=tailor.business_name,
            location=tailor.location,
            address=tailor.address,
            specializations=tailor.specialization_list,
            description=tailor.description,
            rating=tailor.rating or 0.0,
            total_reviews=tailor.total_reviews or 0,
            is_verified=bool(tailor.is_verified),
            avg_delivery_days=tailor.avg_delivery_days,
            starting_price=tailor.starting_price,
            created_at=tailor.created_at,
        )


class TailorResponse(TailorProfileResponse):
    user: TailorOwner

    @classmethod
    def from_view(cls, view) -> TailorResponse:
        profile = TailorProfileResponse.from_tailor(view.tailor)
        return cls(**profile.model_dump(), user=TailorOwner.from_user(view.user))


# --- Service Schemas ---


class AddServiceRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "service_type": "custom_stitching",
                    "garment_types": ["suit", "sherwani"],
                    "price": 2500.0,
                    "delivery_days": 7,
                    "description": "Made-to-measure suits and sherwanis",
                }
            ]
        }
    }

    service_type: str
    garment_types: list[str] = []
    price: float = Field(..., ge=0)
    delivery_days: int | None = Field(None, ge=1)
    description: str | None = None


class UpdateServicePriceRequest(BaseModel):
    price: float = Field(..., ge=0)


class ServiceResponse(BaseModel):
    id: str
    tailor_id: str
    service_type: str
    garment_types: list[str] = []
    price: float
    delivery_days: int
    description: str | None = None
    is_active: bool

    @classmethod
    def from_service(cls, service) -> ServiceResponse:
        return cls(
            id=str(service.id),
            tailor_id=str(service.tailor_id),
            service_type=service.service_type,
            garment_types=service.garment_type_list,
            price=service.price,
            delivery_days=service.delivery_days,
            description=service.description,
            is_active=bool(service.is_active),
        )


class ServiceIdResponse(BaseModel):
    service_id: str


class StatusResponse(BaseModel):
    status: str = "ok"
