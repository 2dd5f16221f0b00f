"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from tailorhub.catalogue.api.schemas import TailorProfileResponse


class RegisterRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "email": "ravi@example.com",
                    "password": "stitch-in-time",
                    "name": "Ravi Kumar",
                    "phone": "+91-98450-00000",
                    "role": "tailor",
                    "business_name": "Ravi Tailors",
                    "location": "Bangalore",
                    "specializations": ["suits", "sherwani"],
                }
            ]
        }
    }

    email: str = Field(..., max_length=254)
    password: str = Field(..., min_length=8, max_length=128)
    name: str = Field(..., max_length=200)
    phone: str | None = Field(None, max_length=20)
    role: str = "customer"
    business_name: str | None = Field(None, max_length=200)
    location: str | None = Field(None, max_length=200)
    address: str | None = None
    specializations: list[str] | None = None
    description: str | None = None
    avg_delivery_days: int | None = Field(None, ge=1)
    starting_price: float | None = Field(None, ge=0)


class LoginRequest(BaseModel):
    email: str
    password: str


class UserResponse(BaseModel):
    id: str
    email: str
    name: str
    phone: str | None = None
    role: str
    created_at: datetime | None = None


class MeResponse(UserResponse):
    tailor: TailorProfileResponse | None = None


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse
