"""FastAPI endpoints for tailors and their services."""

import json

from fastapi import APIRouter, Depends, HTTPException, Query
from protean.utils.globals import current_domain

from tailorhub.catalogue.api.schemas import (
    AddServiceRequest,
    ServiceIdResponse,
    ServiceResponse,
    StatusResponse,
    TailorResponse,
    UpdateServicePriceRequest,
    UpdateTailorProfileRequest,
)
from tailorhub.catalogue.search import (
    get_reviews_by_tailor,
    get_services_by_tailor,
    get_tailor,
    get_tailor_by_user_id,
    search_tailors,
)
from tailorhub.catalogue.service.management import AddService, DeactivateService, UpdateServicePrice
from tailorhub.catalogue.tailor.management import UpdateTailorProfile, VerifyTailor
from tailorhub.identity.api.dependencies import require_admin, require_identity
from tailorhub.identity.credentials.port import Identity
from tailorhub.reviews.api.schemas import ReviewResponse

tailor_router = APIRouter(prefix="/tailors", tags=["tailors"])
service_router = APIRouter(prefix="/services", tags=["services"])


def _require_tailor(identity: Identity) -> None:
    if not identity.is_tailor:
        raise HTTPException(status_code=403, detail="Only tailors can do this")


# --- Tailor endpoints ---


@tailor_router.get("", response_model=list[TailorResponse])
async def list_tailors(
    location: str | None = None,
    service_type: str | None = None,
    min_rating: float | None = Query(None, ge=0, le=5),
) -> list[TailorResponse]:
    results = search_tailors(location=location, service_type=service_type, min_rating=min_rating)
    return [TailorResponse.from_view(view) for view in results]


@tailor_router.put("/me", response_model=TailorResponse)
async def update_my_profile(
    body: UpdateTailorProfileRequest,
    identity: Identity = Depends(require_identity),
) -> TailorResponse:
    _require_tailor(identity)
    command = UpdateTailorProfile(
        user_id=identity.user_id,
        business_name=body.business_name,
        location=body.location,
        address=body.address,
        specializations=json.dumps(body.specializations) if body.specializations is not None else None,
        description=body.description,
        avg_delivery_days=body.avg_delivery_days,
        starting_price=body.starting_price,
    )
    current_domain.process(command, asynchronous=False)
    return TailorResponse.from_view(get_tailor_by_user_id(identity.user_id))


@tailor_router.get("/{tailor_id}", response_model=TailorResponse)
async def get_tailor_detail(tailor_id: str) -> TailorResponse:
    view = get_tailor(tailor_id)
    if view is None:
        raise HTTPException(status_code=404, detail="Tailor not found")
    return TailorResponse.from_view(view)


@tailor_router.get("/{tailor_id}/services", response_model=list[ServiceResponse])
async def list_tailor_services(tailor_id: str) -> list[ServiceResponse]:
    return [ServiceResponse.from_service(s) for s in get_services_by_tailor(tailor_id)]


@tailor_router.get("/{tailor_id}/reviews", response_model=list[ReviewResponse])
async def list_tailor_reviews(tailor_id: str) -> list[ReviewResponse]:
    return [ReviewResponse.from_review(r) for r in get_reviews_by_tailor(tailor_id)]


@tailor_router.put("/{tailor_id}/verify", response_model=StatusResponse, dependencies=[Depends(require_admin)])
async def verify_tailor(tailor_id: str) -> StatusResponse:
    current_domain.process(VerifyTailor(tailor_id=tailor_id), asynchronous=False)
    return StatusResponse()


# --- Service endpoints ---


@service_router.post("", status_code=201, response_model=ServiceIdResponse)
async def add_service(body: AddServiceRequest, identity: Identity = Depends(require_identity)) -> ServiceIdResponse:
    _require_tailor(identity)
    command = AddService(
        user_id=identity.user_id,
        service_type=body.service_type,
        price=body.price,
        garment_types=json.dumps(body.garment_types),
        delivery_days=body.delivery_days,
        description=body.description,
    )
    result = current_domain.process(command, asynchronous=False)
    return ServiceIdResponse(service_id=result)


@service_router.put("/{service_id}/price", response_model=StatusResponse)
async def update_service_price(
    service_id: str,
    body: UpdateServicePriceRequest,
    identity: Identity = Depends(require_identity),
) -> StatusResponse:
    _require_tailor(identity)
    command = UpdateServicePrice(user_id=identity.user_id, service_id=service_id, price=body.price)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@service_router.put("/{service_id}/deactivate", response_model=StatusResponse)
async def deactivate_service(service_id: str, identity: Identity = Depends(require_identity)) -> StatusResponse:
    _require_tailor(identity)
    command = DeactivateService(user_id=identity.user_id, service_id=service_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
