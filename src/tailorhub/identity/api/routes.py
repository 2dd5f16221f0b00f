"""FastAPI endpoints for accounts and sessions."""

import json

from fastapi import APIRouter, Depends, HTTPException
from protean.utils.globals import current_domain

from tailorhub.catalogue.api.schemas import TailorProfileResponse
from tailorhub.catalogue.search import get_tailor_by_user_id
from tailorhub.identity.api.dependencies import require_identity
from tailorhub.identity.api.schemas import LoginRequest, MeResponse, RegisterRequest, TokenResponse, UserResponse
from tailorhub.identity.credentials import get_credential_service
from tailorhub.identity.credentials.port import Identity
from tailorhub.identity.user.authentication import authenticate, current_user
from tailorhub.identity.user.registration import RegisterUser
from tailorhub.identity.user.user import User

auth_router = APIRouter(prefix="/auth", tags=["auth"])
user_router = APIRouter(prefix="/users", tags=["users"])


def user_response(user: User) -> UserResponse:
    return UserResponse(
        id=str(user.id),
        email=user.email,
        name=user.name,
        phone=user.phone,
        role=user.role,
        created_at=user.created_at,
    )


@auth_router.post("/register", status_code=201, response_model=TokenResponse)
def register(body: RegisterRequest) -> TokenResponse:
    command = RegisterUser(
        email=body.email,
        password=body.password,
        name=body.name,
        phone=body.phone,
        role=body.role,
        business_name=body.business_name,
        location=body.location,
        address=body.address,
        specializations=json.dumps(body.specializations) if body.specializations is not None else None,
        description=body.description,
        avg_delivery_days=body.avg_delivery_days,
        starting_price=body.starting_price,
    )
    user_id = current_domain.process(command, asynchronous=False)

    user = current_domain.repository_for(User).get(user_id)
    token = get_credential_service().issue(str(user.id), user.role)
    return TokenResponse(access_token=token, user=user_response(user))


@auth_router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest) -> TokenResponse:
    result = authenticate(body.email, body.password)
    if result is None:
        raise HTTPException(status_code=401, detail="Incorrect email or password")

    token, user = result
    return TokenResponse(access_token=token, user=user_response(user))


@user_router.get("/me", response_model=MeResponse)
async def me(identity: Identity = Depends(require_identity)) -> MeResponse:
    user = current_user(identity)
    if user is None:
        raise HTTPException(status_code=401, detail="Could not validate credentials")

    tailor = None
    if user.is_tailor:
        view = get_tailor_by_user_id(user.id)
        tailor = TailorProfileResponse.from_tailor(view.tailor) if view else None
    return MeResponse(**user_response(user).model_dump(), tailor=tailor)
