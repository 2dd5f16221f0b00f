import json
import os
from datetime import datetime, timedelta
from pathlib import Path

import pytest

os.environ.setdefault("PROTEAN_ENV", "test")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from protean.integrations.pytest import DomainFixture  # noqa: E402


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def tailorhub_bed():
    from tailorhub.domain import tailorhub

    bed = DomainFixture(tailorhub)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(tailorhub_bed):
    with tailorhub_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()

    from tailorhub.identity.credentials import reset_credential_service

    reset_credential_service()


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------
# Each factory goes through the real commands so records are built the same
# way the application builds them.


@pytest.fixture()
def register_customer():
    from protean import current_domain

    from tailorhub.identity.user.registration import RegisterUser

    counter = iter(range(1, 10_000))

    def _register(email=None, name="Asha Rao", password="password123"):
        email = email or f"customer{next(counter)}@example.com"
        return current_domain.process(
            RegisterUser(email=email, password=password, name=name, role="customer"),
            asynchronous=False,
        )

    return _register


@pytest.fixture()
def register_tailor():
    """Register a tailor user; returns (user_id, tailor_id)."""
    from protean import current_domain

    from tailorhub.catalogue.tailor.management import VerifyTailor
    from tailorhub.catalogue.tailor.tailor import Tailor
    from tailorhub.identity.user.registration import RegisterUser

    counter = iter(range(1, 10_000))

    def _register(location="Indiranagar, Bangalore", verified=True, email=None, **profile):
        email = email or f"tailor{next(counter)}@example.com"
        if "specializations" in profile:
            profile["specializations"] = json.dumps(profile["specializations"])
        user_id = current_domain.process(
            RegisterUser(
                email=email,
                password="password123",
                name=profile.pop("name", "Ravi Kumar"),
                role="tailor",
                location=location,
                **profile,
            ),
            asynchronous=False,
        )
        tailor = current_domain.repository_for(Tailor).find_by_user_id(user_id)
        if verified:
            current_domain.process(VerifyTailor(tailor_id=str(tailor.id)), asynchronous=False)
        return user_id, str(tailor.id)

    return _register


@pytest.fixture()
def add_service():
    from protean import current_domain

    from tailorhub.catalogue.service.management import AddService

    def _add(tailor_user_id, service_type="alterations", price=350.0, garment_types=("pants", "shirt"), **extra):
        return current_domain.process(
            AddService(
                user_id=tailor_user_id,
                service_type=service_type,
                price=price,
                garment_types=json.dumps(list(garment_types)),
                **extra,
            ),
            asynchronous=False,
        )

    return _add


@pytest.fixture()
def place_order():
    from protean import current_domain

    from tailorhub.catalogue.service.service import Service
    from tailorhub.ordering.order.creation import CreateOrder

    def _place(customer_id, tailor_id, service_id, garment_type="pants", **extra):
        service = current_domain.repository_for(Service).get(service_id)
        fields = {
            "customer_id": customer_id,
            "tailor_id": tailor_id,
            "service_id": service_id,
            "service_type": service.service_type,
            "garment_type": garment_type,
            "total_amount": service.price,
            "pickup_address": "12 MG Road, Bangalore",
            "pickup_date": datetime.now() + timedelta(days=2),
        }
        fields.update(extra)
        return current_domain.process(CreateOrder(**fields), asynchronous=False)

    return _place


@pytest.fixture()
def advance_order():
    """Walk an order forward through the lifecycle up to `target`."""
    from protean import current_domain

    from tailorhub.ordering.order.order import Order
    from tailorhub.ordering.order.status import UpdateOrderStatus

    path = [
        "confirmed",
        "pickup_scheduled",
        "in_progress",
        "ready",
        "out_for_delivery",
        "delivered",
    ]

    def _advance(order_id, target="delivered"):
        current = current_domain.repository_for(Order).get(order_id).status
        start = path.index(current) + 1 if current in path else 0
        for status in path[start : path.index(target) + 1]:
            current_domain.process(UpdateOrderStatus(order_id=order_id, status=status), asynchronous=False)

    return _advance


@pytest.fixture()
def marketplace(register_customer, register_tailor, add_service):
    """One customer, one verified tailor with an alterations service."""
    customer_id = register_customer()
    tailor_user_id, tailor_id = register_tailor()
    service_id = add_service(tailor_user_id)
    return {
        "customer_id": customer_id,
        "tailor_user_id": tailor_user_id,
        "tailor_id": tailor_id,
        "service_id": service_id,
    }


@pytest.fixture()
def delivered_order(marketplace, place_order, advance_order):
    order_id = place_order(marketplace["customer_id"], marketplace["tailor_id"], marketplace["service_id"])
    advance_order(order_id, "delivered")
    return {**marketplace, "order_id": order_id}


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------
@pytest.fixture()
def client():
    from fastapi import FastAPI
    from fastapi.testclient import TestClient

    from tailorhub.booking.api import booking_router
    from tailorhub.catalogue.api import service_router, tailor_router
    from tailorhub.identity.api import auth_router, user_router
    from tailorhub.ordering.api import order_router
    from tailorhub.reviews.api import review_router
    from tailorhub.utils.http import register_error_handlers

    app = FastAPI()
    for router in (auth_router, user_router, tailor_router, service_router, order_router, booking_router, review_router):
        app.include_router(router)
    register_error_handlers(app)
    return TestClient(app)


@pytest.fixture()
def signup(client):
    """Register through the API; returns (user_id, auth headers)."""
    counter = iter(range(1, 10_000))

    def _signup(role="customer", **extra):
        body = {
            "email": f"{role}{next(counter)}@example.com",
            "password": "password123",
            "name": "Test User",
            "role": role,
        }
        if role == "tailor":
            body.setdefault("location", "Indiranagar, Bangalore")
        body.update(extra)
        response = client.post("/auth/register", json=body)
        assert response.status_code == 201, response.text
        data = response.json()
        return data["user"]["id"], {"Authorization": f"Bearer {data['access_token']}"}

    return _signup
