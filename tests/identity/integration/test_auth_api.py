"""Integration tests for registration, login and /users/me."""

import inspect

import pytest

from tailorhub.identity.api.routes import login, register


class TestRegisterEndpoint:
    def test_register_customer(self, client):
        response = client.post(
            "/auth/register",
            json={"email": "asha@example.com", "password": "password123", "name": "Asha Rao"},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["access_token"]
        assert data["user"]["role"] == "customer"
        assert "password" not in data["user"]

    def test_duplicate_email_returns_400(self, client):
        body = {"email": "asha@example.com", "password": "password123", "name": "Asha Rao"}
        client.post("/auth/register", json=body)
        response = client.post("/auth/register", json=body)
        assert response.status_code == 400

    def test_short_password_rejected(self, client):
        response = client.post("/auth/register", json={"email": "a@example.com", "password": "short", "name": "A"})
        assert response.status_code == 422

    def test_tailor_without_location_returns_400(self, client):
        response = client.post(
            "/auth/register",
            json={"email": "ravi@example.com", "password": "password123", "name": "Ravi", "role": "tailor"},
        )
        assert response.status_code == 400


class TestLoginEndpoint:
    def test_login(self, client):
        client.post(
            "/auth/register",
            json={"email": "asha@example.com", "password": "password123", "name": "Asha Rao"},
        )
        response = client.post("/auth/login", json={"email": "asha@example.com", "password": "password123"})
        assert response.status_code == 200
        assert response.json()["user"]["email"] == "asha@example.com"

    def test_bad_password_returns_401(self, client):
        client.post(
            "/auth/register",
            json={"email": "asha@example.com", "password": "password123", "name": "Asha Rao"},
        )
        response = client.post("/auth/login", json={"email": "asha@example.com", "password": "nope-nope"})
        assert response.status_code == 401

    def test_unknown_email_returns_401(self, client):
        response = client.post("/auth/login", json={"email": "ghost@example.com", "password": "password123"})
        assert response.status_code == 401


class TestMeEndpoint:
    def test_customer(self, client, signup):
        user_id, headers = signup()
        response = client.get("/users/me", headers=headers)
        assert response.status_code == 200
        data = response.json()
        assert data["id"] == user_id
        assert data["tailor"] is None

    def test_tailor_includes_profile(self, client, signup):
        user_id, headers = signup(role="tailor", business_name="Ravi Tailors")
        data = client.get("/users/me", headers=headers).json()
        assert data["tailor"]["user_id"] == user_id
        assert data["tailor"]["business_name"] == "Ravi Tailors"
        assert data["tailor"]["is_verified"] is False

    def test_missing_token_returns_401(self, client):
        assert client.get("/users/me").status_code == 401

    def test_bad_token_returns_401(self, client):
        assert client.get("/users/me", headers={"Authorization": "Bearer forged"}).status_code == 401

    def test_non_bearer_scheme_returns_401(self, client):
        assert client.get("/users/me", headers={"Authorization": "Basic abc"}).status_code == 401


class TestPasswordHashingOffEventLoop:
    """bcrypt is CPU bound; these endpoints must run in FastAPI's threadpool."""

    @pytest.mark.parametrize("endpoint", [register, login])
    def test_endpoint_is_synchronous(self, endpoint):
        assert not inspect.iscoroutinefunction(endpoint)
