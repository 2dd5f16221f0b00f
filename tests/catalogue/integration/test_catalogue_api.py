"""Integration tests for the tailor and service endpoints."""

import pytest

ADMIN = {"X-Admin-Key": "admin123"}


@pytest.fixture()
def tailor(client, signup):
    """A verified tailor registered over HTTP: (user_id, tailor_id, headers)."""
    user_id, headers = signup(role="tailor", location="Indiranagar, Bangalore", business_name="Ravi Tailors")
    tailor_id = client.get("/users/me", headers=headers).json()["tailor"]["id"]
    assert client.put(f"/tailors/{tailor_id}/verify", headers=ADMIN).status_code == 200
    return user_id, tailor_id, headers


def _add_service(client, headers, **overrides):
    body = {"service_type": "alterations", "garment_types": ["pants"], "price": 350.0}
    body.update(overrides)
    response = client.post("/services", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["service_id"]


class TestTailorSearchEndpoint:
    def test_lists_verified_tailors(self, client, tailor, signup):
        signup(role="tailor")  # never verified
        response = client.get("/tailors")
        assert response.status_code == 200
        assert [t["id"] for t in response.json()] == [tailor[1]]

    def test_result_carries_owner(self, client, tailor):
        result = client.get("/tailors").json()[0]
        assert result["user"]["id"] == tailor[0]
        assert result["business_name"] == "Ravi Tailors"
        assert result["rating"] == 0.0

    def test_location_filter(self, client, tailor):
        assert len(client.get("/tailors", params={"location": "indiranagar"}).json()) == 1
        assert client.get("/tailors", params={"location": "Mumbai"}).json() == []

    def test_service_type_filter(self, client, tailor):
        _add_service(client, tailor[2], service_type="repairs")
        assert len(client.get("/tailors", params={"service_type": "repairs"}).json()) == 1
        assert client.get("/tailors", params={"service_type": "uniforms"}).json() == []

    def test_min_rating_out_of_range(self, client):
        assert client.get("/tailors", params={"min_rating": 7}).status_code == 422


class TestTailorDetailEndpoints:
    def test_get_tailor(self, client, tailor):
        response = client.get(f"/tailors/{tailor[1]}")
        assert response.status_code == 200
        assert response.json()["id"] == tailor[1]

    def test_unknown_tailor_returns_404(self, client):
        assert client.get("/tailors/missing").status_code == 404

    def test_services(self, client, tailor):
        service_id = _add_service(client, tailor[2])
        response = client.get(f"/tailors/{tailor[1]}/services")
        assert [s["id"] for s in response.json()] == [service_id]

    def test_reviews_empty(self, client, tailor):
        assert client.get(f"/tailors/{tailor[1]}/reviews").json() == []


class TestUpdateOwnProfile:
    def test_update(self, client, tailor):
        response = client.put("/tailors/me", json={"description": "Since 1998"}, headers=tailor[2])
        assert response.status_code == 200
        assert response.json()["description"] == "Since 1998"
        assert response.json()["business_name"] == "Ravi Tailors"

    def test_customer_forbidden(self, client, signup):
        _, headers = signup()
        assert client.put("/tailors/me", json={"description": "x"}, headers=headers).status_code == 403

    def test_anonymous_unauthorized(self, client):
        assert client.put("/tailors/me", json={"description": "x"}).status_code == 401


class TestVerifyEndpoint:
    def test_wrong_admin_key_forbidden(self, client, signup):
        _, headers = signup(role="tailor")
        tailor_id = client.get("/users/me", headers=headers).json()["tailor"]["id"]
        response = client.put(f"/tailors/{tailor_id}/verify", headers={"X-Admin-Key": "guess"})
        assert response.status_code == 403

    def test_admin_key_from_environment(self, client, signup, monkeypatch):
        monkeypatch.setenv("ADMIN_KEY", "rotated")
        _, headers = signup(role="tailor")
        tailor_id = client.get("/users/me", headers=headers).json()["tailor"]["id"]
        assert client.put(f"/tailors/{tailor_id}/verify", headers=ADMIN).status_code == 403
        assert client.put(f"/tailors/{tailor_id}/verify", headers={"X-Admin-Key": "rotated"}).status_code == 200

    def test_unknown_tailor_returns_404(self, client):
        assert client.put("/tailors/missing/verify", headers=ADMIN).status_code == 404


class TestServiceEndpoints:
    def test_customer_cannot_add_service(self, client, signup):
        _, headers = signup()
        response = client.post("/services", json={"service_type": "repairs", "price": 100.0}, headers=headers)
        assert response.status_code == 403

    def test_unknown_service_type_returns_400(self, client, tailor):
        response = client.post("/services", json={"service_type": "embroidery", "price": 100.0}, headers=tailor[2])
        assert response.status_code == 400

    def test_deactivate_hides_service(self, client, tailor):
        service_id = _add_service(client, tailor[2])
        assert client.put(f"/services/{service_id}/deactivate", headers=tailor[2]).status_code == 200
        assert client.get(f"/tailors/{tailor[1]}/services").json() == []

    def test_other_tailor_cannot_deactivate(self, client, tailor, signup):
        service_id = _add_service(client, tailor[2])
        _, other_headers = signup(role="tailor")
        assert client.put(f"/services/{service_id}/deactivate", headers=other_headers).status_code == 400

    def test_update_price(self, client, tailor):
        service_id = _add_service(client, tailor[2])
        response = client.put(f"/services/{service_id}/price", json={"price": 500.0}, headers=tailor[2])
        assert response.status_code == 200
        assert client.get(f"/tailors/{tailor[1]}/services").json()[0]["price"] == 500.0
