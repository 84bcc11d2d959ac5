from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import SQLAlchemyError

from api.dependencies import get_repository
from api.main import app


client = TestClient(app)
ANA = {"id": "c-1", "name": "Ana", "email": "ana@x.com", "phone": "555"}


def _create(payload: dict):
    return client.post("/api/contacts", json=payload)


@pytest.fixture
def broken_repo():
    """Repository whose every call fails like an unreachable database."""
    repo = MagicMock()
    error = SQLAlchemyError("database unavailable")
    repo.list_all.side_effect = error
    repo.insert.side_effect = error
    repo.update.side_effect = error
    repo.delete.side_effect = error
    app.dependency_overrides[get_repository] = lambda: repo
    yield repo
    app.dependency_overrides.pop(get_repository, None)


def test_health_check(api_repo):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["database"] == "up"


class TestListContacts:
    """Tests for GET /api/contacts."""

    def test_empty_table_returns_empty_array(self, api_repo):
        resp = client.get("/api/contacts")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_returns_contacts_in_insertion_order(self, api_repo):
        for idx, name in enumerate(["Zoe", "Ana", "Mia"]):
            _create({"id": f"c-{idx}", "name": name, "email": f"{name}@x.com", "phone": "1"})

        resp = client.get("/api/contacts")

        assert [c["name"] for c in resp.json()] == ["Zoe", "Ana", "Mia"]
        assert set(resp.json()[0]) == {"id", "name", "email", "phone"}

    def test_backend_error_returns_500(self, broken_repo):
        resp = client.get("/api/contacts")
        assert resp.status_code == 500
        assert resp.json()["detail"] == "Database error fetching contacts"


class TestCreateContact:
    """Tests for POST /api/contacts."""

    def test_create_returns_201(self, api_repo):
        resp = _create(ANA)
        assert resp.status_code == 201
        assert resp.json()["message"] == "Contact added successfully"
        assert api_repo.list_all() == [ANA]

    @pytest.mark.parametrize("missing", ["id", "name", "email", "phone"])
    def test_missing_field_returns_400(self, api_repo, missing):
        payload = {k: v for k, v in ANA.items() if k != missing}
        resp = _create(payload)
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Missing required fields"
        assert api_repo.list_all() == []

    def test_blank_field_returns_400(self, api_repo):
        resp = _create({**ANA, "email": "   "})
        assert resp.status_code == 400

    def test_malformed_json_returns_400(self, api_repo):
        resp = client.post(
            "/api/contacts",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Invalid JSON body"

    def test_non_object_body_returns_400(self, api_repo):
        resp = client.post("/api/contacts", json=["Ana"])
        assert resp.status_code == 400

    def test_duplicate_id_is_a_backend_error(self, api_repo):
        _create(ANA)
        resp = _create({**ANA, "name": "Other"})
        assert resp.status_code == 500
        assert resp.json()["detail"] == "Error adding contact"
        assert len(api_repo.list_all()) == 1

    def test_backend_error_returns_500(self, broken_repo):
        resp = _create(ANA)
        assert resp.status_code == 500


class TestUpdateContact:
    """Tests for PUT /api/contacts/{id}."""

    def test_update_replaces_fields_and_keeps_id(self, api_repo):
        _create(ANA)

        resp = client.put(
            "/api/contacts/c-1",
            json={"name": "Ana B.", "email": "ana@x.com", "phone": "555"},
        )

        assert resp.status_code == 200
        assert resp.json()["message"] == "Contact updated successfully"
        assert api_repo.list_all() == [{**ANA, "name": "Ana B."}]

    def test_unknown_id_returns_404(self, api_repo):
        _create(ANA)
        resp = client.put(
            "/api/contacts/nope",
            json={"name": "X", "email": "x@x.com", "phone": "1"},
        )
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Contact not found"
        assert api_repo.list_all() == [ANA]

    def test_missing_field_returns_400(self, api_repo):
        _create(ANA)
        resp = client.put("/api/contacts/c-1", json={"name": "Ana B."})
        assert resp.status_code == 400
        assert api_repo.list_all() == [ANA]

    def test_backend_error_returns_500(self, broken_repo):
        resp = client.put(
            "/api/contacts/c-1",
            json={"name": "X", "email": "x@x.com", "phone": "1"},
        )
        assert resp.status_code == 500
        assert resp.json()["detail"] == "Error updating contact"


class TestDeleteContact:
    """Tests for DELETE /api/contacts/{id}."""

    def test_delete_removes_contact(self, api_repo):
        _create(ANA)
        resp = client.delete("/api/contacts/c-1")
        assert resp.status_code == 200
        assert resp.json()["message"] == "Contact deleted successfully"
        assert api_repo.list_all() == []

    def test_unknown_id_returns_404(self, api_repo):
        resp = client.delete("/api/contacts/nope")
        assert resp.status_code == 404

    def test_backend_error_returns_500(self, broken_repo):
        resp = client.delete("/api/contacts/c-1")
        assert resp.status_code == 500
        assert resp.json()["detail"] == "Error deleting contact"


class TestRoutingAndCors:
    """Preflight, CORS headers and unknown routes."""

    @pytest.mark.parametrize("path", ["/api/contacts", "/api/contacts/c-1", "/anything"])
    def test_options_returns_204(self, path):
        resp = client.options(path)
        assert resp.status_code == 204
        assert resp.headers["access-control-allow-origin"] == "*"
        assert "DELETE" in resp.headers["access-control-allow-methods"]

    def test_responses_carry_cors_headers(self, api_repo):
        resp = client.get("/api/contacts")
        assert resp.headers["access-control-allow-origin"] == "*"
        assert resp.headers["access-control-allow-headers"] == "Content-Type"

    def test_error_responses_carry_cors_headers(self, api_repo):
        resp = client.delete("/api/contacts/nope")
        assert resp.headers["access-control-allow-origin"] == "*"

    def test_unknown_route_returns_404(self):
        resp = client.get("/api/unknown")
        assert resp.status_code == 404

    def test_unsupported_method_returns_405(self, api_repo):
        resp = client.patch("/api/contacts/c-1", json={})
        assert resp.status_code == 405

    def test_put_without_id_returns_400(self, api_repo):
        resp = client.put("/api/contacts/", json={"name": "A", "email": "a@x", "phone": "1"})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Contact ID required"

    def test_delete_without_id_returns_400(self, api_repo):
        resp = client.delete("/api/contacts/")
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Contact ID required"

    def test_trailing_slash_collection_still_lists(self, api_repo):
        _create(ANA)
        resp = client.get("/api/contacts/")
        assert resp.status_code == 200
        assert [c["id"] for c in resp.json()] == ["c-1"]
