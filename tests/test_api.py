"""Tests for the HTTP API."""
import pytest
from fastapi.testclient import TestClient

from api.main import app
from models import Notification, get_db
from tests.conftest import ADMIN_ID, DRIVER_A_ID, DRIVER_B_ID, SHIPPER_ID


@pytest.fixture
def client(db_session, users):
    app.dependency_overrides[get_db] = lambda: db_session
    yield TestClient(app)
    app.dependency_overrides.clear()


def as_user(user_id):
    return {"X-User-Id": user_id}


@pytest.fixture
def load_payload(today):
    return {
        "origin": "Riyadh",
        "destination": "Jeddah",
        "weight": 10,
        "price": 1000,
        "pickup_date": today.isoformat(),
        "receiver_name": "Khalid",
        "receiver_phone": "0555555555",
    }


@pytest.fixture
def load_id(client, load_payload):
    response = client.post("/api/loads", json=load_payload, headers=as_user(SHIPPER_ID))
    assert response.status_code == 201
    return response.json()["id"]


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["database"] == "healthy"


def test_missing_identity_is_unauthorized(client):
    assert client.get("/api/loads").status_code == 401
    assert client.get("/api/loads", headers=as_user("stranger")).status_code == 401


def test_post_load(client, load_id):
    response = client.get(f"/api/loads/{load_id}", headers=as_user(DRIVER_A_ID))

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "available"
    assert body["driver_id"] is None
    assert body["body_type"] == "flatbed"
    assert body["distance"] > 0


def test_post_load_validation_error(client, load_payload):
    load_payload["receiver_phone"] = "1234567890"

    response = client.post("/api/loads", json=load_payload, headers=as_user(SHIPPER_ID))

    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"


def test_driver_cannot_post_load(client, load_payload):
    response = client.post("/api/loads", json=load_payload, headers=as_user(DRIVER_A_ID))

    assert response.status_code == 403


def test_unknown_load_is_not_found(client):
    response = client.get("/api/loads/missing", headers=as_user(SHIPPER_ID))

    assert response.status_code == 404


def test_full_lifecycle_over_http(client, db_session, load_id):
    response = client.post(f"/api/loads/{load_id}/accept", headers=as_user(DRIVER_A_ID))
    assert response.status_code == 200
    assert response.json()["status"] == "in_progress"
    assert response.json()["driver_id"] == DRIVER_A_ID

    response = client.post(f"/api/loads/{load_id}/accept", headers=as_user(DRIVER_B_ID))
    assert response.status_code == 409
    assert response.json()["error"] == "LoadAlreadyTaken"

    response = client.post(
        f"/api/loads/{load_id}/complete",
        json={"driver_name": "Ahmed"},
        headers=as_user(DRIVER_A_ID),
    )
    assert response.status_code == 200
    assert response.json()["status"] == "completed"

    response = client.get("/api/notifications/unread-count", headers=as_user(SHIPPER_ID))
    assert response.json() == {"unread": 2}

    response = client.get("/api/notifications", headers=as_user(SHIPPER_ID))
    assert {n["title"] for n in response.json()} == {"Load accepted", "Load delivered"}
    assert all(n["load_id"] == load_id for n in response.json())

    response = client.post("/api/notifications/read", headers=as_user(SHIPPER_ID))
    assert response.json() == {"updated": 2}

    stats = client.get("/api/loads/mine/stats", headers=as_user(DRIVER_A_ID)).json()
    assert stats == {"active_loads": 0, "completed_trips": 1}


def test_complete_available_load_conflicts(client, load_id):
    response = client.post(f"/api/loads/{load_id}/complete", headers=as_user(DRIVER_A_ID))

    assert response.status_code == 409
    assert response.json()["detail"] == "available"


def test_release_and_reaccept(client, load_id):
    client.post(f"/api/loads/{load_id}/accept", headers=as_user(DRIVER_A_ID))

    response = client.post(f"/api/loads/{load_id}/release", headers=as_user(SHIPPER_ID))
    assert response.status_code == 200
    assert response.json()["status"] == "available"
    assert response.json()["driver_id"] is None

    response = client.post(f"/api/loads/{load_id}/accept", headers=as_user(DRIVER_B_ID))
    assert response.json()["driver_id"] == DRIVER_B_ID


def test_delete_load(client, load_id):
    response = client.delete(f"/api/loads/{load_id}", headers=as_user(SHIPPER_ID))
    assert response.status_code == 204

    response = client.get(f"/api/loads/{load_id}", headers=as_user(SHIPPER_ID))
    assert response.status_code == 404


def test_bids(client, load_id):
    response = client.post(
        f"/api/loads/{load_id}/bids",
        json={"price": 900, "message": "Ready tomorrow"},
        headers=as_user(DRIVER_A_ID),
    )
    assert response.status_code == 201
    assert response.json()["price"] == 900.0

    response = client.get(f"/api/loads/{load_id}/bids", headers=as_user(SHIPPER_ID))
    assert [b["driver_id"] for b in response.json()] == [DRIVER_A_ID]

    response = client.get(f"/api/loads/{load_id}/bids", headers=as_user(DRIVER_B_ID))
    assert response.json() == []


def test_available_and_mine_listings(client, load_id):
    response = client.get("/api/loads", headers=as_user(DRIVER_A_ID))
    assert [load["id"] for load in response.json()] == [load_id]

    client.post(f"/api/loads/{load_id}/accept", headers=as_user(DRIVER_A_ID))

    assert client.get("/api/loads", headers=as_user(DRIVER_B_ID)).json() == []
    mine = client.get("/api/loads/mine", headers=as_user(DRIVER_A_ID)).json()
    assert [load["id"] for load in mine] == [load_id]


def test_fleet_endpoints(client):
    response = client.post(
        "/api/trucks",
        json={"plate_number": "abc 1234", "truck_type": "dyna", "capacity": 4},
        headers=as_user(DRIVER_A_ID),
    )
    assert response.status_code == 201
    truck_id = response.json()["id"]
    assert response.json()["plate_number"] == "ABC 1234"

    trucks = client.get("/api/trucks", headers=as_user(DRIVER_A_ID)).json()
    assert [t["id"] for t in trucks] == [truck_id]

    response = client.delete(f"/api/trucks/{truck_id}", headers=as_user(DRIVER_B_ID))
    assert response.status_code == 403

    response = client.delete(f"/api/trucks/{truck_id}", headers=as_user(DRIVER_A_ID))
    assert response.status_code == 204


def test_admin_endpoints(client, load_id):
    stats = client.get("/api/admin/stats", headers=as_user(ADMIN_ID)).json()
    assert stats["total_users"] == 4
    assert stats["active_loads"] == 1

    users = client.get("/api/admin/users", headers=as_user(ADMIN_ID)).json()
    assert {u["id"]: u["role"] for u in users}[DRIVER_A_ID] == "driver"

    loads = client.get("/api/admin/loads", headers=as_user(ADMIN_ID)).json()
    assert [load["id"] for load in loads] == [load_id]

    assert client.get("/api/admin/stats", headers=as_user(SHIPPER_ID)).status_code == 403


def test_admin_cancel_notifies_owner(client, db_session, load_id):
    response = client.post(f"/api/loads/{load_id}/cancel", headers=as_user(ADMIN_ID))

    assert response.status_code == 200
    assert response.json()["status"] == "cancelled"
    notification = db_session.query(Notification).filter(
        Notification.user_id == SHIPPER_ID
    ).one()
    assert notification.title == "Load cancelled"


@pytest.mark.parametrize("field", ["origin", "destination"])
def test_post_load_missing_route_is_validation_error(client, load_payload, field):
    del load_payload[field]

    response = client.post("/api/loads", json=load_payload, headers=as_user(SHIPPER_ID))

    assert response.status_code == 400
    assert response.json()["error"] == "ValidationError"
