import pytest

from app.storage import StorageError

MINIMAL_BODIES = {
    "tasks": {"title": "Book venue"},
    "budget": {"name": "Venue", "estimatedCost": 5000},
    "vendors": {"name": "Bloom & Co", "category": "Florist"},
    "guests": {"name": "Ann Smith"},
    "timeline": {"title": "Send save-the-dates", "monthsBefore": 8},
}


def test_health_is_public(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_requires_authentication(client):
    assert client.get("/api/tasks").status_code == 401
    assert client.post("/api/tasks", json={"title": "x"}).status_code == 401

    response = client.get("/api/tasks", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Unauthorized"


@pytest.mark.parametrize("path", sorted(MINIMAL_BODIES))
def test_create_then_list(client, auth_header, path):
    assert client.get(f"/api/{path}", headers=auth_header).json() == []

    created = client.post(f"/api/{path}", json=MINIMAL_BODIES[path], headers=auth_header)

    assert created.status_code == 201
    body = created.json()
    assert isinstance(body["id"], int)
    assert client.get(f"/api/{path}", headers=auth_header).json() == [body]
    assert client.get(f"/api/{path}/{body['id']}", headers=auth_header).json() == body


def test_task_defaults_and_wire_format(client, auth_header):
    response = client.post(
        "/api/tasks",
        json={"title": "Taste cakes", "dueDate": "2025-05-01"},
        headers=auth_header,
    )

    task = response.json()
    assert task["completed"] is False
    assert task["priority"] == "medium"
    assert task["dueDate"] == "2025-05-01"
    assert "createdAt" in task
    assert "due_date" not in task


def test_create_ignores_user_id_in_body(client, auth_header, second_auth_header):
    bob_id = client.get("/api/auth/me", headers=second_auth_header).json()["id"]
    alice_id = client.get("/api/auth/me", headers=auth_header).json()["id"]

    response = client.post("/api/guests", json={"name": "Ann", "userId": bob_id}, headers=auth_header)

    assert response.json()["userId"] == alice_id
    assert client.get("/api/guests", headers=second_auth_header).json() == []


def test_numeric_strings_are_coerced(client, auth_header):
    response = client.post(
        "/api/budget",
        json={"name": "Catering", "estimatedCost": "1000", "actualCost": "250.5"},
        headers=auth_header,
    )

    assert response.status_code == 201
    assert response.json()["estimatedCost"] == 1000.0
    assert response.json()["actualCost"] == 250.5


@pytest.mark.parametrize(
    "path, body, detail",
    [
        ("tasks", {}, "Invalid task data"),
        ("tasks", {"title": ""}, "Invalid task data"),
        ("tasks", {"title": "x", "priority": "urgent"}, "Invalid task data"),
        ("budget", {"name": "Venue", "estimatedCost": -5}, "Invalid budget category data"),
        ("vendors", {"name": "No category"}, "Invalid vendor data"),
        ("guests", {"name": "Ann", "rsvpStatus": "maybe"}, "Invalid guest data"),
        ("timeline", {"title": "x", "date": "not-a-date"}, "Invalid timeline event data"),
    ],
)
def test_invalid_create_bodies(client, auth_header, path, body, detail):
    response = client.post(f"/api/{path}", json=body, headers=auth_header)

    assert response.status_code == 400
    assert response.json()["detail"] == detail
    assert client.get(f"/api/{path}", headers=auth_header).json() == []


def test_non_object_body_is_rejected(client, auth_header):
    response = client.post("/api/tasks", json=["not", "an", "object"], headers=auth_header)

    assert response.status_code == 400


def test_patch_merges_fields(client, auth_header):
    task = client.post(
        "/api/tasks",
        json={"title": "Hire DJ", "priority": "high", "dueDate": "2025-04-10", "description": "Evening set"},
        headers=auth_header,
    ).json()

    response = client.patch(f"/api/tasks/{task['id']}", json={"completed": True}, headers=auth_header)

    assert response.status_code == 200
    updated = response.json()
    assert updated["completed"] is True
    assert updated["title"] == "Hire DJ"
    assert updated["priority"] == "high"
    assert updated["dueDate"] == "2025-04-10"
    assert updated["description"] == "Evening set"


def test_patch_can_clear_optional_fields(client, auth_header):
    task = client.post("/api/tasks", json={"title": "Rings", "dueDate": "2025-02-01"}, headers=auth_header).json()

    updated = client.patch(f"/api/tasks/{task['id']}", json={"dueDate": None}, headers=auth_header).json()

    assert updated["dueDate"] is None
    assert updated["title"] == "Rings"


def test_patch_rejects_null_required_field(client, auth_header):
    task = client.post("/api/tasks", json={"title": "Rings"}, headers=auth_header).json()

    response = client.patch(f"/api/tasks/{task['id']}", json={"title": None}, headers=auth_header)

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid task data"
    assert client.get(f"/api/tasks/{task['id']}", headers=auth_header).json()["title"] == "Rings"


def test_guest_rsvp_update(client, auth_header):
    guest = client.post("/api/guests", json={"name": "Ann", "plusOne": True}, headers=auth_header).json()
    assert guest["rsvpStatus"] == "pending"

    updated = client.patch(f"/api/guests/{guest['id']}", json={"rsvpStatus": "confirmed"}, headers=auth_header)

    assert updated.json()["rsvpStatus"] == "confirmed"
    assert updated.json()["plusOne"] is True


def test_other_users_records_are_not_found(client, auth_header, second_auth_header):
    vendor = client.post(
        "/api/vendors",
        json={"name": "Snap Studio", "category": "Photography"},
        headers=auth_header,
    ).json()
    url = f"/api/vendors/{vendor['id']}"

    assert client.get(url, headers=second_auth_header).status_code == 404
    patch_response = client.patch(url, json={"name": "Hijacked"}, headers=second_auth_header)
    assert patch_response.status_code == 404
    assert patch_response.json()["detail"] == "Vendor not found"
    assert client.delete(url, headers=second_auth_header).status_code == 404

    assert client.get(url, headers=auth_header).json()["name"] == "Snap Studio"
    assert client.get("/api/vendors", headers=second_auth_header).json() == []


def test_ownership_is_checked_before_validation(client, auth_header, second_auth_header):
    task = client.post("/api/tasks", json={"title": "Rings"}, headers=auth_header).json()

    response = client.patch(f"/api/tasks/{task['id']}", json={"title": None}, headers=second_auth_header)

    assert response.status_code == 404


def test_delete_then_missing(client, auth_header):
    event = client.post("/api/timeline", json={"title": "Final fitting"}, headers=auth_header).json()
    url = f"/api/timeline/{event['id']}"

    response = client.delete(url, headers=auth_header)
    assert response.status_code == 204
    assert response.content == b""

    assert client.delete(url, headers=auth_header).status_code == 404
    assert client.get(url, headers=auth_header).status_code == 404
    assert client.patch(url, json={"completed": True}, headers=auth_header).status_code == 404


def test_non_numeric_id_is_rejected(client, auth_header):
    response = client.get("/api/tasks/abc", headers=auth_header)

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid request"


def test_storage_failure_returns_generic_error(client, storage, auth_header):
    async def broken_list(user_id):
        raise StorageError("connection refused by db-primary:5432")

    storage.tasks.list = broken_list

    response = client.get("/api/tasks", headers=auth_header)

    assert response.status_code == 500
    assert response.json() == {"detail": "Error fetching tasks"}


def test_storage_failure_on_create(client, storage, auth_header, broadcaster):
    async def broken_create(data):
        raise StorageError("disk full")

    storage.budget_categories.create = broken_create

    response = client.post("/api/budget", json={"name": "Venue"}, headers=auth_header)

    assert response.status_code == 500
    assert response.json()["detail"] == "Error creating budget category"
    assert broadcaster.events == []
