from datetime import date, timedelta


def _seed(client, headers):
    for body in (
        {"title": "Book venue", "completed": True, "priority": "high", "dueDate": "2025-02-01"},
        {"title": "Order flowers", "priority": "low", "dueDate": "2025-05-01"},
        {"title": "Choose music", "priority": "high"},
    ):
        client.post("/api/tasks", json=body, headers=headers)
    for body in (
        {"name": "Ann", "rsvpStatus": "confirmed", "plusOne": True},
        {"name": "Ben", "rsvpStatus": "declined"},
        {"name": "Cat"},
    ):
        client.post("/api/guests", json=body, headers=headers)
    for body in (
        {"name": "Venue", "estimatedCost": 1000, "actualCost": 800},
        {"name": "Catering", "estimatedCost": 500, "actualCost": 250},
        {"name": "Flowers", "estimatedCost": 200},
    ):
        client.post("/api/budget", json=body, headers=headers)


def test_dashboard_without_data(client, auth_header):
    response = client.get("/api/dashboard", headers=auth_header)

    assert response.status_code == 200
    data = response.json()
    assert data["weddingDate"] is None
    assert data["daysRemaining"] == 0
    assert data["tasks"]["percentComplete"] == 0
    assert data["budget"]["percentSpent"] == 0
    assert data["upcomingTasks"] == []


def test_dashboard_figures(client, auth_header):
    wedding_day = date.today() + timedelta(days=30)
    client.post("/api/wedding-settings", json={"weddingDate": wedding_day.isoformat()}, headers=auth_header)
    _seed(client, auth_header)

    data = client.get("/api/dashboard", headers=auth_header).json()

    assert data["weddingDate"] == wedding_day.isoformat()
    assert data["daysRemaining"] == 30
    assert data["tasks"] == {"total": 3, "completed": 1, "remaining": 2, "percentComplete": 33}
    assert data["rsvp"]["confirmed"] == 1
    assert data["rsvp"]["declined"] == 1
    assert data["rsvp"]["pending"] == 1
    assert data["rsvp"]["plusOnes"] == 1
    assert data["budget"] == {
        "totalEstimated": 1700,
        "totalActual": 1050,
        "remaining": 650,
        "percentSpent": 62,
    }
    assert [task["title"] for task in data["upcomingTasks"]] == ["Order flowers", "Choose music"]
    assert [task["title"] for task in data["priorityTasks"]] == ["Choose music", "Order flowers"]


def test_dashboard_only_counts_callers_data(client, auth_header, second_auth_header):
    _seed(client, auth_header)

    data = client.get("/api/dashboard", headers=second_auth_header).json()

    assert data["tasks"]["total"] == 0
    assert data["rsvp"]["total"] == 0
    assert data["budget"]["totalEstimated"] == 0


def test_timeline_view(client, auth_header):
    client.post("/api/wedding-settings", json={"weddingDate": "2025-09-01"}, headers=auth_header)
    client.post("/api/tasks", json={"title": "Book venue", "dueDate": "2025-03-01"}, headers=auth_header)
    client.post("/api/tasks", json={"title": "No date"}, headers=auth_header)
    client.post("/api/timeline", json={"title": "Send invitations", "monthsBefore": 2}, headers=auth_header)

    data = client.get("/api/timeline-view", headers=auth_header).json()

    assert data["weddingDate"] == "2025-09-01"
    assert [(entry["source"], entry["title"]) for entry in data["entries"]] == [
        ("task", "Book venue"),
        ("event", "Send invitations"),
    ]
    assert data["entries"][0]["timeframe"] == "6 months before"
    assert data["entries"][1]["date"] == "2025-07-01"


def test_views_require_authentication(client):
    assert client.get("/api/dashboard").status_code == 401
    assert client.get("/api/timeline-view").status_code == 401
