import pytest

from tests.conftest import PROFILE, register

EVENT = {"name": "Sangeet", "date": "2024-12-18", "time": "7:00 PM", "location": "Ballroom",
         "icon": "music", "color": "purple"}
TASK = {"title": "Book venue", "category": "venue", "assignedTo": "bride"}
GUEST = {"name": "Amit Patel", "side": "Patel"}
BUDGET_ITEM = {"category": "venue", "vendor": "Grand Palace", "estimatedAmount": 1000}
VENDOR = {"name": "Moments Studio", "category": "photography"}

RESOURCES = {
    "events": EVENT,
    "guests": GUEST,
    "tasks": TASK,
    "budget": BUDGET_ITEM,
    "vendors": VENDOR,
}


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"


def test_requests_without_session_are_rejected(client):
    response = client.get("/api/guests")
    assert response.status_code == 401
    assert response.json() == {"error": "Authentication required"}


def test_invalid_token_is_rejected(client):
    response = client.get("/api/guests", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_register_duplicate_and_login(client):
    register(client, "arjun.patel")
    duplicate = client.post(
        "/api/auth/register",
        json={"username": "arjun.patel", "password": "password123", "name": "Arjun"},
    )
    assert duplicate.status_code == 400

    bad = client.post("/api/auth/login", json={"username": "arjun.patel", "password": "wrong-pass"})
    assert bad.status_code == 401

    good = client.post("/api/auth/login", json={"username": "arjun.patel", "password": "password123"})
    assert good.status_code == 200
    assert good.json()["user"]["username"] == "arjun.patel"
    assert good.json()["user"]["weddingProfileId"] is None


def test_session_cookie_authenticates_until_logout(client):
    client.post(
        "/api/auth/register",
        json={"username": "cookie.user", "password": "password123", "name": "Cookie", "role": "Planner"},
    )
    me = client.get("/api/auth/me")
    assert me.status_code == 200
    assert me.json()["role"] == "planner"

    client.post("/api/auth/logout")
    assert client.get("/api/auth/me").status_code == 401


def test_user_without_profile_gets_not_found(client):
    headers = register(client, "new.user")
    response = client.get("/api/tasks", headers=headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Wedding profile not found"}

    # Even when naming someone else's profile
    response = client.get("/api/guests?weddingProfileId=1", headers=headers)
    assert response.status_code == 404


def test_onboarding_adds_couple_as_confirmed_guests(client, couple):
    headers, profile_id = couple
    guests = client.get("/api/guests", headers=headers).json()
    assert [(g["name"], g["side"], g["rsvpStatus"]) for g in guests] == [
        ("Priya Sharma", "Sharma", "confirmed"),
        ("Arjun Patel", "Patel", "confirmed"),
    ]
    assert all(g["weddingProfileId"] == profile_id for g in guests)

    me = client.get("/api/auth/me", headers=headers).json()
    assert me["weddingProfileId"] == profile_id


def test_second_profile_is_rejected(client, couple):
    headers, _ = couple
    response = client.post("/api/wedding-profile", json=PROFILE, headers=headers)
    assert response.status_code == 400


def test_profile_dates_are_validated(client):
    headers = register(client, "date.user")
    response = client.post(
        "/api/wedding-profile",
        json={
            "brideName": "A B", "groomName": "C D", "weddingStartDate": "2024-12-20",
            "weddingEndDate": "2024-12-15", "venue": "Hall", "city": "Pune", "state": "MH",
            "guestCount": 10, "budget": 100, "functions": ["wedding"],
        },
        headers=headers,
    )
    assert response.status_code == 422


def test_profile_read_and_update(client, couple, other_couple):
    headers, profile_id = couple
    _, other_id = other_couple

    assert client.get("/api/wedding-profile", headers=headers).json()["id"] == profile_id
    assert client.get(f"/api/wedding-profile/{profile_id}", headers=headers).status_code == 200
    assert client.get(f"/api/wedding-profile/{other_id}", headers=headers).status_code == 403

    updated = client.put(f"/api/wedding-profile/{profile_id}", json={"venue": "Taj"}, headers=headers)
    assert updated.status_code == 200
    assert updated.json()["venue"] == "Taj"

    backwards = client.put(
        f"/api/wedding-profile/{profile_id}", json={"weddingEndDate": "2024-12-01"}, headers=headers
    )
    assert backwards.status_code == 422


def test_foreign_profile_in_query_is_denied(client, couple, other_couple):
    headers, _ = couple
    _, other_id = other_couple
    response = client.get(f"/api/guests?weddingProfileId={other_id}", headers=headers)
    assert response.status_code == 403
    assert response.json() == {"error": "Access denied"}


def test_own_profile_in_query_is_allowed(client, couple):
    headers, profile_id = couple
    response = client.get(f"/api/events?weddingProfileId={profile_id}", headers=headers)
    assert response.status_code == 200


def test_foreign_profile_in_body_is_denied_and_nothing_written(client, couple, other_couple):
    headers, _ = couple
    other_headers, other_id = other_couple

    response = client.post(
        "/api/guests",
        json={"name": "Intruder", "side": "Gupta", "weddingProfileId": other_id},
        headers=headers,
    )
    assert response.status_code == 403
    names = [g["name"] for g in client.get("/api/guests", headers=other_headers).json()]
    assert "Intruder" not in names


def test_rows_of_other_weddings_are_denied(client, couple, other_couple):
    headers, _ = couple
    other_headers, _ = other_couple
    event = client.post("/api/events", json=EVENT, headers=other_headers).json()

    assert client.get(f"/api/events/{event['id']}", headers=headers).status_code == 403
    assert client.put(f"/api/events/{event['id']}", json={"progress": 90}, headers=headers).status_code == 403
    assert client.delete(f"/api/events/{event['id']}", headers=headers).status_code == 403
    assert client.get(f"/api/events/{event['id']}", headers=other_headers).json()["progress"] == 0


def test_missing_row_is_not_found(client, couple):
    headers, _ = couple
    assert client.get("/api/tasks/999", headers=headers).status_code == 404


def test_lists_only_contain_own_rows(client, couple, other_couple):
    headers, profile_id = couple
    other_headers, _ = other_couple
    client.post("/api/tasks", json=TASK, headers=headers)
    client.post("/api/tasks", json={**TASK, "title": "Book caterer"}, headers=other_headers)

    tasks = client.get("/api/tasks", headers=headers).json()
    assert [t["title"] for t in tasks] == ["Book venue"]
    assert tasks[0]["weddingProfileId"] == profile_id


def test_guest_rsvp_defaults_and_normalizes(client, couple):
    headers, _ = couple
    guest = client.post("/api/guests", json={"name": "Amit", "side": "Patel", "rsvpStatus": None},
                        headers=headers).json()
    assert guest["rsvpStatus"] == "pending"

    updated = client.put(f"/api/guests/{guest['id']}", json={"rsvpStatus": "Confirmed"}, headers=headers)
    assert updated.json()["rsvpStatus"] == "confirmed"

    invalid = client.put(f"/api/guests/{guest['id']}", json={"rsvpStatus": "maybe"}, headers=headers)
    assert invalid.status_code == 422


def test_update_cannot_move_row_to_another_wedding(client, couple, other_couple):
    headers, profile_id = couple
    _, other_id = other_couple
    task = client.post("/api/tasks", json=TASK, headers=headers).json()

    response = client.put(f"/api/tasks/{task['id']}", json={"weddingProfileId": other_id}, headers=headers)
    assert response.status_code == 403

    response = client.put(
        f"/api/tasks/{task['id']}", json={"status": "done", "weddingProfileId": profile_id}, headers=headers
    )
    assert response.status_code == 200
    assert response.json()["status"] == "done"
    assert response.json()["weddingProfileId"] == profile_id


def test_delete_returns_no_content(client, couple):
    headers, _ = couple
    vendor = client.post("/api/vendors", json={"name": "Moments Studio", "category": "photography"},
                         headers=headers).json()
    assert vendor["status"] == "active"

    assert client.delete(f"/api/vendors/{vendor['id']}", headers=headers).status_code == 204
    assert client.get(f"/api/vendors/{vendor['id']}", headers=headers).status_code == 404


def test_guest_list_view(client, couple):
    headers, _ = couple
    client.post("/api/guests", json={"name": "Neha Gupta", "side": "Gupta"}, headers=headers)

    view = client.get("/api/guests/view?rsvpFilter=Confirmed&sortDirection=desc", headers=headers).json()
    assert [g["name"] for g in view["guests"]] == ["Priya Sharma", "Arjun Patel"]
    assert view["total"] == 3
    assert view["matched"] == 2
    assert view["sideCounts"] == {"Sharma": 1, "Patel": 1, "Gupta": 1}
    assert view["rsvpCounts"] == {"confirmed": 2, "pending": 1}

    bad_sort = client.get("/api/guests/view?sortField=email", headers=headers)
    assert bad_sort.status_code == 422


def test_bulk_guest_add_keeps_successes(client, couple):
    headers, _ = couple
    response = client.post(
        "/api/guests/bulk",
        json={"guestList": "amit patel, amit@example.com\nneha, not-an-email\n\nravi kumar,,555",
              "side": "friends"},
        headers=headers,
    )
    assert response.status_code == 201
    body = response.json()
    assert [(g["name"], g["side"], g["rsvpStatus"]) for g in body["created"]] == [
        ("Amit Patel", "Friends", "pending"),
        ("Ravi Kumar", "Friends", "pending"),
    ]
    assert [(f["index"], f["value"]) for f in body["failed"]] == [(1, "Neha")]


def test_bulk_task_add_checks_every_item(client, couple, other_couple):
    headers, profile_id = couple
    _, other_id = other_couple

    denied = client.post(
        "/api/tasks/bulk",
        json={"tasks": [TASK, {**TASK, "title": "Sneaky", "weddingProfileId": other_id}]},
        headers=headers,
    )
    assert denied.status_code == 403
    assert client.get("/api/tasks", headers=headers).json() == []

    created = client.post(
        "/api/tasks/bulk",
        json={"tasks": [TASK, {**TASK, "title": "Hire DJ", "status": "InProgress", "weddingProfileId": profile_id}]},
        headers=headers,
    )
    assert created.status_code == 201
    assert [t["status"] for t in created.json()["created"]] == ["todo", "inprogress"]


def test_task_board(client, couple):
    headers, _ = couple
    for title, status in (("Venue", "done"), ("Cards", "inprogress"), ("DJ", "todo")):
        client.post("/api/tasks", json={**TASK, "title": title, "status": status}, headers=headers)

    board = client.get("/api/tasks/board", headers=headers).json()
    assert board["counts"] == {"todo": 1, "inprogress": 1, "done": 1}
    assert board["completionRate"] == 33
    assert [t["title"] for t in board["columns"]["done"]] == ["Venue"]

    empty = client.get("/api/tasks/board?assigneeFilter=groom", headers=headers).json()
    assert empty["total"] == 0
    assert empty["completionRate"] == 0


def test_budget_summary(client, couple):
    headers, _ = couple
    client.post(
        "/api/budget",
        json={"category": "venue", "vendor": "Grand Palace", "estimatedAmount": 1000,
              "actualAmount": 1000, "paidAmount": 400, "status": "Partial"},
        headers=headers,
    )
    client.post(
        "/api/budget",
        json={"category": "food", "vendor": "Royal Caterers", "estimatedAmount": 500, "actualAmount": 600},
        headers=headers,
    )

    summary = client.get("/api/budget/summary", headers=headers).json()
    assert summary == {
        "totalEstimated": 1500,
        "totalActual": 1600,
        "totalPaid": 400,
        "remaining": 1100,
        "itemCount": 2,
        "statusCounts": {"partial": 1, "pending": 1},
    }


def test_csv_export(client, couple):
    headers, _ = couple
    response = client.get("/api/export/guests", headers=headers)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert "guests.csv" in response.headers["content-disposition"]
    assert response.text.splitlines() == [
        "Name,Email,Phone,Side,RSVP Status",
        '"Priya Sharma","","","Sharma","confirmed"',
        '"Arjun Patel","","","Patel","confirmed"',
    ]


def test_profile_route_checks_query_as_well_as_path(client, couple, other_couple):
    headers, profile_id = couple
    _, other_id = other_couple
    url = f"/api/wedding-profile/{profile_id}"

    assert client.get(f"{url}?weddingProfileId={profile_id}", headers=headers).status_code == 200
    assert client.get(f"{url}?weddingProfileId={other_id}", headers=headers).status_code == 403
    denied = client.put(f"{url}?weddingProfileId={other_id}", json={"venue": "Taj"}, headers=headers)
    assert denied.status_code == 403
    assert client.get(url, headers=headers).json()["venue"] == PROFILE["venue"]


@pytest.mark.parametrize("resource", RESOURCES)
def test_foreign_profile_is_denied_for_every_operation(client, couple, other_couple, resource):
    headers, _ = couple
    other_headers, other_id = other_couple
    payload = RESOURCES[resource]
    foreign = f"?weddingProfileId={other_id}"

    created = client.post(f"/api/{resource}", json=payload, headers=headers)
    assert created.status_code == 201
    row_id = created.json()["id"]
    other_rows = len(client.get(f"/api/{resource}", headers=other_headers).json())

    responses = [
        client.get(f"/api/{resource}{foreign}", headers=headers),
        client.get(f"/api/{resource}/{row_id}{foreign}", headers=headers),
        client.post(f"/api/{resource}", json={**payload, "weddingProfileId": other_id}, headers=headers),
        client.post(f"/api/{resource}{foreign}", json=payload, headers=headers),
        client.put(f"/api/{resource}/{row_id}", json={"weddingProfileId": other_id}, headers=headers),
        client.put(f"/api/{resource}/{row_id}{foreign}", json={}, headers=headers),
        client.delete(f"/api/{resource}/{row_id}{foreign}", headers=headers),
    ]
    assert [r.status_code for r in responses] == [403] * len(responses)
    assert all(r.json() == {"error": "Access denied"} for r in responses)

    assert client.get(f"/api/{resource}/{row_id}", headers=headers).status_code == 200
    assert len(client.get(f"/api/{resource}", headers=other_headers).json()) == other_rows


@pytest.mark.parametrize("resource", RESOURCES)
def test_every_operation_needs_a_wedding_profile(client, other_couple, resource):
    other_headers, _ = other_couple
    payload = RESOURCES[resource]
    row_id = client.post(f"/api/{resource}", json=payload, headers=other_headers).json()["id"]
    headers = register(client, "no.profile")

    responses = [
        client.get(f"/api/{resource}", headers=headers),
        client.post(f"/api/{resource}", json=payload, headers=headers),
        client.get(f"/api/{resource}/{row_id}", headers=headers),
        client.put(f"/api/{resource}/{row_id}", json={}, headers=headers),
        client.delete(f"/api/{resource}/{row_id}", headers=headers),
    ]
    assert [r.status_code for r in responses] == [404] * len(responses)
    assert all(r.json() == {"error": "Wedding profile not found"} for r in responses)
    assert client.get(f"/api/{resource}/{row_id}", headers=other_headers).status_code == 200


def test_bulk_guest_add_rejects_blank_side(client, couple):
    headers, _ = couple
    response = client.post(
        "/api/guests/bulk", json={"guestList": "amit patel\nneha", "side": "   "}, headers=headers
    )
    assert response.status_code == 422
    assert len(client.get("/api/guests", headers=headers).json()) == 2


def test_bulk_guest_add_trims_side(client, couple):
    headers, _ = couple
    response = client.post(
        "/api/guests/bulk", json={"guestList": "amit patel", "side": "  friends "}, headers=headers
    )
    assert response.status_code == 201
    assert response.json()["created"][0]["side"] == "Friends"
