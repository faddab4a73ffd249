"""Booking API·관리자 API 테스트."""

import uuid

import pytest


def _booking_body(college_id: str, **overrides) -> dict:
    return {
        "collegeId": college_id,
        "studentName": "Sam Student",
        "email": "sam@example.com",
        "phone": "555-0100",
        "course": "Computer Science",
        "previousEducation": "High School",
        "grade": "A",
        "address": "1 Campus Way",
        **overrides,
    }


@pytest.fixture
async def owner_and_college(register_user, create_college):
    owner = await register_user(name="Owner", email="owner@example.com")
    college = await create_college(owner["headers"])
    return owner, college


async def test_create_booking_is_pending_with_college(client, owner_and_college):
    owner, college = owner_and_college
    res = await client.post(
        "/api/bookings", json=_booking_body(college["id"]), headers=owner["headers"]
    )
    assert res.status_code == 201
    data = res.json()
    assert data["message"] == "Booking created successfully"
    booking = data["booking"]
    assert booking["status"] == "pending"
    assert booking["userId"] == owner["user"]["id"]
    assert booking["college"]["name"] == "MIT"
    assert booking["guardianName"] is None


async def test_create_booking_ignores_client_status(client, owner_and_college):
    owner, college = owner_and_college
    res = await client.post(
        "/api/bookings",
        json=_booking_body(college["id"], status="approved"),
        headers=owner["headers"],
    )
    assert res.json()["booking"]["status"] == "pending"


async def test_create_booking_missing_fields(client, owner_and_college):
    owner, college = owner_and_college
    body = _booking_body(college["id"])
    del body["grade"]
    res = await client.post("/api/bookings", json=body, headers=owner["headers"])
    assert res.status_code == 400
    assert res.json() == {"error": "All required fields must be provided"}


async def test_create_booking_unknown_college(client, register_user):
    owner = await register_user()
    res = await client.post(
        "/api/bookings", json=_booking_body(str(uuid.uuid4())), headers=owner["headers"]
    )
    assert res.status_code == 404
    assert res.json() == {"error": "College not found"}

    bad = await client.post(
        "/api/bookings", json=_booking_body("xyz"), headers=owner["headers"]
    )
    assert bad.status_code == 400
    assert bad.json() == {"error": "Invalid college ID"}


async def test_bookings_are_scoped_to_owner(client, owner_and_college, register_user):
    owner, college = owner_and_college
    created = await client.post(
        "/api/bookings", json=_booking_body(college["id"]), headers=owner["headers"]
    )
    booking_id = created.json()["booking"]["id"]
    other = await register_user()

    assert len((await client.get("/api/bookings", headers=owner["headers"])).json()) == 1
    assert (await client.get("/api/bookings", headers=other["headers"])).json() == []

    for method, kwargs in (
        ("get", {}),
        ("put", {"json": {"grade": "B"}}),
        ("delete", {}),
    ):
        res = await client.request(
            method, f"/api/bookings/{booking_id}", headers=other["headers"], **kwargs
        )
        assert res.status_code == 404
        assert res.json() == {"error": "Booking not found"}


async def test_list_bookings_in_creation_order(client, owner_and_college):
    owner, college = owner_and_college
    for name in ("First", "Second"):
        await client.post(
            "/api/bookings",
            json=_booking_body(college["id"], studentName=name),
            headers=owner["headers"],
        )
    res = await client.get("/api/bookings", headers=owner["headers"])
    assert [b["studentName"] for b in res.json()] == ["First", "Second"]


async def test_owner_update_and_delete(client, owner_and_college):
    owner, college = owner_and_college
    created = await client.post(
        "/api/bookings", json=_booking_body(college["id"]), headers=owner["headers"]
    )
    booking_id = created.json()["booking"]["id"]

    res = await client.put(
        f"/api/bookings/{booking_id}",
        json={"grade": "B+", "guardianName": "Pat"},
        headers=owner["headers"],
    )
    assert res.status_code == 200
    assert res.json()["message"] == "Booking updated successfully"
    booking = res.json()["booking"]
    assert booking["grade"] == "B+"
    assert booking["guardianName"] == "Pat"
    assert booking["studentName"] == "Sam Student"

    detail = await client.get(f"/api/bookings/{booking_id}", headers=owner["headers"])
    assert detail.json()["college"]["id"] == college["id"]

    res = await client.delete(f"/api/bookings/{booking_id}", headers=owner["headers"])
    assert res.json() == {"message": "Booking deleted successfully"}
    gone = await client.get(f"/api/bookings/{booking_id}", headers=owner["headers"])
    assert gone.status_code == 404


async def test_owner_update_rejects_unknown_status(client, owner_and_college):
    owner, college = owner_and_college
    created = await client.post(
        "/api/bookings", json=_booking_body(college["id"]), headers=owner["headers"]
    )
    booking_id = created.json()["booking"]["id"]
    res = await client.put(
        f"/api/bookings/{booking_id}", json={"status": "cancelled"}, headers=owner["headers"]
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid status value"}


async def test_admin_lists_all_bookings_with_user(client, owner_and_college, register_user):
    owner, college = owner_and_college
    await client.post(
        "/api/bookings", json=_booking_body(college["id"]), headers=owner["headers"]
    )
    admin = await register_user()
    res = await client.get("/api/admin/bookings", headers=admin["headers"])
    assert res.status_code == 200
    bookings = res.json()
    assert len(bookings) == 1
    assert bookings[0]["user"]["email"] == "owner@example.com"
    assert bookings[0]["college"]["name"] == "MIT"


async def test_admin_updates_status(client, owner_and_college, register_user):
    owner, college = owner_and_college
    created = await client.post(
        "/api/bookings", json=_booking_body(college["id"]), headers=owner["headers"]
    )
    booking_id = created.json()["booking"]["id"]
    admin = await register_user()

    res = await client.put(
        f"/api/admin/bookings/{booking_id}", json={"status": "approved"}, headers=admin["headers"]
    )
    assert res.status_code == 200
    data = res.json()
    assert data["message"] == "Booking status updated successfully"
    assert data["booking"]["status"] == "approved"
    assert data["booking"]["user"]["id"] == owner["user"]["id"]

    mine = await client.get(f"/api/bookings/{booking_id}", headers=owner["headers"])
    assert mine.json()["status"] == "approved"


async def test_admin_status_validation_and_missing(client, owner_and_college):
    owner, college = owner_and_college
    created = await client.post(
        "/api/bookings", json=_booking_body(college["id"]), headers=owner["headers"]
    )
    booking_id = created.json()["booking"]["id"]

    bad = await client.put(
        f"/api/admin/bookings/{booking_id}", json={"status": "cancelled"}, headers=owner["headers"]
    )
    assert bad.status_code == 400
    assert bad.json() == {"error": "Invalid status value"}

    missing = await client.put(
        f"/api/admin/bookings/{uuid.uuid4()}", json={"status": "rejected"}, headers=owner["headers"]
    )
    assert missing.status_code == 404


async def test_owner_update_cannot_blank_required_fields(client, owner_and_college):
    owner, college = owner_and_college
    created = await client.post(
        "/api/bookings", json=_booking_body(college["id"]), headers=owner["headers"]
    )
    booking_id = created.json()["booking"]["id"]

    res = await client.put(
        f"/api/bookings/{booking_id}",
        json={"studentName": "", "grade": "  "},
        headers=owner["headers"],
    )
    assert res.status_code == 400
    assert res.json() == {"error": "All required fields must be provided"}

    detail = await client.get(f"/api/bookings/{booking_id}", headers=owner["headers"])
    assert detail.json()["studentName"] == "Sam Student"
    assert detail.json()["grade"] == "A"


async def test_owner_update_can_clear_optional_guardian(client, owner_and_college):
    owner, college = owner_and_college
    created = await client.post(
        "/api/bookings",
        json=_booking_body(college["id"], guardianName="Pat"),
        headers=owner["headers"],
    )
    booking_id = created.json()["booking"]["id"]
    res = await client.put(
        f"/api/bookings/{booking_id}", json={"guardianName": ""}, headers=owner["headers"]
    )
    assert res.status_code == 200
    assert res.json()["booking"]["guardianName"] == ""
