"""Auth API 테스트. 가입·로그인·OAuth 로그인·내 정보·프로필 수정."""

import uuid

from app.services.auth_service import create_access_token


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def test_register_returns_user_and_token(client):
    res = await client.post(
        "/api/auth/register",
        json={"name": "Alice", "email": "alice@example.com", "password": "pw", "phone": "123"},
    )
    assert res.status_code == 201
    data = res.json()
    assert data["message"] == "User registered successfully"
    assert data["user"]["email"] == "alice@example.com"
    assert data["user"]["authProvider"] == "email"
    assert "password" not in data["user"]
    assert "passwordHash" not in data["user"]
    assert data["token"]


async def test_register_missing_fields(client):
    res = await client.post("/api/auth/register", json={"email": "a@example.com"})
    assert res.status_code == 400
    assert res.json() == {"error": "Name, email, and password are required"}


async def test_register_duplicate_email(client, register_user):
    await register_user(email="dup@example.com")
    res = await client.post(
        "/api/auth/register",
        json={"name": "Other", "email": "dup@example.com", "password": "pw"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "User with this email already exists"}


async def test_register_without_body(client):
    res = await client.post("/api/auth/register")
    assert res.status_code == 400
    assert "error" in res.json()


async def test_login_success_and_me(client, register_user):
    """가입 → 로그인 → /me 로 같은 유저 확인."""
    registered = await register_user(email="bob@example.com", name="Bob", password="hunter2")
    res = await client.post(
        "/api/auth/login", json={"email": "bob@example.com", "password": "hunter2"}
    )
    assert res.status_code == 200
    data = res.json()
    assert data["message"] == "Login successful"
    assert data["user"]["id"] == registered["user"]["id"]

    me = await client.get("/api/auth/me", headers=_bearer(data["token"]))
    assert me.status_code == 200
    assert me.json()["name"] == "Bob"


async def test_login_wrong_password_and_unknown_email(client, register_user):
    await register_user(email="carol@example.com", password="right")
    wrong = await client.post(
        "/api/auth/login", json={"email": "carol@example.com", "password": "wrong"}
    )
    unknown = await client.post(
        "/api/auth/login", json={"email": "nobody@example.com", "password": "right"}
    )
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.json() == unknown.json() == {"error": "Invalid email or password"}


async def test_login_missing_fields(client):
    res = await client.post("/api/auth/login", json={"email": "x@example.com"})
    assert res.status_code == 400
    assert res.json() == {"error": "Email and password are required"}


async def test_google_login_creates_then_reuses_user(client):
    first = await client.post(
        "/api/auth/google-login", json={"email": "g@example.com", "name": "Gina"}
    )
    assert first.status_code == 200
    user = first.json()["user"]
    assert user["authProvider"] == "google"
    assert user["name"] == "Gina"

    second = await client.post(
        "/api/auth/google-login", json={"email": "g@example.com", "authProvider": "github"}
    )
    assert second.status_code == 200
    assert second.json()["user"]["id"] == user["id"]
    # 기존 유저의 제공자는 바뀌지 않는다.
    assert second.json()["user"]["authProvider"] == "google"


async def test_google_login_requires_email(client):
    res = await client.post("/api/auth/google-login", json={"name": "No Email"})
    assert res.status_code == 400
    assert res.json() == {"error": "Email is required"}


async def test_google_login_user_cannot_password_login(client):
    await client.post("/api/auth/google-login", json={"email": "oauth@example.com"})
    res = await client.post(
        "/api/auth/login", json={"email": "oauth@example.com", "password": "anything"}
    )
    assert res.status_code == 401


async def test_me_for_deleted_user_is_404(client):
    token = create_access_token(uuid.uuid4())
    res = await client.get("/api/auth/me", headers=_bearer(token))
    assert res.status_code == 404
    assert res.json() == {"error": "User not found"}


async def test_profile_updates_present_fields_only(client, register_user):
    registered = await register_user(name="Dana", phone="111")
    res = await client.put(
        "/api/auth/profile",
        json={"address": "1 Main St", "name": ""},
        headers=registered["headers"],
    )
    assert res.status_code == 200
    data = res.json()
    assert data["message"] == "Profile updated successfully"
    assert data["user"]["address"] == "1 Main St"
    assert data["user"]["name"] == "Dana"
    assert data["user"]["phone"] == "111"


async def test_profile_password_change(client, register_user):
    registered = await register_user(email="eve@example.com", password="old-pass")
    headers = registered["headers"]

    bad = await client.put(
        "/api/auth/profile",
        json={"currentPassword": "nope", "newPassword": "new-pass"},
        headers=headers,
    )
    assert bad.status_code == 401
    assert bad.json() == {"error": "Current password is incorrect"}

    ok = await client.put(
        "/api/auth/profile",
        json={"currentPassword": "old-pass", "newPassword": "new-pass"},
        headers=headers,
    )
    assert ok.status_code == 200

    old_login = await client.post(
        "/api/auth/login", json={"email": "eve@example.com", "password": "old-pass"}
    )
    new_login = await client.post(
        "/api/auth/login", json={"email": "eve@example.com", "password": "new-pass"}
    )
    assert old_login.status_code == 401
    assert new_login.status_code == 200


async def test_profile_new_password_alone_is_ignored(client, register_user):
    registered = await register_user(email="fay@example.com", password="keep")
    res = await client.put(
        "/api/auth/profile", json={"newPassword": "changed"}, headers=registered["headers"]
    )
    assert res.status_code == 200
    login = await client.post(
        "/api/auth/login", json={"email": "fay@example.com", "password": "keep"}
    )
    assert login.status_code == 200
