"""Bearer 토큰 의존성: 없음 401, 무효 403."""

import pytest

PROTECTED = [
    ("get", "/api/auth/me"),
    ("get", "/api/bookings"),
    ("get", "/api/reviews/user"),
    ("get", "/api/admin/bookings"),
    ("post", "/api/colleges"),
]


@pytest.mark.parametrize(("method", "path"), PROTECTED)
async def test_missing_token_is_401(client, method, path):
    res = await client.request(method, path)
    assert res.status_code == 401
    assert res.json() == {"error": "Access token required"}


@pytest.mark.parametrize(("method", "path"), PROTECTED)
async def test_invalid_token_is_403(client, method, path):
    res = await client.request(method, path, headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 403
    assert res.json() == {"error": "Invalid or expired token"}


async def test_public_routes_need_no_token(client):
    assert (await client.get("/api/colleges")).status_code == 200


async def test_token_under_other_scheme_is_verified(client):
    """스킴이 Bearer가 아니어도 토큰 부분이 있으면 검증 후 403."""
    res = await client.get("/api/auth/me", headers={"Authorization": "Token abc.def.ghi"})
    assert res.status_code == 403
    assert res.json() == {"error": "Invalid or expired token"}


async def test_valid_token_under_other_scheme_is_accepted(client, register_user):
    registered = await register_user(name="Scheme")
    res = await client.get(
        "/api/auth/me", headers={"Authorization": f"Token {registered['token']}"}
    )
    assert res.status_code == 200
    assert res.json()["name"] == "Scheme"


@pytest.mark.parametrize("header", ["Bearer", "Bearer ", "abc.def.ghi"])
async def test_header_without_token_part_is_401(client, header):
    res = await client.get("/api/auth/me", headers={"Authorization": header})
    assert res.status_code == 401
    assert res.json() == {"error": "Access token required"}
