"""Pytest fixtures. 테스트마다 인메모리 SQLite(aiosqlite) DB로 교체하고 ASGI 클라이언트로 호출."""

import os
import uuid
from collections.abc import Awaitable, Callable
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# 앱 lifespan(init_db)은 ASGITransport에서 실행되지 않음. DB는 override_db_for_testing으로 주입.
if not os.environ.get("DATABASE_URL"):
    os.environ["DATABASE_URL"] = ""
# Settings Fail-fast 대비: 필수 env 설정. bcrypt는 최소 비용으로.
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-for-pytest")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SEED_DEMO_DATA", "false")


@pytest.fixture
async def db_engine():
    """테스트 1건당 새 인메모리 DB. StaticPool로 모든 세션이 같은 커넥션 공유."""
    from app.core.database import override_db_for_testing
    from app.models import Base

    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    maker = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    override_db_for_testing(engine, maker)
    yield engine
    override_db_for_testing(None, None)
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine):
    from app.core.database import get_async_session_maker

    async with get_async_session_maker()() as session:
        yield session


@pytest.fixture
async def client(db_engine):
    """FastAPI ASGI 클라이언트. 500 응답도 예외 대신 응답으로 받는다."""
    from app.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register_user(client) -> Callable[..., Awaitable[dict[str, Any]]]:
    """회원가입 후 {"user", "token", "headers"} 반환."""

    async def _register(
        email: str | None = None,
        name: str = "Test User",
        password: str = "secret-pass",
        **extra: Any,
    ) -> dict[str, Any]:
        body = {
            "name": name,
            "email": email or f"user-{uuid.uuid4().hex[:8]}@example.com",
            "password": password,
            **extra,
        }
        res = await client.post("/api/auth/register", json=body)
        assert res.status_code == 201, res.text
        data = res.json()
        return {"user": data["user"], "token": data["token"], "headers": bearer(data["token"])}

    return _register


@pytest.fixture
def create_college(client) -> Callable[..., Awaitable[dict[str, Any]]]:
    """대학 생성 후 응답의 college 반환."""

    async def _create(headers: dict[str, str], **overrides: Any) -> dict[str, Any]:
        body = {
            "name": "MIT",
            "location": "Cambridge, Massachusetts",
            "description": "Institute of technology.",
            **overrides,
        }
        res = await client.post("/api/colleges", json=body, headers=headers)
        assert res.status_code == 201, res.text
        return res.json()["college"]

    return _create
