"""비동기 DB 엔진·세션. SQLAlchemy 2.0 (PostgreSQL은 asyncpg, 로컬/테스트는 aiosqlite)."""

import asyncio
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from contextvars import ContextVar
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.core.config import settings

logger = logging.getLogger(__name__)

DB_NOT_INITIALIZED = "Database not initialized. Set DATABASE_URL."


class _DbHolder:
    """엔진·세션 팩토리 보관. 테스트는 override_db_for_testing으로 교체."""

    engine: AsyncEngine | None = None
    async_session_maker: async_sessionmaker[AsyncSession] | None = None


_db_holder = _DbHolder()

# 현재 열린 transaction() 세션. 중첩 호출은 바깥 세션을 그대로 사용.
_current_session: ContextVar[AsyncSession | None] = ContextVar(
    "current_session", default=None
)


def _async_database_url(url: str) -> URL:
    """postgresql:// 계열은 asyncpg 드라이버로 바꾼다. sqlite+aiosqlite 등은 그대로."""
    parsed = make_url(url.strip())
    if parsed.get_backend_name() in ("postgresql", "postgres"):
        return parsed.set(drivername="postgresql+asyncpg")
    return parsed


def get_engine() -> AsyncEngine | None:
    return _db_holder.engine


def get_async_session_maker() -> async_sessionmaker[AsyncSession] | None:
    return _db_holder.async_session_maker


def init_db() -> None:
    """DATABASE_URL로 엔진·세션 팩토리 생성. 미설정이면 경고만 남기고 DB 비활성."""
    if not settings.database_url:
        logger.warning("DATABASE_URL not set. DB features disabled.")
        return

    url = _async_database_url(settings.database_url)
    engine_kwargs: dict[str, Any] = {"echo": False}
    if url.get_backend_name() == "sqlite":
        engine_kwargs["connect_args"] = {"check_same_thread": False}
    else:
        engine_kwargs["pool_pre_ping"] = True

    _db_holder.engine = create_async_engine(url, **engine_kwargs)
    _db_holder.async_session_maker = async_sessionmaker(
        _db_holder.engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
    logger.info("Database engine ready (%s)", url.get_backend_name())


def override_db_for_testing(
    engine: AsyncEngine | None = None,
    async_session_maker_instance: async_sessionmaker[AsyncSession] | None = None,
) -> None:
    """테스트용. Holder를 테스트 엔진/세션 팩토리로 교체."""
    _db_holder.engine = engine
    _db_holder.async_session_maker = async_session_maker_instance


async def ping_db() -> None:
    """SELECT 1. 미초기화면 RuntimeError, 연결 실패는 드라이버 예외 그대로 전파."""
    maker = get_async_session_maker()
    if maker is None:
        raise RuntimeError(DB_NOT_INITIALIZED)
    async with maker() as session:
        await session.execute(text("SELECT 1"))


async def verify_db_connection() -> None:
    """
    부팅 시 DB 연결 확인. db_connect_retries회 재시도 후에도 실패하면 부팅 중단.
    DB 컨테이너가 늦게 뜨는 경우 대비.
    """
    if get_async_session_maker() is None:
        return

    retries = settings.db_connect_retries
    interval = settings.db_connect_retry_interval_sec
    last_exc: Exception | None = None
    for attempt in range(1, retries + 1):
        try:
            await ping_db()
            return
        except Exception as exc:
            last_exc = exc
            if attempt == retries:
                break
            logger.warning(
                "Database connection attempt %d/%d failed: %s. Retrying in %.1fs...",
                attempt,
                retries,
                exc,
                interval,
            )
            await asyncio.sleep(interval)

    if settings.sentry_dsn:
        import sentry_sdk

        with sentry_sdk.new_scope() as scope:
            scope.set_tag("context", "database_connection_check")
            scope.set_context("database", {"retries": retries})
            sentry_sdk.capture_exception(last_exc)

    logger.critical(
        "Database connection failed after %d attempts. Aborting startup.",
        retries,
        exc_info=last_exc,
    )
    raise RuntimeError(
        f"Database connection failed after {retries} attempts: {last_exc}"
    ) from last_exc


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI Depends용 조회 세션. commit하지 않는다.
    쓰기는 서비스 레이어의 transaction()에서만.
    """
    maker = get_async_session_maker()
    if maker is None:
        raise RuntimeError(DB_NOT_INITIALIZED)
    async with maker() as session:
        yield session


@asynccontextmanager
async def transaction() -> AsyncGenerator[AsyncSession, None]:
    """
    쓰기 작업 단위. 블록이 정상 종료하면 commit, 예외면 rollback 후 전파.
    이미 transaction() 안이면 같은 세션을 넘기고 commit은 바깥에서.
    """
    outer = _current_session.get()
    if outer is not None:
        yield outer
        return

    maker = get_async_session_maker()
    if maker is None:
        raise RuntimeError(DB_NOT_INITIALIZED)

    async with maker() as session:
        token = _current_session.set(session)
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            _current_session.reset(token)
