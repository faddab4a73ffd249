"""FastAPI 앱 진입점. app.main:app"""

import asyncio
import logging
from contextlib import asynccontextmanager

from app.core.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


# 환경 변수 로드 직후 Sentry 초기화. 임포트/라우터 등록 단계 예외도 수집.
def _init_sentry() -> None:
    """SENTRY_DSN이 있으면 Sentry 초기화. environment는 설정에서 로드."""
    if settings.sentry_dsn:
        import sentry_sdk
        from sentry_sdk.integrations.fastapi import FastApiIntegration
        from sentry_sdk.integrations.logging import LoggingIntegration

        sentry_sdk.init(
            dsn=settings.sentry_dsn.get_secret_value(),
            integrations=[
                FastApiIntegration(),
                LoggingIntegration(level=logging.INFO, event_level=logging.ERROR),
            ],
            traces_sample_rate=0.1,
            environment=settings.environment,
        )


_init_sentry()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import health
from app.api.routes import admin, auth, bookings, colleges, reviews
from app.core.database import get_async_session_maker, get_engine, init_db, verify_db_connection
from app.core.errors import ServiceError
from app.services.seed_service import seed_demo_data

logger = logging.getLogger(__name__)


async def _run_startup_seed() -> None:
    """부팅 시 데모 시드. 요청 처리 시작 전에 1회. 실패해도 서버는 기동."""
    if not settings.seed_demo_data or get_async_session_maker() is None:
        return
    try:
        await seed_demo_data()
    except Exception:
        logger.exception("Error seeding database")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 수명 주기: DB 초기화·연결 확인, 데모 시드."""
    init_db()
    await verify_db_connection()
    await _run_startup_seed()
    logger.info("Demo account: demo@example.com / password")
    yield
    eng = get_engine()
    if eng is not None:
        await eng.dispose()


app = FastAPI(
    title="College Booking Platform API",
    description="대학 입학 지원 예약 플랫폼 백엔드",
    version=health.API_VERSION,
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(auth.router, prefix="/api")
app.include_router(colleges.router, prefix="/api")
app.include_router(bookings.router, prefix="/api")
app.include_router(reviews.router, prefix="/api")
app.include_router(admin.router, prefix="/api")

allowed_origins = [
    o.strip() for o in settings.allowed_origins.split(",") if o.strip()
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info("%s %s", request.method, request.url.path)
    return await call_next(request)


def _validation_message(exc: RequestValidationError) -> str:
    """검증 오류 → 사용자 메시지 1줄. 스키마 validator의 ValueError 문구를 우선 사용."""
    errors = exc.errors()
    for err in errors:
        error = (err.get("ctx") or {}).get("error")
        if err.get("type") == "value_error" and error is not None:
            return str(error)
    if not errors:
        return "Invalid request"
    first = errors[0]
    if first.get("type") == "json_invalid":
        return "Malformed JSON body"
    fields = [str(p) for p in first.get("loc", ()) if p not in ("body", "query", "path")]
    if not fields:
        return "Request body is required"
    return f"Invalid value for {'.'.join(fields)}"


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """도메인 예외(400/401/403/404) → {"error": message}."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """스키마 검증 실패 → 400 {"error": message}."""
    logger.info("Validation error on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": _validation_message(exc)})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """프레임워크 HTTPException(404 라우트 없음, 405 등)도 {"error": detail} 형태로."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """처리되지 않은 예외 → 500 + 로그. 상세 내용은 응답에 노출하지 않음."""
    if isinstance(exc, asyncio.CancelledError):
        raise exc  # 정상 연결 종료, 500 로그 방지
    logger.exception("Unhandled exception: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
    )
