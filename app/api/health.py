"""루트(기능 맵)·Health check 엔드포인트."""

import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter

from app.core.database import ping_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

API_VERSION = "1.0.0"

# GET / 응답. 라우트 표면 요약(정적).
ENDPOINTS: dict[str, dict[str, str]] = {
    "auth": {
        "register": "POST /api/auth/register",
        "login": "POST /api/auth/login",
        "googleLogin": "POST /api/auth/google-login",
        "getProfile": "GET /api/auth/me",
        "updateProfile": "PUT /api/auth/profile",
    },
    "colleges": {
        "getAll": "GET /api/colleges",
        "getOne": "GET /api/colleges/:id",
        "create": "POST /api/colleges",
        "update": "PUT /api/colleges/:id",
        "delete": "DELETE /api/colleges/:id",
    },
    "bookings": {
        "getAll": "GET /api/bookings",
        "getOne": "GET /api/bookings/:id",
        "create": "POST /api/bookings",
        "update": "PUT /api/bookings/:id",
        "delete": "DELETE /api/bookings/:id",
    },
    "reviews": {
        "getByCollege": "GET /api/reviews/college/:collegeId",
        "getByUser": "GET /api/reviews/user",
        "create": "POST /api/reviews",
        "update": "PUT /api/reviews/:id",
        "delete": "DELETE /api/reviews/:id",
    },
    "admin": {
        "getAllBookings": "GET /api/admin/bookings",
        "updateBookingStatus": "PUT /api/admin/bookings/:id",
    },
}


async def _check_db() -> str:
    """DB 연결 상태. 'ok' 또는 'error'(미초기화 포함)."""
    try:
        await ping_db()
    except Exception as exc:
        logger.warning("Health check DB ping failed: %s", exc)
        return "error"
    return "ok"


@router.get("/")
async def get_root() -> dict[str, Any]:
    return {
        "message": "College Booking Platform API",
        "version": API_VERSION,
        "status": "running",
        "endpoints": ENDPOINTS,
    }


@router.get("/health")
async def get_health() -> dict[str, str]:
    """헬스 체크. 프로세스 생존 + 타임스탬프, DB는 SELECT 1. status: healthy | degraded."""
    db_status = await _check_db()
    return {
        "status": "healthy" if db_status == "ok" else "degraded",
        "timestamp": datetime.now(UTC).isoformat(),
        "db": db_status,
    }
