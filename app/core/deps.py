"""FastAPI 의존성. Authorization 헤더의 토큰 검증 후 user_id 주입."""

import uuid

from fastapi import Depends
from fastapi.security import APIKeyHeader

from app.core.errors import UnauthorizedError
from app.services.auth_service import user_id_from_token

# 스킴은 검사하지 않는다. "<scheme> <token>"의 두 번째 부분만 토큰으로 사용.
authorization_header = APIKeyHeader(
    name="Authorization",
    auto_error=False,
    description="Bearer <token>",
)


def _token_part(authorization: str | None) -> str | None:
    if not authorization:
        return None
    parts = authorization.split(" ")
    if len(parts) < 2 or not parts[1]:
        return None
    return parts[1]


async def get_current_user_id(
    authorization: str | None = Depends(authorization_header),
) -> uuid.UUID:
    """
    Authorization 헤더에서 user_id 반환. DB 조회 전에 판정.
    토큰 부분 없음 → 401, 서명/만료/형식 오류(스킴 무관) → 403.
    """
    token = _token_part(authorization)
    if token is None:
        raise UnauthorizedError("Access token required")
    return user_id_from_token(token)
