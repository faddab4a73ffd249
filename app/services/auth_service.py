"""Auth Service. 회원가입·로그인·OAuth 패스스루 로그인, 프로필, JWT 발급/검증."""

import asyncio
import hashlib
import logging
import uuid
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.database import transaction
from app.core.errors import BadRequestError, ForbiddenError, NotFoundError, UnauthorizedError
from app.models.user import User
from app.repositories import user_repository
from app.schemas.auth import (
    GoogleLoginRequest,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
)

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
INVALID_CREDENTIALS = "Invalid email or password"
DUPLICATE_EMAIL = "User with this email already exists"


class AuthError(ForbiddenError):
    """토큰 검증 실패. 의존성에서 403으로 응답."""

    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message)


def _prehash(password: str) -> bytes:
    """bcrypt 72바이트 제한 회피. SHA-256 hex(64자)로 고정 길이 입력."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest().encode("ascii")


def hash_password(password: str) -> str:
    return bcrypt.hashpw(
        _prehash(password), bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    ).decode("ascii")


def verify_password(password: str, password_hash: str | None) -> bool:
    """비밀번호 없는 계정(OAuth 가입)은 항상 False."""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(_prehash(password), password_hash.encode("ascii"))
    except ValueError:
        logger.warning("Malformed password hash in store")
        return False


def create_access_token(user_id: uuid.UUID) -> str:
    """Access JWT 생성. sub=유저 id, 만료 jwt_expire_days."""
    secret = settings.jwt_secret.get_secret_value()
    if not secret:
        raise RuntimeError("JWT_SECRET not configured")
    now = datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "type": "access",
        "iss": settings.jwt_issuer,
        "iat": now,
        "exp": now + timedelta(days=settings.jwt_expire_days),
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def verify_access_token(encoded: str) -> dict[str, Any]:
    """Access JWT 검증. 서명·만료·iss·type 확인. 실패 시 AuthError."""
    try:
        payload = jwt.decode(
            encoded,
            settings.jwt_secret.get_secret_value(),
            algorithms=[JWT_ALGORITHM],
            issuer=settings.jwt_issuer,
            options={"require": ["exp", "iat", "sub"]},
        )
    except jwt.InvalidTokenError as e:
        logger.info("Invalid access token: %s", e)
        raise AuthError() from e
    if payload.get("type") != "access":
        raise AuthError()
    return payload


def user_id_from_token(encoded: str) -> uuid.UUID:
    """토큰 sub를 UUID로. 형식이 어긋나면 AuthError."""
    payload = verify_access_token(encoded)
    try:
        return uuid.UUID(payload["sub"])
    except (TypeError, ValueError) as e:
        raise AuthError() from e


async def register_user(data: RegisterRequest) -> tuple[User, str]:
    """이메일 가입. 중복 이메일은 400. (user, token) 반환."""
    password_hash = await asyncio.to_thread(hash_password, data.password)
    try:
        async with transaction() as session:
            if await user_repository.get_by_email(session, data.email) is not None:
                raise BadRequestError(DUPLICATE_EMAIL)
            user = await user_repository.create(
                session,
                name=data.name,
                email=data.email,
                password_hash=password_hash,
                phone=data.phone,
                address=data.address,
                auth_provider="email",
            )
    except IntegrityError as e:
        # 사전 조회와 INSERT 사이에 같은 이메일이 가입된 경우
        raise BadRequestError(DUPLICATE_EMAIL) from e
    logger.info("User registered: %s", user.id)
    return user, create_access_token(user.id)


async def login_user(session: AsyncSession, data: LoginRequest) -> tuple[User, str]:
    """이메일·비밀번호 로그인. 미가입/불일치 모두 동일 메시지(401)."""
    user = await user_repository.get_by_email(session, data.email)
    if user is None:
        raise UnauthorizedError(INVALID_CREDENTIALS)
    valid = await asyncio.to_thread(verify_password, data.password, user.password_hash)
    if not valid:
        raise UnauthorizedError(INVALID_CREDENTIALS)
    return user, create_access_token(user.id)


async def oauth_login(data: GoogleLoginRequest) -> tuple[User, str]:
    """
    OAuth 패스스루 로그인. 이메일로 찾고 없으면 비밀번호 없이 생성.
    제공자 assertion을 검증하지 않으므로 호출자는 임의 이메일을 주장할 수 있다.
    """
    try:
        async with transaction() as session:
            user = await user_repository.get_by_email(session, data.email)
            if user is None:
                user = await user_repository.create(
                    session,
                    email=data.email,
                    name=data.name,
                    auth_provider=data.auth_provider,
                )
                logger.info("User created via %s login: %s", data.auth_provider, user.id)
    except IntegrityError:
        # 동시 첫 로그인: 먼저 생성된 유저로 진행
        async with transaction() as session:
            user = await user_repository.get_by_email(session, data.email)
            if user is None:
                raise
    return user, create_access_token(user.id)


async def get_user(session: AsyncSession, user_id: uuid.UUID) -> User:
    user = await user_repository.get_by_id(session, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


async def update_profile(user_id: uuid.UUID, data: ProfileUpdateRequest) -> User:
    """
    값이 있는 필드만 반영. current_password와 new_password가 모두 있을 때만
    현재 비밀번호 확인 후 교체.
    """
    async with transaction() as session:
        user = await user_repository.get_by_id(session, user_id)
        if user is None:
            raise NotFoundError("User not found")

        values: dict[str, Any] = {}
        for field in ("name", "phone", "address"):
            value = getattr(data, field)
            if value:
                values[field] = value

        if data.current_password and data.new_password:
            valid = await asyncio.to_thread(
                verify_password, data.current_password, user.password_hash
            )
            if not valid:
                raise UnauthorizedError("Current password is incorrect")
            values["password_hash"] = await asyncio.to_thread(
                hash_password, data.new_password
            )

        return await user_repository.update(session, user, values)
