"""Auth API. 이메일 가입/로그인, OAuth 패스스루 로그인, 내 정보·프로필."""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.deps import get_current_user_id
from app.schemas.auth import (
    AuthResponse,
    GoogleLoginRequest,
    LoginRequest,
    ProfileResponse,
    ProfileUpdateRequest,
    RegisterRequest,
)
from app.schemas.user import UserResponse
from app.services import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=201)
async def post_register(payload: RegisterRequest) -> AuthResponse:
    user, token = await auth_service.register_user(payload)
    return AuthResponse(
        message="User registered successfully",
        user=UserResponse.model_validate(user),
        token=token,
    )


@router.post("/login", response_model=AuthResponse)
async def post_login(
    payload: LoginRequest,
    session: AsyncSession = Depends(get_db),
) -> AuthResponse:
    user, token = await auth_service.login_user(session, payload)
    return AuthResponse(
        message="Login successful",
        user=UserResponse.model_validate(user),
        token=token,
    )


@router.post("/google-login", response_model=AuthResponse)
async def post_google_login(payload: GoogleLoginRequest) -> AuthResponse:
    """
    OAuth 제공자(google/facebook/github) 로그인 결과를 그대로 신뢰.
    이메일로 유저를 찾거나 만들어 토큰 발급.
    """
    user, token = await auth_service.oauth_login(payload)
    return AuthResponse(
        message="Login successful",
        user=UserResponse.model_validate(user),
        token=token,
    )


@router.get("/me", response_model=UserResponse)
async def get_me(
    user_id: uuid.UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db),
) -> UserResponse:
    user = await auth_service.get_user(session, user_id)
    return UserResponse.model_validate(user)


@router.put("/profile", response_model=ProfileResponse)
async def put_profile(
    payload: ProfileUpdateRequest,
    user_id: uuid.UUID = Depends(get_current_user_id),
) -> ProfileResponse:
    user = await auth_service.update_profile(user_id, payload)
    return ProfileResponse(
        message="Profile updated successfully",
        user=UserResponse.model_validate(user),
    )
