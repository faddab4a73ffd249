"""Auth 요청·응답 스키마. 존재 여부 검증 메시지는 원래 API 계약 문구를 그대로 사용."""

from pydantic import model_validator

from app.models.user import AUTH_PROVIDERS
from app.schemas.common import ApiModel, is_blank
from app.schemas.user import UserResponse

OAUTH_PROVIDERS = tuple(p for p in AUTH_PROVIDERS if p != "email")


class RegisterRequest(ApiModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None
    phone: str | None = None
    address: str | None = None

    @model_validator(mode="after")
    def require_fields(self) -> "RegisterRequest":
        if is_blank(self.name) or is_blank(self.email) or is_blank(self.password):
            raise ValueError("Name, email, and password are required")
        return self


class LoginRequest(ApiModel):
    email: str | None = None
    password: str | None = None

    @model_validator(mode="after")
    def require_fields(self) -> "LoginRequest":
        if is_blank(self.email) or is_blank(self.password):
            raise ValueError("Email and password are required")
        return self


class GoogleLoginRequest(ApiModel):
    """OAuth 패스스루 로그인. 제공자 assertion 검증 없음 (클라이언트가 이메일을 주장)."""

    email: str | None = None
    auth_provider: str = "google"
    name: str | None = None

    @model_validator(mode="after")
    def validate_fields(self) -> "GoogleLoginRequest":
        if is_blank(self.email):
            raise ValueError("Email is required")
        if self.auth_provider not in OAUTH_PROVIDERS:
            raise ValueError("Invalid auth provider")
        return self


class ProfileUpdateRequest(ApiModel):
    name: str | None = None
    phone: str | None = None
    address: str | None = None
    current_password: str | None = None
    new_password: str | None = None


class AuthResponse(ApiModel):
    message: str
    user: UserResponse
    token: str


class ProfileResponse(ApiModel):
    message: str
    user: UserResponse
