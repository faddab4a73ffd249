"""User 관련 Pydantic 스키마."""

import uuid
from datetime import datetime

from app.schemas.common import ApiModel


class UserResponse(ApiModel):
    """User 응답. password_hash는 포함하지 않는다."""

    id: uuid.UUID
    name: str | None = None
    email: str
    phone: str | None = None
    address: str | None = None
    auth_provider: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
