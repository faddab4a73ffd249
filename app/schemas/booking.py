"""Booking 스키마. 응답은 대학(관리자 목록은 유저까지) 합성."""

import uuid
from datetime import datetime

from pydantic import field_validator, model_validator

from app.models.booking import BOOKING_STATUSES
from app.schemas.college import CollegeResponse
from app.schemas.common import ApiModel, MessageResponse, is_blank
from app.schemas.user import UserResponse

_REQUIRED_BOOKING_FIELDS = (
    "college_id",
    "student_name",
    "email",
    "phone",
    "course",
    "previous_education",
    "grade",
    "address",
)
REQUIRED_FIELDS_MESSAGE = "All required fields must be provided"


def _check_status(value: str | None) -> str | None:
    if value is not None and value not in BOOKING_STATUSES:
        raise ValueError("Invalid status value")
    return value


class BookingCreate(ApiModel):
    """status는 받지 않는다. 생성 시 항상 pending."""

    college_id: str | None = None
    student_name: str | None = None
    email: str | None = None
    phone: str | None = None
    course: str | None = None
    previous_education: str | None = None
    grade: str | None = None
    address: str | None = None
    guardian_name: str | None = None
    guardian_phone: str | None = None

    @model_validator(mode="after")
    def require_fields(self) -> "BookingCreate":
        if any(is_blank(getattr(self, f)) for f in _REQUIRED_BOOKING_FIELDS):
            raise ValueError(REQUIRED_FIELDS_MESSAGE)
        return self


class BookingUpdate(ApiModel):
    """소유자 수정. user/college 참조는 변경 불가."""

    student_name: str | None = None
    email: str | None = None
    phone: str | None = None
    course: str | None = None
    previous_education: str | None = None
    grade: str | None = None
    address: str | None = None
    guardian_name: str | None = None
    guardian_phone: str | None = None
    status: str | None = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, value: str | None) -> str | None:
        return _check_status(value)

    @model_validator(mode="after")
    def reject_blank_fields(self) -> "BookingUpdate":
        """필수 필드는 생략은 가능하지만 빈 값으로 바꿀 수 없다."""
        for field in _REQUIRED_BOOKING_FIELDS:
            value = getattr(self, field, None)
            if value is not None and is_blank(value):
                raise ValueError(REQUIRED_FIELDS_MESSAGE)
        return self


class BookingStatusUpdate(ApiModel):
    status: str | None = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, value: str | None) -> str | None:
        return _check_status(value)


class BookingResponse(ApiModel):
    id: uuid.UUID
    user_id: uuid.UUID
    college_id: uuid.UUID
    student_name: str
    email: str
    phone: str
    course: str
    previous_education: str
    grade: str
    address: str
    guardian_name: str | None = None
    guardian_phone: str | None = None
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class BookingDetail(BookingResponse):
    college: CollegeResponse | None = None


class AdminBookingDetail(BookingDetail):
    user: UserResponse | None = None


class BookingEnvelope(MessageResponse):
    booking: BookingDetail


class AdminBookingEnvelope(MessageResponse):
    booking: AdminBookingDetail
