"""College 스키마. 대학 상세(리뷰 포함)와 대학을 합성한 리뷰 응답도 여기서 정의."""

import uuid
from datetime import datetime

from pydantic import Field, model_validator

from app.schemas.common import ApiModel, MessageResponse, is_blank
from app.schemas.review import ReviewResponse

COLLEGE_SORT_KEYS = ("rating", "name", "tuition")


def _check_rating(rating: float | None) -> None:
    if rating is not None and not 0 <= rating <= 5:
        raise ValueError("Rating must be between 0 and 5")


def _check_tuition(tuition_fee: float | None) -> None:
    if tuition_fee is not None and tuition_fee < 0:
        raise ValueError("Tuition fee cannot be negative")


class CollegeCreate(ApiModel):
    name: str | None = None
    location: str | None = None
    description: str | None = None
    rating: float | None = None
    image: str | None = None
    type: str | None = None
    established: int | None = None
    affiliations: list[str] | None = None
    courses: list[str] | None = None
    facilities: list[str] | None = None
    tuition_fee: float | None = None
    gallery: list[str] | None = None

    @model_validator(mode="after")
    def validate_fields(self) -> "CollegeCreate":
        if is_blank(self.name) or is_blank(self.location) or is_blank(self.description):
            raise ValueError("Name, location, and description are required")
        _check_rating(self.rating)
        _check_tuition(self.tuition_fee)
        return self


class CollegeUpdate(ApiModel):
    """부분 수정. 값이 null인 필드는 무시."""

    name: str | None = None
    location: str | None = None
    description: str | None = None
    rating: float | None = None
    image: str | None = None
    type: str | None = None
    established: int | None = None
    affiliations: list[str] | None = None
    courses: list[str] | None = None
    facilities: list[str] | None = None
    tuition_fee: float | None = None
    gallery: list[str] | None = None

    @model_validator(mode="after")
    def validate_fields(self) -> "CollegeUpdate":
        for field in ("name", "location", "description"):
            value = getattr(self, field)
            if value is not None and is_blank(value):
                raise ValueError("Name, location, and description cannot be empty")
        _check_rating(self.rating)
        _check_tuition(self.tuition_fee)
        return self


class CollegeResponse(ApiModel):
    id: uuid.UUID
    name: str
    location: str
    description: str
    rating: float
    image: str
    type: str
    established: int | None = None
    affiliations: list[str] = Field(default_factory=list)
    courses: list[str] = Field(default_factory=list)
    facilities: list[str] = Field(default_factory=list)
    tuition_fee: float
    gallery: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CollegeDetail(CollegeResponse):
    """GET /colleges/{id}. 대학 필드 + 전체 리뷰 목록."""

    reviews: list[ReviewResponse] = Field(default_factory=list)


class CollegeEnvelope(MessageResponse):
    college: CollegeResponse


class ReviewWithCollege(ReviewResponse):
    """내 리뷰 목록용. 대학이 삭제된 경우 college는 null."""

    college: CollegeResponse | None = None


class ReviewEnvelope(MessageResponse):
    review: ReviewResponse
