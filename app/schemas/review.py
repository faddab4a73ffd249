"""Review 스키마."""

import uuid
from datetime import datetime

from pydantic import model_validator

from app.models.review import MAX_RATING, MIN_RATING
from app.schemas.common import ApiModel, is_blank

RATING_RANGE_MESSAGE = f"Rating must be between {MIN_RATING} and {MAX_RATING}"


def _check_rating(rating: int | None) -> None:
    if rating is not None and not MIN_RATING <= rating <= MAX_RATING:
        raise ValueError(RATING_RANGE_MESSAGE)


class ReviewCreate(ApiModel):
    college_id: str | None = None
    rating: int | None = None
    comment: str | None = None

    @model_validator(mode="after")
    def validate_fields(self) -> "ReviewCreate":
        if is_blank(self.college_id) or self.rating is None or is_blank(self.comment):
            raise ValueError("College ID, rating, and comment are required")
        _check_rating(self.rating)
        return self


class ReviewUpdate(ApiModel):
    rating: int | None = None
    comment: str | None = None

    @model_validator(mode="after")
    def validate_rating(self) -> "ReviewUpdate":
        _check_rating(self.rating)
        return self


class ReviewResponse(ApiModel):
    id: uuid.UUID
    user_id: uuid.UUID
    college_id: uuid.UUID
    user_name: str
    rating: int
    comment: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
