"""College(대학) 모델. rating은 리뷰 평균에서 파생."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Float, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, JsonList, utcnow

DEFAULT_COLLEGE_IMAGE = "/placeholder.svg?height=400&width=600"
DEFAULT_COLLEGE_TYPE = "University"


class College(Base):
    __tablename__ = "colleges"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    # 0~5, 소수점 1자리. 리뷰 생성/수정/삭제 시 review_service에서 재계산.
    rating: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    image: Mapped[str] = mapped_column(String(2048), default=DEFAULT_COLLEGE_IMAGE, nullable=False)
    type: Mapped[str] = mapped_column(String(128), default=DEFAULT_COLLEGE_TYPE, nullable=False)
    established: Mapped[int | None] = mapped_column(Integer, nullable=True)
    affiliations: Mapped[list[str]] = mapped_column(JsonList, default=list, nullable=False)
    courses: Mapped[list[str]] = mapped_column(JsonList, default=list, nullable=False)
    facilities: Mapped[list[str]] = mapped_column(JsonList, default=list, nullable=False)
    gallery: Mapped[list[str]] = mapped_column(JsonList, default=list, nullable=False)
    tuition_fee: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )
