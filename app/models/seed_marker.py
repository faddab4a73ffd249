"""SeedMarker 모델. 시드 적용 여부를 영속적으로 기록."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, utcnow


class SeedMarker(Base):
    """name이 PK라 동시에 두 프로세스가 같은 시드를 기록하면 한쪽은 IntegrityError."""

    __tablename__ = "seed_markers"

    name: Mapped[str] = mapped_column(String(128), primary_key=True)
    applied_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
