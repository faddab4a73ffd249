"""SQLAlchemy Declarative Base."""

from datetime import UTC, datetime

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase

# 문자열 리스트 컬럼. PostgreSQL에서는 JSONB, 그 외(테스트 SQLite)는 JSON.
JsonList = JSON().with_variant(JSONB(), "postgresql")


def utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """공통 베이스 클래스."""

    pass
