"""Booking Repository. DB 쿼리만 수행. user_id를 넘기면 소유자 범위로 제한."""

import uuid
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.booking import Booking


async def list_by_user(session: AsyncSession, user_id: uuid.UUID) -> list[Booking]:
    """해당 유저의 예약 전체. 등록 순."""
    result = await session.execute(
        select(Booking)
        .where(Booking.user_id == user_id)
        .order_by(Booking.created_at.asc())
    )
    return list(result.scalars())


async def list_all(session: AsyncSession) -> list[Booking]:
    """관리자용 전체 예약. 최신순."""
    result = await session.execute(select(Booking).order_by(Booking.created_at.desc()))
    return list(result.scalars())


async def get_by_id(
    session: AsyncSession,
    booking_id: uuid.UUID,
    user_id: uuid.UUID | None = None,
) -> Booking | None:
    """id로 예약 조회. user_id가 있으면 소유자가 아닌 경우 None."""
    stmt = select(Booking).where(Booking.id == booking_id)
    if user_id is not None:
        stmt = stmt.where(Booking.user_id == user_id)
    result = await session.execute(stmt)
    return result.scalars().one_or_none()


async def create(session: AsyncSession, **values: Any) -> Booking:
    booking = Booking(**values)
    session.add(booking)
    await session.flush()
    await session.refresh(booking)
    return booking


async def update(
    session: AsyncSession, booking: Booking, values: dict[str, Any]
) -> Booking:
    for key, value in values.items():
        setattr(booking, key, value)
    await session.flush()
    await session.refresh(booking)
    return booking


async def delete_one(session: AsyncSession, booking: Booking) -> None:
    await session.delete(booking)
    await session.flush()


async def delete_by_college(session: AsyncSession, college_id: uuid.UUID) -> int:
    """대학 삭제 시 연쇄 삭제. 삭제 건수 반환."""
    result = await session.execute(delete(Booking).where(Booking.college_id == college_id))
    return result.rowcount or 0
