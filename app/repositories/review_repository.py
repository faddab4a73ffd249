"""Review Repository. DB 쿼리만 수행."""

import uuid
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.review import Review


async def list_by_college(
    session: AsyncSession, college_id: uuid.UUID, *, newest_first: bool = True
) -> list[Review]:
    order = Review.created_at.desc() if newest_first else Review.created_at.asc()
    result = await session.execute(
        select(Review).where(Review.college_id == college_id).order_by(order)
    )
    return list(result.scalars())


async def list_by_user(session: AsyncSession, user_id: uuid.UUID) -> list[Review]:
    """해당 유저의 리뷰. 최신순."""
    result = await session.execute(
        select(Review)
        .where(Review.user_id == user_id)
        .order_by(Review.created_at.desc())
    )
    return list(result.scalars())


async def list_ratings(session: AsyncSession, college_id: uuid.UUID) -> list[int]:
    """평균 재계산용. 해당 대학 리뷰의 rating 값만 조회."""
    result = await session.execute(
        select(Review.rating).where(Review.college_id == college_id)
    )
    return list(result.scalars())


async def get_by_id(
    session: AsyncSession,
    review_id: uuid.UUID,
    user_id: uuid.UUID | None = None,
) -> Review | None:
    """id로 리뷰 조회. user_id가 있으면 작성자가 아닌 경우 None."""
    stmt = select(Review).where(Review.id == review_id)
    if user_id is not None:
        stmt = stmt.where(Review.user_id == user_id)
    result = await session.execute(stmt)
    return result.scalars().one_or_none()


async def get_by_user_and_college(
    session: AsyncSession, user_id: uuid.UUID, college_id: uuid.UUID
) -> Review | None:
    """유저가 해당 대학에 이미 남긴 리뷰. 중복 작성 검사용."""
    result = await session.execute(
        select(Review).where(
            Review.user_id == user_id,
            Review.college_id == college_id,
        )
    )
    return result.scalars().one_or_none()


async def create(session: AsyncSession, **values: Any) -> Review:
    review = Review(**values)
    session.add(review)
    await session.flush()
    await session.refresh(review)
    return review


async def update(session: AsyncSession, review: Review, values: dict[str, Any]) -> Review:
    for key, value in values.items():
        setattr(review, key, value)
    await session.flush()
    await session.refresh(review)
    return review


async def delete_one(session: AsyncSession, review: Review) -> None:
    await session.delete(review)
    await session.flush()


async def delete_by_college(session: AsyncSession, college_id: uuid.UUID) -> int:
    """대학 삭제 시 연쇄 삭제. 삭제 건수 반환."""
    result = await session.execute(delete(Review).where(Review.college_id == college_id))
    return result.rowcount or 0
