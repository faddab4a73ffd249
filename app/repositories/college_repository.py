"""College Repository. DB 쿼리만 수행."""

import uuid
from typing import Any

from sqlalchemy import delete, or_, select, update as sa_update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.college import College

# sortBy 값 → ORDER BY. 동률은 등록 순.
_SORT_COLUMNS = {
    "rating": College.rating.desc(),
    "name": College.name.asc(),
    "tuition": College.tuition_fee.asc(),
}


def _escape_like(term: str) -> str:
    """LIKE 와일드카드(%, _)와 이스케이프 문자를 리터럴로 취급."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


async def list_colleges(
    session: AsyncSession,
    *,
    search: str | None = None,
    college_type: str | None = None,
    min_rating: float | None = None,
    sort_by: str | None = None,
) -> list[College]:
    """
    대학 목록. search는 이름 또는 위치 부분 일치(대소문자 무시), type은 정확히 일치,
    min_rating은 이상(포함). 페이지네이션 없음.
    """
    stmt = select(College)
    if search:
        pattern = f"%{_escape_like(search)}%"
        stmt = stmt.where(
            or_(
                College.name.ilike(pattern, escape="\\"),
                College.location.ilike(pattern, escape="\\"),
            )
        )
    if college_type:
        stmt = stmt.where(College.type == college_type)
    if min_rating is not None:
        stmt = stmt.where(College.rating >= min_rating)

    order = _SORT_COLUMNS.get(sort_by or "")
    if order is not None:
        stmt = stmt.order_by(order, College.created_at.asc())
    else:
        stmt = stmt.order_by(College.created_at.asc())

    result = await session.execute(stmt)
    return list(result.scalars())


async def get_by_id(session: AsyncSession, college_id: uuid.UUID) -> College | None:
    """id로 대학 1건 조회."""
    return await session.get(College, college_id)


async def get_by_ids(
    session: AsyncSession, college_ids: set[uuid.UUID]
) -> dict[uuid.UUID, College]:
    """id 집합으로 대학 일괄 조회. 예약·리뷰 응답 합성용 {id: College}."""
    if not college_ids:
        return {}
    result = await session.execute(select(College).where(College.id.in_(college_ids)))
    return {college.id: college for college in result.scalars()}


async def create(session: AsyncSession, **values: Any) -> College:
    college = College(**values)
    session.add(college)
    await session.flush()
    await session.refresh(college)
    return college


async def update(
    session: AsyncSession, college: College, values: dict[str, Any]
) -> College:
    for key, value in values.items():
        setattr(college, key, value)
    await session.flush()
    await session.refresh(college)
    return college


async def set_rating(
    session: AsyncSession, college_id: uuid.UUID, rating: float
) -> None:
    """평균 평점 저장. 대학이 이미 삭제됐으면 0건 갱신."""
    await session.execute(
        sa_update(College).where(College.id == college_id).values(rating=rating)
    )


async def delete_by_id(session: AsyncSession, college_id: uuid.UUID) -> None:
    await session.execute(delete(College).where(College.id == college_id))
