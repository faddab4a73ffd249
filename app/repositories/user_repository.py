"""User Repository. DB 쿼리만 수행."""

import uuid
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User


async def get_by_id(session: AsyncSession, user_id: uuid.UUID) -> User | None:
    """id로 유저 조회."""
    return await session.get(User, user_id)


async def get_by_email(session: AsyncSession, email: str) -> User | None:
    """이메일로 유저 조회. 이메일은 유니크."""
    result = await session.execute(select(User).where(User.email == email))
    return result.scalars().one_or_none()


async def get_by_ids(
    session: AsyncSession, user_ids: set[uuid.UUID]
) -> dict[uuid.UUID, User]:
    """id 집합으로 유저 일괄 조회. 응답 합성용 {id: User}."""
    if not user_ids:
        return {}
    result = await session.execute(select(User).where(User.id.in_(user_ids)))
    return {user.id: user for user in result.scalars()}


async def create(session: AsyncSession, **values: Any) -> User:
    """유저 INSERT 후 flush로 id·타임스탬프 확정."""
    user = User(**values)
    session.add(user)
    await session.flush()
    await session.refresh(user)
    return user


async def update(session: AsyncSession, user: User, values: dict[str, Any]) -> User:
    """전달된 필드만 반영."""
    for key, value in values.items():
        setattr(user, key, value)
    await session.flush()
    await session.refresh(user)
    return user
