"""SeedMarker Repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.seed_marker import SeedMarker


async def exists(session: AsyncSession, name: str) -> bool:
    return await session.get(SeedMarker, name) is not None


async def mark_applied(session: AsyncSession, name: str) -> None:
    """마커 INSERT. 동시 시딩 시 PK 충돌로 IntegrityError."""
    session.add(SeedMarker(name=name))
    await session.flush()
