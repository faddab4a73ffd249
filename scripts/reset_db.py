"""DB 초기화 (DROP SCHEMA public). 개발용. 이후 alembic upgrade head 필요."""
import asyncio
import logging
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy import text

from app.core.database import get_engine, init_db, transaction

logger = logging.getLogger("reset_db")


async def reset_database() -> None:
    init_db()
    if get_engine() is None:
        raise SystemExit("DATABASE_URL not set.")
    logger.info("Dropping schema public...")
    try:
        async with transaction() as session:
            await session.execute(text("DROP SCHEMA public CASCADE"))
            await session.execute(text("CREATE SCHEMA public"))
    finally:
        await get_engine().dispose()
    logger.info("Database reset. Run `alembic upgrade head` next.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    if sys.platform.startswith("win"):
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())
    asyncio.run(reset_database())
