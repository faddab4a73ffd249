"""데모 데이터 시딩 (서버 밖에서 1회 실행). seed_markers 마커가 있으면 아무것도 하지 않음.

사용: python scripts/seed_demo.py   (alembic upgrade head 이후)
"""
import asyncio
import logging
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.database import get_engine, init_db, verify_db_connection
from app.services.seed_service import seed_demo_data

logger = logging.getLogger("seed_demo")


async def main() -> int:
    init_db()
    if get_engine() is None:
        logger.error("DATABASE_URL not set. Nothing to seed.")
        return 1
    await verify_db_connection()
    try:
        applied = await seed_demo_data()
    finally:
        await get_engine().dispose()
    logger.info("Seed %s", "applied" if applied else "skipped (already applied)")
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    if sys.platform == "win32":
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())
    sys.exit(asyncio.run(main()))
