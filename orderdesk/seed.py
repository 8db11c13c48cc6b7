import asyncio
import logging

from .catalog.service import seed_catalog
from .common.config import settings
from .common.database import close_db, init_db

log = logging.getLogger(__name__)


async def amain() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL)
    await init_db(settings.DB_URL)
    try:
        added = await seed_catalog()
    finally:
        await close_db()
    log.info("Seed complete. Added %s items.", added)


if __name__ == "__main__":
    asyncio.run(amain())
