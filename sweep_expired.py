#!/usr/bin/env python3
"""
Purge expired folders and their messages.

Meant to be run serially by an external scheduler (cron, systemd timer).
"""
import asyncio
import logging

from app.core.config import settings
from app.core.database import Database
from app.services.sweeper import sweep_expired

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def main() -> dict:
    database = Database.from_url(settings.DATABASE_URL)
    try:
        async with database.session_factory() as session:
            return await sweep_expired(session)
    finally:
        await database.close()


if __name__ == "__main__":
    counts = asyncio.run(main())
    logger.info(f"Done: {counts}")
