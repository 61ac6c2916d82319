import logging
from typing import Dict

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.expiry import Clock, now_seconds
from app.models.folder import Folder
from app.models.message import Message

logger = logging.getLogger(__name__)


async def sweep_expired(db: AsyncSession, clock: Clock = now_seconds) -> Dict[str, int]:
    """Purge expired folders and their messages.

    Messages go first so an interruption never leaves messages pointing at a
    deleted folder. Share tokens are left alone. Should be run serially; a
    second run with no time passing deletes nothing.
    """
    now = clock()
    expired_ids = select(Folder.id).where(Folder.expires_at <= now)

    deleted_messages = await db.execute(
        delete(Message)
        .where(Message.folder_id.in_(expired_ids))
        .execution_options(synchronize_session=False)
    )
    deleted_folders = await db.execute(
        delete(Folder)
        .where(Folder.expires_at <= now)
        .execution_options(synchronize_session=False)
    )
    await db.commit()

    counts = {
        "deleted_messages": deleted_messages.rowcount,
        "deleted_folders": deleted_folders.rowcount,
    }
    logger.info(f"Sweep removed {counts['deleted_messages']} messages and {counts['deleted_folders']} folders")
    return counts
