from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.expiry import Clock, now_seconds
from app.services.folder_store import FolderStore
from app.services.message_store import MessageStore
from app.services.share_token_store import ShareTokenStore


def get_clock() -> Clock:
    return now_seconds


def get_folder_store(db: AsyncSession = Depends(get_db), clock: Clock = Depends(get_clock)) -> FolderStore:
    return FolderStore(db, clock)


def get_message_store(db: AsyncSession = Depends(get_db), clock: Clock = Depends(get_clock)) -> MessageStore:
    return MessageStore(db, clock)


def get_share_token_store(db: AsyncSession = Depends(get_db), clock: Clock = Depends(get_clock)) -> ShareTokenStore:
    return ShareTokenStore(db, clock)
