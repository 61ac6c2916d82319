import logging
import uuid
from typing import List, Optional

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFound, InvalidRequest
from app.core.expiry import Clock, now_seconds
from app.models.folder import Folder
from app.models.message import Message

logger = logging.getLogger(__name__)

MESSAGE_NOT_FOUND = "Message not found"


class MessageStore:
    """Messages of a folder. Every method expects a folder already passed
    through FolderStore.resolve_authorized."""

    def __init__(self, db: AsyncSession, clock: Clock = now_seconds):
        self.db = db
        self.clock = clock

    async def add(self, folder: Folder, content: Optional[str]) -> Message:
        if not content:
            raise InvalidRequest("Content required")

        now = self.clock()
        message = Message(
            id=str(uuid.uuid4()),
            folder_id=folder.id,
            content=content,
            created_at=now,
            updated_at=now,
        )
        self.db.add(message)
        await self.db.commit()

        logger.info(f"Added message {message.id} to folder {folder.id}")
        return message

    async def list(self, folder: Folder) -> List[Message]:
        return await self.list_for_folder(folder.id)

    async def list_for_folder(self, folder_id: str) -> List[Message]:
        """Newest first"""
        result = await self.db.execute(
            select(Message)
            .where(Message.folder_id == folder_id)
            .order_by(Message.created_at.desc())
        )
        return list(result.scalars().all())

    async def _get_scoped(self, folder: Folder, message_id: str) -> Message:
        # The folder id is part of the key so ids from another folder never match
        result = await self.db.execute(
            select(Message).where(and_(Message.id == message_id, Message.folder_id == folder.id))
        )
        message = result.scalar_one_or_none()
        if message is None:
            raise NotFound(MESSAGE_NOT_FOUND)
        return message

    async def update(self, folder: Folder, message_id: str, content: Optional[str]) -> Message:
        if not content:
            raise InvalidRequest("Content required")

        message = await self._get_scoped(folder, message_id)
        message.content = content
        message.updated_at = self.clock()
        await self.db.commit()
        return message

    async def delete(self, folder: Folder, message_id: str) -> bool:
        message = await self._get_scoped(folder, message_id)
        await self.db.delete(message)
        await self.db.commit()

        logger.info(f"Deleted message {message_id} from folder {folder.id}")
        return True
