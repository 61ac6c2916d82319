import logging
import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFound, Unauthorized, InvalidRequest
from app.core.expiry import Clock, expires_after, is_expired, now_seconds
from app.core.security import get_password_hash, verify_password
from app.models.folder import Folder

logger = logging.getLogger(__name__)

FOLDER_NOT_FOUND = "Folder not found or expired"


class FolderStore:
    """Folder records and the password gate in front of everything scoped to a folder"""

    def __init__(self, db: AsyncSession, clock: Clock = now_seconds):
        self.db = db
        self.clock = clock

    async def create(self, name: Optional[str], password: Optional[str], years: Optional[float] = None) -> Folder:
        if not password:
            raise InvalidRequest("Password required")

        now = self.clock()
        folder = Folder(
            id=str(uuid.uuid4()),
            name=name or "",
            password_hash=get_password_hash(password),
            created_at=now,
            expires_at=expires_after(now, years),
        )
        self.db.add(folder)
        await self.db.commit()

        logger.info(f"Created folder {folder.id} expiring at {folder.expires_at}")
        return folder

    async def get(self, folder_id: str) -> Optional[Folder]:
        result = await self.db.execute(select(Folder).where(Folder.id == folder_id))
        return result.scalar_one_or_none()

    async def get_active(self, folder_id: str) -> Folder:
        """Return the folder, treating an expired one exactly like a missing one"""
        folder = await self.get(folder_id)
        if folder is None or is_expired(folder.expires_at, self.clock()):
            raise NotFound(FOLDER_NOT_FOUND)
        return folder

    async def resolve_authorized(
        self, folder_id: str, password: Optional[str], require_password: bool = False
    ) -> Folder:
        """Existence and expiry first, then the password.

        With ``require_password`` a missing password is rejected as an invalid
        request before it is checked against the hash.
        """
        folder = await self.get_active(folder_id)
        if require_password and not password:
            raise InvalidRequest("Password required")
        self.authorize(folder, password)
        return folder

    def authorize(self, folder: Folder, password: Optional[str]) -> None:
        if not verify_password(password or "", folder.password_hash):
            logger.warning(f"Rejected password for folder {folder.id}")
            raise Unauthorized("Bad password")
