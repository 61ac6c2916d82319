import logging
import secrets
from typing import List, Optional, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFound
from app.core.expiry import Clock, expires_after, is_expired, now_seconds
from app.models.folder import Folder
from app.models.message import Message
from app.models.share_token import ShareToken
from app.services.folder_store import FolderStore
from app.services.message_store import MessageStore

logger = logging.getLogger(__name__)

TOKEN_NOT_FOUND = "Share token not found or expired"


def generate_token() -> str:
    return secrets.token_urlsafe(32)


class ShareTokenStore:
    """Bearer tokens granting read-only access to a folder's messages.

    A token is a capability: reading through it checks only the token's own
    existence and expiry, never the folder password or the folder's expiry.
    Revoking it requires the folder password.
    """

    def __init__(self, db: AsyncSession, clock: Clock = now_seconds):
        self.db = db
        self.clock = clock
        self.folders = FolderStore(db, clock)
        self.messages = MessageStore(db, clock)

    async def issue(self, folder: Folder, years: Optional[float] = None) -> ShareToken:
        share = ShareToken(
            token=generate_token(),
            folder_id=folder.id,
            expires_at=expires_after(self.clock(), years),
        )
        self.db.add(share)
        await self.db.commit()

        logger.info(f"Issued share token for folder {folder.id} expiring at {share.expires_at}")
        return share

    async def get(self, token: str) -> Optional[ShareToken]:
        result = await self.db.execute(select(ShareToken).where(ShareToken.token == token))
        return result.scalar_one_or_none()

    async def get_active(self, token: str) -> ShareToken:
        share = await self.get(token)
        if share is None or is_expired(share.expires_at, self.clock()):
            raise NotFound(TOKEN_NOT_FOUND)
        return share

    async def read_via_token(self, token: str) -> Tuple[ShareToken, List[Message]]:
        share = await self.get_active(token)
        return share, await self.messages.list_for_folder(share.folder_id)

    async def revoke(self, token: str, password: Optional[str]) -> bool:
        # Expired tokens are still found here so their owner can remove them
        share = await self.get(token)
        if share is None:
            raise NotFound("Token not found")

        folder = await self.folders.get(share.folder_id)
        if folder is None:
            raise NotFound("Folder not found")
        self.folders.authorize(folder, password)

        await self.db.delete(share)
        await self.db.commit()

        logger.info(f"Revoked share token for folder {folder.id}")
        return True
