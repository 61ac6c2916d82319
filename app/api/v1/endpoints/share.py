from typing import Optional
from fastapi import APIRouter, Depends, Query

from app.api.deps import get_share_token_store
from app.schemas.folder import FolderPassword
from app.schemas.message import MessageResponse, MessageList, Deleted
from app.services.share_token_store import ShareTokenStore

router = APIRouter()


@router.get("/{token}/messages", response_model=MessageList)
async def read_shared_messages(
    token: str,
    tokens: ShareTokenStore = Depends(get_share_token_store)
):
    """Read a folder's messages through a share token (no password)"""
    share, rows = await tokens.read_via_token(token)
    return MessageList(
        messages=[MessageResponse.model_validate(row) for row in rows],
        expires_at=share.expires_at
    )


@router.delete("/{token}", response_model=Deleted)
async def revoke_share_token(
    token: str,
    body: Optional[FolderPassword] = None,
    password: Optional[str] = Query(None, description="Folder password, when not sent in the body"),
    tokens: ShareTokenStore = Depends(get_share_token_store)
):
    """Revoke a share token (requires the folder password)"""
    supplied = (body.password if body else None) or password or ""
    await tokens.revoke(token, supplied)
    return Deleted(deleted=True)
