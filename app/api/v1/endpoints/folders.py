from typing import Optional
from fastapi import APIRouter, Depends, Query

from app.api.deps import get_folder_store, get_message_store, get_share_token_store
from app.schemas.folder import FolderCreate, FolderCreated, FolderPassword, FolderVerified
from app.schemas.message import MessageWrite, MessageResponse, MessageCreated, MessageUpdated, MessageList, Deleted
from app.schemas.share import ShareCreate, ShareCreated
from app.services.folder_store import FolderStore
from app.services.message_store import MessageStore
from app.services.share_token_store import ShareTokenStore

router = APIRouter()


@router.post("", response_model=FolderCreated)
async def create_folder(
    folder_in: FolderCreate,
    folders: FolderStore = Depends(get_folder_store)
):
    """Create a password-protected folder"""
    folder = await folders.create(folder_in.name, folder_in.password, folder_in.years)
    return FolderCreated(id=folder.id, expires_at=folder.expires_at)


@router.post("/{folder_id}/verify", response_model=FolderVerified)
async def verify_folder(
    folder_id: str,
    body: FolderPassword,
    folders: FolderStore = Depends(get_folder_store)
):
    """Check a folder password, used by clients to open a folder"""
    folder = await folders.resolve_authorized(folder_id, body.password)
    return FolderVerified(ok=True, expires_at=folder.expires_at)


@router.post("/{folder_id}/messages", response_model=MessageCreated)
async def add_message(
    folder_id: str,
    body: MessageWrite,
    folders: FolderStore = Depends(get_folder_store),
    messages: MessageStore = Depends(get_message_store)
):
    """Add a message to a folder"""
    folder = await folders.resolve_authorized(folder_id, body.password)
    message = await messages.add(folder, body.content)
    return MessageCreated(id=message.id, created_at=message.created_at)


@router.get("/{folder_id}/messages", response_model=MessageList)
async def list_messages(
    folder_id: str,
    password: str = Query("", description="Folder password"),
    folders: FolderStore = Depends(get_folder_store),
    messages: MessageStore = Depends(get_message_store)
):
    """List a folder's messages, newest first"""
    folder = await folders.resolve_authorized(folder_id, password)
    rows = await messages.list(folder)
    return MessageList(
        messages=[MessageResponse.model_validate(row) for row in rows],
        expires_at=folder.expires_at
    )


@router.put("/{folder_id}/messages/{message_id}", response_model=MessageUpdated)
async def update_message(
    folder_id: str,
    message_id: str,
    body: MessageWrite,
    folders: FolderStore = Depends(get_folder_store),
    messages: MessageStore = Depends(get_message_store)
):
    """Replace the content of a message"""
    folder = await folders.resolve_authorized(folder_id, body.password)
    message = await messages.update(folder, message_id, body.content)
    return MessageUpdated(updated_at=message.updated_at)


@router.delete("/{folder_id}/messages/{message_id}", response_model=Deleted)
async def delete_message(
    folder_id: str,
    message_id: str,
    body: Optional[FolderPassword] = None,
    password: Optional[str] = Query(None, description="Folder password, when not sent in the body"),
    folders: FolderStore = Depends(get_folder_store),
    messages: MessageStore = Depends(get_message_store)
):
    """Delete a message"""
    supplied = (body.password if body else None) or password or ""
    folder = await folders.resolve_authorized(folder_id, supplied)
    await messages.delete(folder, message_id)
    return Deleted(deleted=True)


@router.post("/{folder_id}/share", response_model=ShareCreated)
async def share_folder(
    folder_id: str,
    body: ShareCreate,
    folders: FolderStore = Depends(get_folder_store),
    tokens: ShareTokenStore = Depends(get_share_token_store)
):
    """Mint a password-less, read-only share token for a folder"""
    folder = await folders.resolve_authorized(folder_id, body.password, require_password=True)
    share = await tokens.issue(folder, body.years)
    return ShareCreated(token=share.token, expires_at=share.expires_at)
