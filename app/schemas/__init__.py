from .folder import FolderCreate, FolderCreated, FolderPassword, FolderVerified
from .message import MessageWrite, MessageResponse, MessageCreated, MessageUpdated, MessageList, Deleted
from .share import ShareCreate, ShareCreated, SweepResult

__all__ = [
    "FolderCreate", "FolderCreated", "FolderPassword", "FolderVerified",
    "MessageWrite", "MessageResponse", "MessageCreated", "MessageUpdated", "MessageList", "Deleted",
    "ShareCreate", "ShareCreated", "SweepResult"
]
