from .folder import Folder
from .message import Message
from .share_token import ShareToken

__all__ = ["Folder", "Message", "ShareToken"]
