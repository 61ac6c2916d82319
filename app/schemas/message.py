from pydantic import BaseModel
from typing import Optional, List


class MessageWrite(BaseModel):
    password: Optional[str] = None
    content: Optional[str] = None


class MessageResponse(BaseModel):
    id: str
    content: str
    created_at: int
    updated_at: int

    class Config:
        from_attributes = True


class MessageCreated(BaseModel):
    id: str
    created_at: int


class MessageUpdated(BaseModel):
    updated_at: int


class MessageList(BaseModel):
    messages: List[MessageResponse] = []
    expires_at: int


class Deleted(BaseModel):
    deleted: bool = True
