from pydantic import BaseModel, Field
from typing import Optional

from app.core.expiry import MAX_EXPIRE_YEARS


class ShareCreate(BaseModel):
    password: Optional[str] = None
    years: Optional[float] = Field(None, allow_inf_nan=False, le=MAX_EXPIRE_YEARS)


class ShareCreated(BaseModel):
    token: str
    expires_at: int


class SweepResult(BaseModel):
    deleted_messages: int
    deleted_folders: int
