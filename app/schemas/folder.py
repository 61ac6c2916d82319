from pydantic import BaseModel, Field
from typing import Optional

from app.core.expiry import MAX_EXPIRE_YEARS


class FolderCreate(BaseModel):
    name: Optional[str] = ""
    password: Optional[str] = None
    years: Optional[float] = Field(
        None,
        allow_inf_nan=False,
        le=MAX_EXPIRE_YEARS,
        description="Lifetime in years; missing or non-positive means the default"
    )


class FolderCreated(BaseModel):
    id: str
    expires_at: int


class FolderPassword(BaseModel):
    password: Optional[str] = None


class FolderVerified(BaseModel):
    ok: bool = True
    expires_at: int
