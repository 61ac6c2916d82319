from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_clock
from app.core.database import get_db
from app.core.expiry import Clock
from app.schemas.share import SweepResult
from app.services.sweeper import sweep_expired

router = APIRouter()


@router.post("/cleanup", response_model=SweepResult)
async def cleanup(db: AsyncSession = Depends(get_db), clock: Clock = Depends(get_clock)):
    """Remove expired folders and their messages"""
    return await sweep_expired(db, clock)
