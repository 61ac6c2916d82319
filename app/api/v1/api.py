from fastapi import APIRouter
from app.api.v1.endpoints import folders, share, maintenance

api_router = APIRouter()

api_router.include_router(folders.router, prefix="/folders", tags=["folders"])
api_router.include_router(share.router, prefix="/share", tags=["share"])
api_router.include_router(maintenance.router, tags=["maintenance"])
