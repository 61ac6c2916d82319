import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.database import Database
from app.core.exceptions import NotFound, Unauthorized, InvalidRequest
from app.api.v1.api import api_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    # Note: Alembic migrations own the schema; create_all only fills in a fresh database
    database = Database.from_url(settings.DATABASE_URL)
    await database.create_all()
    app.state.database = database
    if settings.DEBUG:
        logger.info(f"Tables: {', '.join(await database.table_names())}")
    logger.info("Folder Vault API started")
    yield
    # Shutdown
    await database.close()


app = FastAPI(
    title="Folder Vault API",
    description="Password-protected, self-expiring message folders with revocable share links",
    version="1.0.0",
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add trusted host middleware for production
if not settings.DEBUG:
    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=settings.allowed_hosts_list
    )


def _error(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


@app.exception_handler(InvalidRequest)
async def invalid_request_handler(request: Request, exc: InvalidRequest):
    return _error(status.HTTP_400_BAD_REQUEST, exc.detail)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    # Field errors only: never echo the submitted body, it may hold a password
    fields = sorted({".".join(str(part) for part in error["loc"][1:]) for error in exc.errors()})
    return _error(status.HTTP_400_BAD_REQUEST, f"Invalid fields: {', '.join(fields)}" if fields else "Invalid request")


@app.exception_handler(Unauthorized)
async def unauthorized_handler(request: Request, exc: Unauthorized):
    return _error(status.HTTP_401_UNAUTHORIZED, exc.detail)


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound):
    return _error(status.HTTP_404_NOT_FOUND, exc.detail)


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")


# Include API router
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    return {"message": "Folder Vault API", "version": "1.0.0"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        proxy_headers=True,
        forwarded_allow_ips="*"
    )
