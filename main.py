import logging
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from jobboard.core.config import settings
from jobboard.core.database import init_db
from jobboard.core.logging_config import setup_logging
from jobboard.api.endpoints import health, jobs, users

setup_logging(settings.LOG_LEVEL, settings.JSON_LOGS)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    logger.info(f"Starting up {settings.PROJECT_NAME}...")
    init_db()
    logger.info("Database initialized successfully")

    yield

    logger.info(f"Shutting down {settings.PROJECT_NAME}...")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report invalid request payloads and parameters as 400 Bad Request."""
    logger.info(f"Rejected invalid request to {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(auth_enabled: Optional[bool] = None) -> FastAPI:
    """
    Build the API application.

    With auth enabled every /api/jobs route requires a bearer token and the
    /api/users routes are mounted. Without it the job routes are open.
    """
    if auth_enabled is None:
        auth_enabled = settings.AUTH_ENABLED

    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="REST API for managing job postings",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Read by BearerProtectedRoute on every /api/jobs request
    application.state.auth_enabled = auth_enabled

    application.include_router(health.router)
    application.include_router(jobs.router, prefix=settings.API_PREFIX)
    if auth_enabled:
        application.include_router(users.router, prefix=settings.API_PREFIX)

    @application.get("/")
    async def root():
        """Root endpoint - API health check"""
        return {
            "message": settings.PROJECT_NAME,
            "version": settings.VERSION,
            "auth_enabled": auth_enabled,
            "status": "healthy"
        }

    logger.info(f"Application created (auth_enabled={auth_enabled})")
    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,  # Enable auto-reload during development
        log_level="info"
    )
