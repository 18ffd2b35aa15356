"""FastAPI application — main entry point."""

import structlog
import uvicorn
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.infrastructure.database import engine, Base
from app.core.logging import configure_logging
from app.core.middleware import setup_middleware
from app.core.exceptions import (
    AppError,
    global_exception_handler,
    request_validation_exception_handler,
)

# Import all models so SQLAlchemy knows about them
from app.domain.models.user import User  # noqa: F401

from app.interfaces.api.users import router as users_router

settings = get_settings()

APP_NAME = "User Registry"
APP_VERSION = "1.0.0"

configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting User Registry...", env=settings.ENVIRONMENT)

    # No migrations: the schema is created on startup
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified", url=engine.url.render_as_string(hide_password=True))

    yield

    engine.dispose()
    logger.info("User Registry stopped")


app = FastAPI(
    title=APP_NAME,
    description="API Backend — user registration with unique email and phone",
    version=APP_VERSION,
    lifespan=lifespan,
)

# Correlation ID + request logging
setup_middleware(app)

# Exception handling
app.add_exception_handler(AppError, global_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
# Last resort for failures outside RequestLoggingMiddleware
app.add_exception_handler(Exception, global_exception_handler)

# CORS outermost, so preflight requests never reach the app
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)

app.include_router(users_router)


@app.get("/")
def root():
    return {
        "name": APP_NAME,
        "version": APP_VERSION,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)
