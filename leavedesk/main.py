"""
LeaveDesk Backend - Main Application Entry Point
"""
import logging
from urllib.parse import urlparse, urlunparse

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import OperationalError

from leavedesk.api.router import api_router
from leavedesk.core.config import settings
from leavedesk.core.errors import (
    domain_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    generic_exception_handler,
)
from leavedesk.core.exceptions import LeaveDeskError
from leavedesk.core.logging import setup_logging
from leavedesk.db.session import SessionLocal
from leavedesk.services.user_service import ensure_initial_admin

# Setup logging first
setup_logging()
logger = logging.getLogger(__name__)


def _mask_database_url(url: str) -> str:
    """Mask password in DATABASE_URL for safe logging; show full path for sqlite."""
    try:
        parsed = urlparse(url)
    except ValueError:
        return "***"
    if parsed.scheme.startswith("sqlite"):
        return url
    if parsed.password:
        netloc = f"{parsed.username}:****@{parsed.hostname or ''}"
        if parsed.port:
            netloc += f":{parsed.port}"
        return urlunparse(parsed._replace(netloc=netloc))
    return url


app = FastAPI(
    title="LeaveDesk",
    description="Employee onboarding and leave balance accounting",
    version=settings.VERSION or "1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins_list(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)

# Register exception handlers
app.add_exception_handler(LeaveDeskError, domain_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Include all API routes under /api/v1
app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
def startup_log_config() -> None:
    """Log DATABASE_URL at startup so it can be verified against Alembic."""
    logger.info("DATABASE_URL (app): %s", _mask_database_url(settings.DATABASE_URL))


@app.on_event("startup")
def bootstrap_initial_admin() -> None:
    """Create the initial admin account so that employees can be onboarded."""
    db = SessionLocal()
    try:
        ensure_initial_admin(db, settings.INITIAL_ADMIN_USERNAME, settings.INITIAL_ADMIN_PASSWORD)
    except OperationalError as e:
        # Tables are missing until migrations have been applied
        db.rollback()
        logger.warning("Database not ready, skipping initial admin bootstrap: %s", e)
    finally:
        db.close()
