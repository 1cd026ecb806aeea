"""
Central error handling for LeaveDesk
"""
import logging
from http import HTTPStatus

from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi import HTTPException

from leavedesk.core.config import settings
from leavedesk.core.exceptions import LeaveDeskError

logger = logging.getLogger(__name__)


def _error_body(request: Request, status_code: int, title: str, detail, **extra) -> dict:
    body = {
        "error": True,
        "status_code": status_code,
        "title": title,
        "detail": detail,
        "path": str(request.url.path),
    }
    body.update(extra)
    return body


def _phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """
    Handle HTTPException with consistent JSON response format

    Args:
        request: FastAPI request object
        exc: HTTPException instance

    Returns:
        JSONResponse with error details
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, exc.status_code, _phrase(exc.status_code), exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def domain_exception_handler(request: Request, exc: LeaveDeskError) -> JSONResponse:
    """
    Map service-layer errors to their HTTP status

    Authorization, approver and balance failures are logged at WARNING; they
    are expected outcomes of a request, not server faults.
    """
    logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, exc.status_code, exc.title, exc.message),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle RequestValidationError with consistent JSON response format

    Does not leak internal validation details in production.
    """
    if settings.APP_ENV == "prod":
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_body(request, 422, "Validation Error", "Validation error: Invalid request data"),
        )

    # Sanitize for JSON: ctx.error may hold a ValueError instance
    errors = []
    for e in exc.errors():
        err = dict(e)
        if "ctx" in err and isinstance(err["ctx"], dict):
            err["ctx"] = {
                k: (str(v) if not isinstance(v, (str, int, float, bool, type(None))) else v)
                for k, v in err["ctx"].items()
            }
        errors.append(err)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=_error_body(request, 422, "Validation Error", "Validation error", errors=errors),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected exceptions with consistent JSON response format

    Does not leak internal error details in production.
    """
    logger.error("Unhandled exception: %s", exc, exc_info=True)

    if settings.APP_ENV == "prod":
        detail = "An unexpected error occurred"
    else:
        detail = str(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(request, 500, "Server Error", detail),
    )
