"""
Exception handlers.

Every error leaves the API as ``{"error": "<message>"}``. Request validation
failures are reported as 400 with the validation message, storage failures
as a generic 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


def _format_validation_error(exc: RequestValidationError) -> str:
    messages = []
    for err in exc.errors():
        # Drop the leading "body"/"query" location segment
        field = ".".join(str(part) for part in err.get("loc", ())[1:])
        messages.append(f"{field}: {err['msg']}" if field else err["msg"])
    return "; ".join(messages) or "Invalid input data"


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail},
                        headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST,
                        content={"error": _format_validation_error(exc)})


async def storage_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("Storage failure on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                        content={"error": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the shared error handlers on an application."""
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, storage_exception_handler)
