"""Exception handlers: every failure is a status code plus short text."""

from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from domain.exceptions import ApplicationError, ConflictError
from infrastructure.config import get_logger

logger = get_logger(__name__)


def error_text(status_code: int, message: str) -> str:
    """E.g. ``404 Not Found: Application does not exist.``"""
    phrase = HTTPStatus(status_code).phrase
    return f"{status_code} {phrase}: {message}" if message else f"{status_code} {phrase}."


async def application_error_handler(request: Request, exc: ApplicationError) -> PlainTextResponse:
    """Map domain exceptions to plain text responses."""
    headers = {}
    if isinstance(exc, ConflictError) and exc.existing_id is not None:
        headers["Location"] = str(request.url_for("get_application", application_id=exc.existing_id))
    
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    
    return PlainTextResponse(error_text(exc.status_code, exc.message), status_code=exc.status_code, headers=headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    """Missing or malformed parameters."""
    logger.info(f"{request.method} {request.url.path} rejected: {exc.errors()}")
    return PlainTextResponse(error_text(422, "Missing queries."), status_code=422)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
