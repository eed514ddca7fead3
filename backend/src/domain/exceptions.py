"""Domain exceptions mapped to HTTP status codes by the presentation layer."""

from typing import Optional


class ApplicationError(Exception):
    """Base class for every failure surfaced to a caller."""

    status_code: int = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class ConflictError(ApplicationError):
    """An application for the same applicant and year already exists."""

    status_code = 409

    def __init__(self, message: str = "Application already exists.", existing_id: Optional[int] = None):
        super().__init__(message)
        self.existing_id = existing_id


class NotFoundError(ApplicationError):
    """A record, category or content title is missing."""

    status_code = 404


class UnprocessableError(ApplicationError):
    """Required parameters are missing or invalid."""

    status_code = 422


class UnauthorizedError(ApplicationError):
    """The caller failed the identity or capability check."""

    status_code = 401


class InternalError(ApplicationError):
    """Store or render failure."""

    status_code = 500
