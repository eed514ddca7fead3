"""Pydantic schemas for request/response validation."""

from .application_schemas import ApplicationCreateRequest, ApplicationUpdateRequest, CategorySubmission
from .health_schemas import HealthResponse

__all__ = ["ApplicationCreateRequest", "ApplicationUpdateRequest", "CategorySubmission", "HealthResponse"]
