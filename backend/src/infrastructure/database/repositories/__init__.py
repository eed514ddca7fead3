"""Repository implementations."""

from .sqlalchemy_application_repository import SQLAlchemyApplicationRepository
from .sqlalchemy_people_repository import (
    SQLAlchemyReviewerRepository,
    SQLAlchemyStudentRepository,
    SQLAlchemyTeacherRepository,
)

__all__ = [
    "SQLAlchemyApplicationRepository",
    "SQLAlchemyStudentRepository",
    "SQLAlchemyTeacherRepository",
    "SQLAlchemyReviewerRepository",
]
