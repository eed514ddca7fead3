"""Domain Repository Interfaces - Abstract definitions."""

from .application_repository import IApplicationRepository
from .people_repository import IReviewerRepository, IStudentRepository, ITeacherRepository

__all__ = [
    "IApplicationRepository",
    "IStudentRepository",
    "ITeacherRepository",
    "IReviewerRepository",
]
