"""Database infrastructure module."""

from .session import get_session, new_session, init_db, close_db
from .models import ApplicationModel, StudentModel, TeacherModel, ReviewerModel

__all__ = [
    "get_session",
    "new_session",
    "init_db",
    "close_db",
    "ApplicationModel",
    "StudentModel",
    "TeacherModel",
    "ReviewerModel",
]
