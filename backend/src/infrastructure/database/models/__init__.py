"""SQLAlchemy ORM models."""

from .application_model import ApplicationModel
from .people_model import StudentModel, TeacherModel, ReviewerModel

__all__ = ["ApplicationModel", "StudentModel", "TeacherModel", "ReviewerModel"]
