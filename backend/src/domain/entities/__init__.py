"""Domain Entities - Objects with identity."""

from .application import Application
from .people import Reviewer, Student, Teacher

__all__ = ["Application", "Student", "Teacher", "Reviewer"]
