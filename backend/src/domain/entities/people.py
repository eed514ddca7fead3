"""Identity records the application core reads: students, teachers and reviewers."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Student:
    """Applicant identity, looked up by external student id."""

    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    class_name: Optional[str] = None


@dataclass
class Teacher:
    """
    Teacher who may be requested as a mentor.

    ``total_applications`` counts mentor applications naming this teacher.
    """

    id: int
    name: str
    email: Optional[str] = None
    total_applications: int = 0
    authorizations: list[str] = field(default_factory=list)

    def register_application(self) -> None:
        """Count one more mentor application."""
        self.total_applications += 1


@dataclass
class Reviewer:
    """Department staff member reviewing applications."""

    id: int
    name: str
    authorizations: list[str] = field(default_factory=list)
