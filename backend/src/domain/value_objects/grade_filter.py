"""Grade filter value object used to select applicants by class."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class GradeFilter:
    """
    Immutable predicate over a student's class label.

    Class labels look like ``无61``: department prefix, then the grade digit,
    then the class number. The grade is the second character of the label.

    Attributes:
        grade: Grade to keep, e.g. "6"
    """

    grade: str

    def __post_init__(self) -> None:
        """Validate grade."""
        if not self.grade or not self.grade.strip():
            raise ValueError("Grade cannot be empty")

    def matches(self, class_name: Optional[str]) -> bool:
        """Check whether a class label belongs to this grade."""
        if not class_name or len(class_name) < 2:
            return False
        return class_name[1] == self.grade.strip()

    def __str__(self) -> str:
        return self.grade
