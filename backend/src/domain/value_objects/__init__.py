"""Domain Value Objects - Immutable objects without identity."""

from .grade_filter import GradeFilter
from .thank_letter import ThankLetter, format_letter_date

__all__ = ["GradeFilter", "ThankLetter", "format_letter_date"]
