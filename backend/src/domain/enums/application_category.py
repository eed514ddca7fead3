"""Application categories tracked inside one application record."""

from enum import Enum


class ApplicationCategory(str, Enum):
    """Independent benefit or mentor tracks of an application."""

    HONOR = "honor"
    SCHOLARSHIP = "scholarship"
    FINANCIAL_AID = "financialAid"
    MENTOR = "mentor"

    @property
    def has_single_status(self) -> bool:
        """Mentor applications name exactly one mentor in their status map."""
        return self is ApplicationCategory.MENTOR

    @property
    def supports_letters(self) -> bool:
        """Only funded categories produce thank-you letters and e-forms."""
        return self in (ApplicationCategory.SCHOLARSHIP, ApplicationCategory.FINANCIAL_AID)

    @classmethod
    def keys(cls) -> tuple[str, ...]:
        """Document keys of all categories, in declaration order."""
        return tuple(category.value for category in cls)

    def __str__(self) -> str:
        return self.value
