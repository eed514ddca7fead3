"""Thank-you letter value object rendered by the letter pipeline."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Mapping, Optional

LETTER_TITLE_SUFFIX = "感谢信"


def format_letter_date(value: date) -> str:
    """Format a date the way signed letters print it, e.g. 2018年5月16日."""
    return f"{value.year}年{value.month}月{value.day}日"


@dataclass(frozen=True)
class ThankLetter:
    """
    Immutable letter layout data: heading, salutation, then one block per paragraph.

    Attributes:
        title: Heading printed at the top
        salutation: Greeting line, may be empty
        paragraphs: Narrative blocks in order
        department: Signing department
        class_name: Applicant class label, if known
        issued_on: Date printed under the signature
    """

    title: str
    salutation: str = ""
    paragraphs: tuple[str, ...] = field(default_factory=tuple)
    department: str = ""
    class_name: Optional[str] = None
    issued_on: date = field(default_factory=date.today)

    def __post_init__(self) -> None:
        """Validate letter."""
        if not self.title or not self.title.strip():
            raise ValueError("Letter title cannot be empty")

    @classmethod
    def from_submission(
        cls,
        title: str,
        submission: Mapping[str, Any],
        department: str,
        class_name: Optional[str] = None,
        issued_on: Optional[date] = None,
    ) -> "ThankLetter":
        """Build a letter from one ``contents`` entry of a category."""
        content = submission.get("content") or ""
        paragraphs = tuple(line.strip() for line in str(content).split("\n"))
        return cls(
            title=f"{title}{LETTER_TITLE_SUFFIX}",
            salutation=submission.get("salutation") or "",
            paragraphs=paragraphs,
            department=department,
            class_name=class_name,
            issued_on=issued_on or date.today(),
        )

    @property
    def formatted_date(self) -> str:
        return format_letter_date(self.issued_on)
