"""Application aggregate: one applicant's record for one year across all categories."""

import copy
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional, Union

from domain.enums import ApplicationCategory

CategoryKey = Union[ApplicationCategory, str]

_CATEGORY_ATTRIBUTES = {
    ApplicationCategory.HONOR: "honor",
    ApplicationCategory.SCHOLARSHIP: "scholarship",
    ApplicationCategory.FINANCIAL_AID: "financial_aid",
    ApplicationCategory.MENTOR: "mentor",
}


@dataclass
class Application:
    """
    Entity holding up to four independent category sub-applications.

    Each category is a document with three parts: ``status`` (key -> label),
    ``contents`` (title -> submission) and ``attachments`` (title -> filenames).
    Category documents are kept in their stored JSON shape so that partial
    updates can be merged without a lossy round trip.
    """

    id: Optional[int] = None
    applicant_id: Optional[int] = None
    applicant_name: Optional[str] = None
    year: Optional[int] = None

    honor: Optional[dict] = None
    scholarship: Optional[dict] = None
    financial_aid: Optional[dict] = None
    mentor: Optional[dict] = None

    created_at: datetime = field(default_factory=datetime.utcnow)
    created_by: Optional[str] = None
    updated_at: datetime = field(default_factory=datetime.utcnow)
    updated_by: Optional[str] = None

    def get_category(self, category: CategoryKey) -> Optional[dict]:
        """Get a category sub-application, or None when absent."""
        return getattr(self, _CATEGORY_ATTRIBUTES[ApplicationCategory(category)])

    def set_category(self, category: CategoryKey, data: Optional[dict]) -> None:
        """Replace a category sub-application."""
        setattr(self, _CATEGORY_ATTRIBUTES[ApplicationCategory(category)], data or None)

    def present_categories(self) -> list[ApplicationCategory]:
        """Categories present on this record."""
        return [category for category in ApplicationCategory if self.get_category(category)]

    def get_status(self, category: CategoryKey) -> dict[str, str]:
        sub_application = self.get_category(category) or {}
        return dict(sub_application.get("status") or {})

    def get_contents(self, category: CategoryKey) -> dict[str, Any]:
        sub_application = self.get_category(category) or {}
        return dict(sub_application.get("contents") or {})

    def get_attachments(self, category: CategoryKey) -> dict[str, list[str]]:
        sub_application = self.get_category(category) or {}
        return dict(sub_application.get("attachments") or {})

    def get_submission(self, category: CategoryKey, title: str) -> Optional[Any]:
        """Get the content entry stored under a title, or None."""
        return self.get_contents(category).get(title)

    @property
    def mentor_name(self) -> Optional[str]:
        """Name of the requested mentor (the single key of the mentor status map)."""
        status = self.get_status(ApplicationCategory.MENTOR)
        return next(iter(status), None)

    @property
    def mentor_status(self) -> Optional[str]:
        """Current label of the mentor request."""
        status = self.get_status(ApplicationCategory.MENTOR)
        return next(iter(status.values()), None)

    def project(self, category: Optional[CategoryKey] = None) -> dict[str, Any]:
        """
        Build the read view returned to callers.

        Args:
            category: Restrict the view to one category. An absent category
                is left out of the result rather than reported.

        Returns:
            Dictionary with identity fields and the selected categories
        """
        view: dict[str, Any] = {
            "id": self.id,
            "applicantId": self.applicant_id,
            "applicantName": self.applicant_name,
        }
        if category is None:
            for key in ApplicationCategory:
                view[key.value] = copy.deepcopy(self.get_category(key))
            return view

        selected = ApplicationCategory(category)
        sub_application = self.get_category(selected)
        if sub_application:
            view[selected.value] = copy.deepcopy(sub_application)
        return view

    def to_document(self) -> dict[str, Any]:
        """Mergeable document form (identity, applicant fields and categories)."""
        document: dict[str, Any] = {
            "applicantId": self.applicant_id,
            "applicantName": self.applicant_name,
            "year": self.year,
        }
        for category in ApplicationCategory:
            sub_application = self.get_category(category)
            if sub_application:
                document[category.value] = copy.deepcopy(sub_application)
        return document

    def apply_document(self, document: Mapping[str, Any]) -> None:
        """Overwrite applicant fields and categories from a merged document."""
        self.applicant_id = document.get("applicantId")
        self.applicant_name = document.get("applicantName")
        self.year = document.get("year")
        for category in ApplicationCategory:
            sub_application = document.get(category.value)
            self.set_category(category, copy.deepcopy(sub_application) if isinstance(sub_application, Mapping) else None)

    @classmethod
    def from_document(cls, document: Mapping[str, Any], **kwargs: Any) -> "Application":
        """Create an application from a request body or stored document."""
        application = cls(**kwargs)
        application.apply_document(document)
        return application

    def mark_created(self, created_by: Optional[str]) -> None:
        """Stamp creation audit fields."""
        now = datetime.utcnow()
        self.created_at = now
        self.created_by = created_by
        self.updated_at = now

    def mark_updated(self, updated_by: Optional[str]) -> None:
        """Stamp update audit fields."""
        self.updated_at = datetime.utcnow()
        self.updated_by = updated_by

    def __str__(self) -> str:
        return f"Application(id={self.id}, applicant_id={self.applicant_id}, year={self.year})"
