"""Use Cases for reading applications."""

from typing import Any, Optional

from application.use_cases.base_use_case import BaseUseCase, resolve_category, resolve_grade
from domain.exceptions import NotFoundError, UnauthorizedError, UnprocessableError


class GetApplicationUseCase(BaseUseCase):
    """Read one application."""

    async def execute(
        self,
        application_id: int,
        application_type: Optional[str] = None,
        owner_id: Optional[str] = None,
    ) -> dict[str, Any]:
        category = resolve_category(application_type)
        application = await self._store("load application", self.application_repo.get_by_id(application_id))
        if application is None:
            raise NotFoundError("Application does not exist.")
        self._check_owner(application.applicant_id, owner_id)
        return application.project(category)


class ListApplicationsUseCase(BaseUseCase):
    """List applications with filters and 1-based inclusive pagination."""

    async def execute(
        self,
        filters: Optional[dict[str, Any]] = None,
        application_type: Optional[str] = None,
        teacher_name: Optional[str] = None,
        applicant_grade: Optional[str] = None,
        begin: int = 1,
        end: Optional[int] = None,
        owner_id: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        """
        List applications.

        Args:
            filters: Equality filters on applicantId, applicantName or year
            application_type: Only return this category; rows without it are dropped
            teacher_name: Keep mentor applications naming this teacher
            applicant_grade: Keep applicants whose class is in this grade
            begin: First record, 1-based
            end: Last record, inclusive
            owner_id: Applicant a self-access caller is limited to; replaces any applicantId filter

        Returns:
            Projected rows, each with the applicant's ``class`` when known
        """
        category = resolve_category(application_type)
        grade_filter = resolve_grade(applicant_grade) if applicant_grade else None
        if begin < 1 or (end is not None and end < begin):
            raise UnprocessableError("Invalid range.")

        filters = dict(filters or {})
        if owner_id is not None:
            try:
                filters["applicantId"] = int(owner_id)
            except ValueError:
                raise UnauthorizedError("Provide valid x-access-id or re-request with authorized identity.")

        limit = end - begin + 1 if end is not None else None
        applications = await self._store(
            "list applications",
            self.application_repo.find(filters, skip=begin - 1, limit=limit),
        )

        classes: dict[int, Optional[str]] = {}
        rows = []
        for application in applications:
            if category is not None and not application.get_category(category):
                continue
            if teacher_name and application.mentor_name != teacher_name:
                continue

            class_name = await self._class_of(application.applicant_id, classes)
            if grade_filter is not None and not grade_filter.matches(class_name):
                continue

            row = application.project(category)
            if class_name is not None:
                row["class"] = class_name
            rows.append(row)

        return rows


class DeleteApplicationUseCase(BaseUseCase):
    """Administrative hard delete."""

    async def execute(self, application_id: int) -> None:
        deleted = await self._store("delete application", self.application_repo.delete(application_id))
        if not deleted:
            raise NotFoundError("Application does not exist.")
        self.logger.info(f"Application {application_id} deleted")
