"""Use Case for submitting a new application."""

from typing import Any, Mapping, Optional

from application.use_cases.base_use_case import BaseUseCase
from domain.entities import Application
from domain.enums import ApplicationCategory
from domain.exceptions import ConflictError, UnprocessableError
from domain.repositories import IApplicationRepository, ITeacherRepository
from domain.services import prune_empty


class SubmitApplicationUseCase(BaseUseCase):
    """Create the application of an applicant for a year, exactly once."""

    def __init__(
        self,
        application_repository: IApplicationRepository,
        teacher_repository: ITeacherRepository,
    ):
        super().__init__(application_repository)
        self.teacher_repo = teacher_repository

    async def execute(
        self,
        body: Mapping[str, Any],
        caller_id: Optional[str],
        owner_id: Optional[str] = None,
    ) -> Application:
        """
        Submit an application.

        Args:
            body: Full application document (``applicantId`` and ``year`` required)
            caller_id: Identity recorded as ``createdBy``
            owner_id: Applicant a self-access caller is limited to

        Returns:
            Stored Application with its identifier

        Raises:
            ConflictError: An application for the same applicant and year exists
        """
        applicant_id = body.get("applicantId")
        year = body.get("year")
        if applicant_id is None or year is None:
            raise UnprocessableError("applicantId and year are required.")
        self._check_owner(applicant_id, owner_id)

        existing = await self._store(
            "check existing application",
            self.application_repo.get_by_applicant_and_year(applicant_id, year),
        )
        if existing is not None:
            self.logger.info(f"Application of {applicant_id} for {year} already exists: {existing.id}")
            raise ConflictError(existing_id=existing.id)

        application = Application.from_document(prune_empty(dict(body)))
        application.mark_created(caller_id)
        application = await self._store("create application", self.application_repo.create(application))
        self.logger.info(f"✅ Application {application.id} created by {caller_id}")

        if application.get_category(ApplicationCategory.MENTOR):
            await self._register_mentor_application(application)

        return application

    async def _register_mentor_application(self, application: Application) -> None:
        """Count the new mentor application against the requested teacher."""
        mentor_name = application.mentor_name
        try:
            teacher = await self.teacher_repo.get_by_name(mentor_name) if mentor_name else None
            if teacher is None:
                self.logger.warning(f"Mentor {mentor_name!r} of application {application.id} not found")
                return
            teacher.register_application()
            await self.teacher_repo.update(teacher)
        except Exception as e:
            self.logger.error(f"❌ Failed to register mentor application {application.id}: {str(e)}", exc_info=True)
