"""Use Case for amending an application with a partial update."""

from typing import Any, Mapping, Optional

from application.dto import AmendmentResult
from application.use_cases.base_use_case import BaseUseCase
from domain.entities import Application
from domain.exceptions import ConflictError, NotFoundError
from domain.repositories import IApplicationRepository
from domain.services import merge_application_document, prune_empty


class AmendApplicationUseCase(BaseUseCase):
    """
    Merge a partial update into a stored application.

    Status maps in the patch replace the stored ones; contents and
    attachments are merged title by title. When the target does not exist the
    patch either becomes a new record or fails with NotFoundError, depending
    on ``creates_missing``.
    """

    def __init__(
        self,
        application_repository: IApplicationRepository,
        creates_missing: bool = True,
    ):
        super().__init__(application_repository)
        self.creates_missing = creates_missing
    async def execute(
        self,
        application_id: int,
        patch: Mapping[str, Any],
        caller_id: Optional[str],
        owner_id: Optional[str] = None,
    ) -> AmendmentResult:
        """
        Amend an application.

        Args:
            application_id: Target application
            patch: Partial application document
            caller_id: Identity recorded as ``updatedBy``
            owner_id: Applicant a self-access caller is limited to

        Returns:
            AmendmentResult with the stored record and whether it was created

        Raises:
            ConflictError: The patch moves the record onto another record's applicant and year
        """
        application = await self._store("load application", self.application_repo.get_by_id(application_id))

        if application is None:
            if not self.creates_missing:
                raise NotFoundError("Application does not exist.")
            self._check_owner(patch.get("applicantId"), owner_id)
            self.logger.info(f"Application {application_id} not found, creating from patch")
            created = await self._create_from_patch(patch, caller_id)
            return AmendmentResult(application=created, created=True)

        self._check_owner(application.applicant_id, owner_id)
        previous_key = (application.applicant_id, application.year)

        merged = merge_application_document(application.to_document(), patch)
        application.apply_document(merged)
        self._check_owner(application.applicant_id, owner_id)
        if (application.applicant_id, application.year) != previous_key:
            await self._ensure_unique(application.applicant_id, application.year, application.id)
        application.mark_updated(caller_id)

        application = await self._store("update application", self.application_repo.update(application))
        self.logger.info(f"✅ Application {application.id} updated by {caller_id}")
        return AmendmentResult(application=application, created=False)

    async def _ensure_unique(self, applicant_id: Any, year: Any, own_id: Optional[int] = None) -> None:
        """Raise ConflictError when another record holds this applicant and year."""
        if applicant_id is None or year is None:
            return
        existing = await self._store(
            "check existing application",
            self.application_repo.get_by_applicant_and_year(applicant_id, year),
        )
        if existing is not None and existing.id != own_id:
            self.logger.info(f"Application of {applicant_id} for {year} already exists: {existing.id}")
            raise ConflictError(existing_id=existing.id)

    async def _create_from_patch(self, patch: Mapping[str, Any], caller_id: Optional[str]) -> Application:
        await self._ensure_unique(patch.get("applicantId"), patch.get("year"))

        application = Application.from_document(prune_empty(dict(patch)))
        application.mark_created(caller_id)
        return await self._store("create application", self.application_repo.create(application))
