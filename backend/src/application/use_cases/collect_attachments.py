"""Use Cases for downloading submitted attachment files (e-forms)."""

import asyncio
import mimetypes
from pathlib import Path
from typing import Optional

from application.dto import GeneratedFile
from application.interfaces import IArchiver, IAttachmentStore
from application.use_cases.base_use_case import (
    BaseUseCase,
    document_filename,
    resolve_document_category,
    resolve_grade,
)
from domain.exceptions import InternalError, NotFoundError
from domain.repositories import IApplicationRepository, IStudentRepository

DEFAULT_MEDIA_TYPE = "application/octet-stream"


class CollectAttachmentUseCase(BaseUseCase):
    """Download the first file stored under a title."""

    def __init__(
        self,
        application_repository: IApplicationRepository,
        attachment_store: IAttachmentStore,
    ):
        super().__init__(application_repository)
        self.attachment_store = attachment_store

    async def execute(self, application_id: int, category: Optional[str], title: str) -> GeneratedFile:
        attachment_category = resolve_document_category(category)
        application = await self._store("load application", self.application_repo.get_by_id(application_id))
        if application is None:
            raise NotFoundError("Application does not exist.")

        filenames = application.get_attachments(attachment_category).get(title)
        if not filenames:
            raise NotFoundError("Application does not exist.")

        stored_name = filenames[0]
        try:
            content = await asyncio.to_thread(self.attachment_store.read, stored_name)
        except FileNotFoundError:
            raise NotFoundError("Attachment does not exist.")
        except Exception as e:
            self.logger.error(f"❌ Failed to read attachment {stored_name}: {str(e)}", exc_info=True)
            raise InternalError("Failed to read attachment.") from e

        return GeneratedFile(
            filename=document_filename(application, title, Path(stored_name).suffix),
            content=content,
            media_type=mimetypes.guess_type(stored_name)[0] or DEFAULT_MEDIA_TYPE,
        )


class CollectAttachmentBatchUseCase(BaseUseCase):
    """Bundle every attachment of a category for one grade. Missing files are skipped."""

    def __init__(
        self,
        application_repository: IApplicationRepository,
        student_repository: IStudentRepository,
        attachment_store: IAttachmentStore,
        archiver: IArchiver,
    ):
        super().__init__(application_repository, student_repository)
        self.attachment_store = attachment_store
        self.archiver = archiver

    async def execute(self, category: Optional[str], grade: Optional[str]) -> GeneratedFile:
        attachment_category = resolve_document_category(category)
        grade_filter = resolve_grade(grade)
        selected = await self._applications_in_grade(grade_filter)

        entries: dict[str, bytes] = {}
        for application, _ in selected:
            for title, filenames in application.get_attachments(attachment_category).items():
                for index, stored_name in enumerate(filenames or []):
                    try:
                        content = await asyncio.to_thread(self.attachment_store.read, stored_name)
                    except Exception as e:
                        self.logger.error(f"❌ Skipping attachment {stored_name} of application {application.id}: {str(e)}")
                        continue
                    name = document_filename(application, title, Path(stored_name).suffix, index=index)
                    entries[name] = content

        try:
            content = await asyncio.to_thread(self.archiver.archive, entries)
        except Exception as e:
            self.logger.error(f"❌ Failed to archive attachments: {str(e)}", exc_info=True)
            raise InternalError("Failed to archive attachments.") from e

        return GeneratedFile(
            filename=f"e-forms-{attachment_category}-grade{grade_filter}.{self.archiver.file_extension}",
            content=content,
            media_type=self.archiver.media_type,
        )
