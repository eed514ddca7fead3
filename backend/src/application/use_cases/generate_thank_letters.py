"""Use Cases for generating thank-you letters from funded category contents."""

import asyncio
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from application.dto import GeneratedFile
from application.interfaces import IArchiver, ILetterRenderer
from application.use_cases.base_use_case import (
    BaseUseCase,
    document_filename,
    resolve_document_category,
    resolve_grade,
)
from domain.entities import Application
from domain.enums import ApplicationCategory
from domain.exceptions import InternalError, NotFoundError
from domain.repositories import IApplicationRepository, IStudentRepository
from domain.value_objects import ThankLetter


def _as_submission(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {"content": str(value or "")}


class _LetterUseCase(BaseUseCase):
    def __init__(
        self,
        application_repository: IApplicationRepository,
        student_repository: IStudentRepository,
        renderer: ILetterRenderer,
        department: str,
    ):
        super().__init__(application_repository, student_repository)
        self.renderer = renderer
        self.department = department

    def _letter(self, title: str, submission: Any, class_name: Optional[str]) -> ThankLetter:
        return ThankLetter.from_submission(
            title,
            _as_submission(submission),
            department=self.department,
            class_name=class_name,
        )


class GenerateThankLetterUseCase(_LetterUseCase):
    """Render the letter of one content title of one application."""

    async def execute(self, application_id: int, category: Optional[str], title: str) -> GeneratedFile:
        """
        Generate one letter.

        Args:
            application_id: Application to read
            category: ``scholarship`` or ``financialAid``
            title: Content title under the category

        Returns:
            GeneratedFile with the rendered document

        Raises:
            NotFoundError: Application, category or title missing
            InternalError: Rendering failed
        """
        letter_category = resolve_document_category(category)
        application = await self._store("load application", self.application_repo.get_by_id(application_id))
        if application is None:
            raise NotFoundError("Application does not exist.")

        submission = application.get_submission(letter_category, title)
        if submission is None:
            raise NotFoundError("Application does not exist.")

        class_name = await self._class_of(application.applicant_id)
        letter = self._letter(title, submission, class_name)
        try:
            content = await asyncio.to_thread(self.renderer.render, letter)
        except Exception as e:
            self.logger.error(f"❌ Failed to render letter {title!r} of application {application.id}: {str(e)}", exc_info=True)
            raise InternalError("Failed to render letter.") from e

        return GeneratedFile(
            filename=document_filename(application, title, self.renderer.file_extension),
            content=content,
            media_type=self.renderer.media_type,
        )


class GenerateThankLetterBatchUseCase(_LetterUseCase):
    """
    Render every letter of a category for one grade and bundle them.

    Letters are written to a temporary directory that is unique to the
    invocation and removed once the archive is built, whatever happens.
    A letter that fails to render is logged and left out of the archive.
    """

    def __init__(
        self,
        application_repository: IApplicationRepository,
        student_repository: IStudentRepository,
        renderer: ILetterRenderer,
        archiver: IArchiver,
        department: str,
        work_root: Optional[Path] = None,
    ):
        super().__init__(application_repository, student_repository, renderer, department)
        self.archiver = archiver
        self.work_root = work_root

    async def execute(self, category: Optional[str], grade: Optional[str]) -> GeneratedFile:
        letter_category = resolve_document_category(category)
        grade_filter = resolve_grade(grade)
        selected = await self._applications_in_grade(grade_filter)

        with tempfile.TemporaryDirectory(
            prefix=f"thank-letters-{letter_category}-grade{grade_filter}-",
            dir=self.work_root,
        ) as work_dir:
            directory = Path(work_dir)
            rendered, failed = 0, 0
            for application, class_name in selected:
                for title, submission in application.get_contents(letter_category).items():
                    if await self._render_to(directory, application, letter_category, title, submission, class_name):
                        rendered += 1
                    else:
                        failed += 1

            self.logger.info(f"✅ Rendered {rendered} letters for grade {grade_filter}, {failed} skipped")
            try:
                content = await asyncio.to_thread(self.archiver.archive_directory, directory)
            except Exception as e:
                self.logger.error(f"❌ Failed to archive letters: {str(e)}", exc_info=True)
                raise InternalError("Failed to archive letters.") from e

        return GeneratedFile(
            filename=f"thank-letters-{letter_category}-grade{grade_filter}.{self.archiver.file_extension}",
            content=content,
            media_type=self.archiver.media_type,
        )

    async def _render_to(
        self,
        directory: Path,
        application: Application,
        category: ApplicationCategory,
        title: str,
        submission: Any,
        class_name: Optional[str],
    ) -> bool:
        output_path = directory / document_filename(application, title, self.renderer.file_extension)
        try:
            letter = self._letter(title, submission, class_name)
            await asyncio.to_thread(self.renderer.generate, letter, output_path)
            return True
        except Exception as e:
            self.logger.error(
                f"❌ Skipping letter {title!r} of application {application.id} ({category}): {str(e)}",
                exc_info=True,
            )
            output_path.unlink(missing_ok=True)
            return False
