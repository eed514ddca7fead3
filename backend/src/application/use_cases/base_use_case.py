"""Base use case class for common store and lookup functionality."""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Optional, TypeVar

from domain.entities import Application
from domain.enums import ApplicationCategory
from domain.exceptions import ApplicationError, InternalError, UnauthorizedError, UnprocessableError
from domain.repositories import IApplicationRepository, IStudentRepository
from domain.value_objects import GradeFilter
from infrastructure.config import get_logger

T = TypeVar("T")


def resolve_category(category: Optional[str]) -> Optional[ApplicationCategory]:
    """Parse an ``applicationType``/``type`` parameter; None passes through."""
    if category is None:
        return None
    try:
        return ApplicationCategory(category)
    except ValueError:
        raise UnprocessableError(f"Unknown application type: {category}")


def resolve_document_category(category: Optional[str]) -> ApplicationCategory:
    """Parse the category of a letter or e-form request."""
    resolved = resolve_category(category)
    if resolved is None or not resolved.supports_letters:
        raise UnprocessableError("Missing queries.")
    return resolved


def resolve_grade(grade: Optional[str]) -> GradeFilter:
    try:
        return GradeFilter(grade or "")
    except ValueError:
        raise UnprocessableError("Missing queries.")


def document_filename(application: Application, title: str, extension: str, index: Optional[int] = None) -> str:
    """
    Download name of a generated or collected document.

    ``applicantName-applicantId-title.ext``, with ``-index`` before the
    extension when one title holds several files.
    """
    parts = [application.applicant_name or "", str(application.applicant_id), title]
    if index is not None:
        parts.append(str(index))
    name = "-".join(parts).replace("/", "_").replace("\\", "_")
    extension = extension.lstrip(".")
    return f"{name}.{extension}" if extension else name


class BaseUseCase(ABC):
    """
    Base class for application use cases.

    Wraps document store calls so that store failures reach callers as
    InternalError, and provides the applicant class lookups used by the
    grade-filtered pipelines.
    """

    def __init__(
        self,
        application_repository: IApplicationRepository,
        student_repository: Optional[IStudentRepository] = None,
    ):
        self.application_repo = application_repository
        self.student_repo = student_repository
        self.logger = get_logger(self.__class__.__name__)

    @abstractmethod
    async def execute(self, *args, **kwargs) -> Any:
        pass

    async def _store(self, description: str, operation: Awaitable[T]) -> T:
        """Await a store call, converting unexpected failures to InternalError."""
        try:
            return await operation
        except ApplicationError:
            raise
        except Exception as e:
            self.logger.error(f"❌ Failed to {description}: {str(e)}", exc_info=True)
            raise InternalError(f"Failed to {description}.") from e

    def _check_owner(self, applicant_id: Any, owner_id: Optional[str]) -> None:
        """Restrict a self-access caller to the records of that applicant."""
        if owner_id is not None and str(applicant_id) != owner_id:
            self.logger.info(f"Caller {owner_id} refused access to records of {applicant_id}")
            raise UnauthorizedError("Provide valid x-access-id or re-request with authorized identity.")

    async def _class_of(self, applicant_id: Optional[int], cache: Optional[dict] = None) -> Optional[str]:
        """Class label of an applicant, None when the student is unknown."""
        if applicant_id is None or self.student_repo is None:
            return None
        if cache is not None and applicant_id in cache:
            return cache[applicant_id]
        student = await self._store("load student", self.student_repo.get_by_id(applicant_id))
        class_name = student.class_name if student else None
        if cache is not None:
            cache[applicant_id] = class_name
        return class_name

    async def _applications_in_grade(self, grade_filter: GradeFilter) -> list[tuple[Application, Optional[str]]]:
        """All applications whose applicant's class belongs to a grade, with that class."""
        applications = await self._store("list applications", self.application_repo.find())
        selected = []
        for application in applications:
            class_name = await self._class_of(application.applicant_id)
            if grade_filter.matches(class_name):
                selected.append((application, class_name))
        self.logger.info(f"🔄 {len(selected)} of {len(applications)} applications in grade {grade_filter}")
        return selected
