"""FastAPI dependency injection setup."""

from pathlib import Path
from typing import Any, AsyncGenerator, Awaitable, Callable, Mapping, Optional

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from application.dto import Caller
from application.services import AccessControl, NotificationDispatcher
from application.use_cases import (
    AmendApplicationUseCase,
    CollectAttachmentBatchUseCase,
    CollectAttachmentUseCase,
    DeleteApplicationUseCase,
    GenerateThankLetterBatchUseCase,
    GenerateThankLetterUseCase,
    GetApplicationUseCase,
    ListApplicationsUseCase,
    SubmitApplicationUseCase,
)
from domain.entities import Application
from domain.enums import Capability
from domain.exceptions import UnauthorizedError
from domain.repositories import (
    IApplicationRepository,
    IReviewerRepository,
    IStudentRepository,
    ITeacherRepository,
)
from infrastructure.config import get_logger, get_settings
from infrastructure.database import get_session, new_session
from infrastructure.database.repositories import (
    SQLAlchemyApplicationRepository,
    SQLAlchemyReviewerRepository,
    SQLAlchemyStudentRepository,
    SQLAlchemyTeacherRepository,
)
from infrastructure.reporting import SMTPMailSender, ThankLetterPDFGenerator, ZipArchiver
from infrastructure.storage import LocalAttachmentStore

logger = get_logger(__name__)

NotificationTask = Callable[[Application, Mapping[str, Any], bool], Awaitable[None]]


# Database session dependency
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    async for session in get_session():
        yield session


# Repository dependencies
def get_application_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IApplicationRepository:
    """Get application repository dependency."""
    return SQLAlchemyApplicationRepository(session)


def get_student_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IStudentRepository:
    """Get student repository dependency."""
    return SQLAlchemyStudentRepository(session)


def get_teacher_repository(
    session: AsyncSession = Depends(get_db_session),
) -> ITeacherRepository:
    """Get teacher repository dependency."""
    return SQLAlchemyTeacherRepository(session)


def get_reviewer_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IReviewerRepository:
    """Get reviewer repository dependency."""
    return SQLAlchemyReviewerRepository(session)


# Access control
def get_access_control(
    teacher_repository: ITeacherRepository = Depends(get_teacher_repository),
    reviewer_repository: IReviewerRepository = Depends(get_reviewer_repository),
) -> AccessControl:
    """Get access control dependency."""
    return AccessControl(teacher_repository, reviewer_repository)


def require(*capabilities: Capability, allow_self: bool = True):
    """
    Build a dependency that authorizes the caller and returns a Caller.
    
    The caller identity is set by the authenticating gateway in
    ``x-caller-id``; ``x-access-id`` requests self-access, which operations
    built with ``allow_self=False`` ignore.
    """
    async def verify(
        x_caller_id: Optional[str] = Header(None),
        x_access_id: Optional[str] = Header(None),
        access_control: AccessControl = Depends(get_access_control),
    ) -> Caller:
        if not x_caller_id:
            raise UnauthorizedError("Identity required.")
        return await access_control.authorize(x_caller_id, capabilities, x_access_id, allow_self=allow_self)

    return verify


# Notifications
async def dispatch_notifications(
    application: Application,
    body: Mapping[str, Any],
    created: bool,
) -> None:
    """
    Background task: notify about a stored change on a session of its own.
    
    Runs after the response has been sent; every failure ends here in the log.
    """
    settings = get_settings()
    try:
        async with new_session() as session:
            dispatcher = NotificationDispatcher(
                student_repository=SQLAlchemyStudentRepository(session),
                teacher_repository=SQLAlchemyTeacherRepository(session),
                mail_sender=SMTPMailSender(settings),
                portal_url=settings.portal_url,
            )
            if created:
                await dispatcher.dispatch_submission(application, body)
            else:
                await dispatcher.dispatch_amendment(application, body)
    except Exception as e:
        logger.error(f"Notifications for application {application.id} failed: {str(e)}", exc_info=True)


def get_notification_task() -> NotificationTask:
    """Get the background notification task."""
    return dispatch_notifications


# Use case dependencies
def get_submit_application_use_case(
    application_repository: IApplicationRepository = Depends(get_application_repository),
    teacher_repository: ITeacherRepository = Depends(get_teacher_repository),
) -> SubmitApplicationUseCase:
    """Get submit application use case dependency."""
    return SubmitApplicationUseCase(application_repository, teacher_repository)


def get_amend_application_use_case(
    application_repository: IApplicationRepository = Depends(get_application_repository),
) -> AmendApplicationUseCase:
    """Get amend application use case dependency."""
    return AmendApplicationUseCase(
        application_repository,
        creates_missing=get_settings().amend_creates_missing,
    )


def get_get_application_use_case(
    application_repository: IApplicationRepository = Depends(get_application_repository),
) -> GetApplicationUseCase:
    return GetApplicationUseCase(application_repository)


def get_list_applications_use_case(
    application_repository: IApplicationRepository = Depends(get_application_repository),
    student_repository: IStudentRepository = Depends(get_student_repository),
) -> ListApplicationsUseCase:
    return ListApplicationsUseCase(application_repository, student_repository)


def get_delete_application_use_case(
    application_repository: IApplicationRepository = Depends(get_application_repository),
) -> DeleteApplicationUseCase:
    return DeleteApplicationUseCase(application_repository)


def get_thank_letter_use_case(
    application_repository: IApplicationRepository = Depends(get_application_repository),
    student_repository: IStudentRepository = Depends(get_student_repository),
) -> GenerateThankLetterUseCase:
    """Get single letter use case dependency, with its own renderer."""
    settings = get_settings()
    return GenerateThankLetterUseCase(
        application_repository,
        student_repository,
        renderer=ThankLetterPDFGenerator(font_path=settings.letter_font_path),
        department=settings.letter_department,
    )


def get_thank_letter_batch_use_case(
    application_repository: IApplicationRepository = Depends(get_application_repository),
    student_repository: IStudentRepository = Depends(get_student_repository),
) -> GenerateThankLetterBatchUseCase:
    """Get batch letter use case dependency, with its own renderer."""
    settings = get_settings()
    return GenerateThankLetterBatchUseCase(
        application_repository,
        student_repository,
        renderer=ThankLetterPDFGenerator(font_path=settings.letter_font_path),
        archiver=ZipArchiver(),
        department=settings.letter_department,
        work_root=Path(settings.letter_work_dir) if settings.letter_work_dir else None,
    )


def get_attachment_use_case(
    application_repository: IApplicationRepository = Depends(get_application_repository),
) -> CollectAttachmentUseCase:
    return CollectAttachmentUseCase(
        application_repository,
        LocalAttachmentStore(get_settings().private_files_dir),
    )


def get_attachment_batch_use_case(
    application_repository: IApplicationRepository = Depends(get_application_repository),
    student_repository: IStudentRepository = Depends(get_student_repository),
) -> CollectAttachmentBatchUseCase:
    return CollectAttachmentBatchUseCase(
        application_repository,
        student_repository,
        LocalAttachmentStore(get_settings().private_files_dir),
        ZipArchiver(),
    )
