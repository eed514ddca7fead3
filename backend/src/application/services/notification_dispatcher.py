"""Category notifications sent after an application change has been stored."""

import asyncio
from collections.abc import Mapping
from typing import Any, Optional

from application.interfaces import IMailSender
from application.services.email_templates import (
    MENTOR_REQUEST_TEMPLATE,
    MENTOR_STATUS_TEMPLATE,
    STATUS_TEMPLATES,
    EmailMessage,
    compose_email,
    format_status_lines,
)
from domain.entities import Application
from domain.enums import ApplicationCategory
from domain.repositories import IStudentRepository, ITeacherRepository
from infrastructure.config import get_logger

STATUS_FIELD = "status"


def patched_categories(patch: Mapping[str, Any]) -> list[ApplicationCategory]:
    """Categories carried by an update body, in body order."""
    return [
        ApplicationCategory(key)
        for key, value in patch.items()
        if key in ApplicationCategory.keys() and isinstance(value, Mapping) and value
    ]


def _statement_of(application: Application) -> str:
    statement = application.get_contents(ApplicationCategory.MENTOR).get("statement")
    if isinstance(statement, Mapping):
        statement = statement.get("content")
    return str(statement or "")


class NotificationDispatcher:
    """
    Derives recipient and wording for each changed category and hands the
    message to the mail transport.

    Notifications are an enhancement: a recipient without an email address is
    skipped, and a failure in one category is logged without affecting the
    others or the already completed request.
    """

    def __init__(
        self,
        student_repository: IStudentRepository,
        teacher_repository: ITeacherRepository,
        mail_sender: IMailSender,
        portal_url: str,
    ):
        self.student_repo = student_repository
        self.teacher_repo = teacher_repository
        self.mail_sender = mail_sender
        self.portal_url = portal_url
        self.logger = get_logger(self.__class__.__name__)

    async def dispatch_submission(self, application: Application, body: Mapping[str, Any]) -> list[ApplicationCategory]:
        """Notify for every category of a newly submitted application."""
        return await self._dispatch_all(application, body, created=True)

    async def dispatch_amendment(self, application: Application, patch: Mapping[str, Any]) -> list[ApplicationCategory]:
        """Notify for every category carried by an amendment."""
        return await self._dispatch_all(application, patch, created=False)

    async def _dispatch_all(
        self,
        application: Application,
        body: Mapping[str, Any],
        created: bool,
    ) -> list[ApplicationCategory]:
        delivered = []
        for category in patched_categories(body):
            try:
                message = await self._build_message(category, application, body[category.value], created)
                if message is None:
                    continue
                if await self._send(message):
                    delivered.append(category)
                else:
                    self.logger.warning(f"Notification for {category} of application {application.id} was not sent")
            except Exception as e:
                self.logger.error(
                    f"Notification for {category} of application {application.id} failed: {str(e)}",
                    exc_info=True,
                )
        return delivered

    async def _build_message(
        self,
        category: ApplicationCategory,
        application: Application,
        sub_body: Mapping[str, Any],
        created: bool,
    ) -> Optional[EmailMessage]:
        if category is ApplicationCategory.MENTOR:
            if created:
                return await self._mentor_request(application)
            return await self._mentor_status_update(application)

        status = sub_body.get(STATUS_FIELD)
        if not isinstance(status, Mapping) or not status:
            return None
        return await self._status_update(category, application, dict(status))

    async def _mentor_request(self, application: Application) -> Optional[EmailMessage]:
        """Tell the requested teacher about a new mentor application."""
        mentor_name = application.mentor_name
        if not mentor_name:
            self.logger.warning(f"Mentor application {application.id} names no mentor")
            return None

        teacher = await self.teacher_repo.get_by_name(mentor_name)
        if teacher is None:
            self.logger.warning(f"Mentor {mentor_name} of application {application.id} not found")
            return None
        if not teacher.email:
            self.logger.info(f"Mentor {mentor_name} has no email, skipping notification")
            return None

        student = await self.student_repo.get_by_id(application.applicant_id)
        body = "\n".join([
            "申请陈述：",
            _statement_of(application),
            "",
            f"邮箱：{(student.email if student else None) or '-'}",
            f"手机：{(student.phone if student else None) or '-'}",
        ])
        return compose_email(
            MENTOR_REQUEST_TEMPLATE,
            to=teacher.email,
            recipient_name=teacher.name,
            body=body,
            portal_url=self.portal_url,
            applicant=application.applicant_name or "",
        )

    async def _mentor_status_update(self, application: Application) -> Optional[EmailMessage]:
        """Tell the applicant the current state of their mentor request."""
        student = await self._reachable_student(application)
        if student is None:
            return None
        return compose_email(
            MENTOR_STATUS_TEMPLATE,
            to=student.email,
            recipient_name=student.name,
            body=f"当前申请状态：{application.mentor_status or ''}",
            portal_url=self.portal_url,
        )

    async def _status_update(
        self,
        category: ApplicationCategory,
        application: Application,
        status: dict[str, str],
    ) -> Optional[EmailMessage]:
        """Tell the applicant every decision in the new status map."""
        student = await self._reachable_student(application)
        if student is None:
            return None
        return compose_email(
            STATUS_TEMPLATES[category],
            to=student.email,
            recipient_name=student.name,
            body=format_status_lines(status),
            portal_url=self.portal_url,
        )

    async def _reachable_student(self, application: Application):
        if application.applicant_id is None:
            return None
        student = await self.student_repo.get_by_id(application.applicant_id)
        if student is None or not student.email:
            self.logger.info(f"Applicant {application.applicant_id} has no email, skipping notification")
            return None
        return student

    async def _send(self, message: EmailMessage) -> bool:
        sent = await asyncio.to_thread(
            self.mail_sender.send,
            message.to,
            message.subject,
            message.text,
            message.html,
        )
        if sent:
            self.logger.info(f"Notification '{message.subject}' sent to {message.to}")
        return sent
