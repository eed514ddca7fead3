"""Email wording and layout for application notifications."""

from dataclasses import dataclass
from html import escape

from domain.enums import ApplicationCategory

SENDER_SIGNATURE = "电子系信息管理系统"


@dataclass(frozen=True)
class EmailTemplate:
    """Per-notification wording. ``heading`` may use ``{applicant}``."""

    subject: str
    title: str
    heading: str
    action: str
    note: str = ""


@dataclass(frozen=True)
class EmailMessage:
    """A composed message ready for the mail transport."""

    to: str
    subject: str
    text: str
    html: str


STATUS_TEMPLATES: dict[ApplicationCategory, EmailTemplate] = {
    ApplicationCategory.HONOR: EmailTemplate(
        subject="【荣誉申请】您的荣誉申请结果已更新",
        title="荣誉申请",
        heading="您的荣誉申请结果已更新",
        action="查看荣誉申请结果",
        note="荣誉申请最终结果请以院系公示结果为准",
    ),
    ApplicationCategory.SCHOLARSHIP: EmailTemplate(
        subject="【奖学金】您的奖学金分配情况已更新",
        title="奖学金分配",
        heading="您的奖学金分配情况已更新",
        action="查看奖学金分配情况",
        note="奖学金最终分配情况请以院系公示结果为准",
    ),
    ApplicationCategory.FINANCIAL_AID: EmailTemplate(
        subject="【助学金】您的助学金资助情况已更新",
        title="助学金资助",
        heading="您的助学金资助情况已更新",
        action="查看助学金资助情况",
        note="助学金最终资助情况请以院系公示结果为准",
    ),
}

MENTOR_REQUEST_TEMPLATE = EmailTemplate(
    subject="【新生导师】您收到了一份新的申请",
    title="新生导师申请",
    heading="您有一份来自 {applicant} 同学的新生导师申请",
    action="处理新生导师申请",
    note="请您及时处理同学的申请，谢谢！",
)

MENTOR_STATUS_TEMPLATE = EmailTemplate(
    subject="【新生导师】您的新生导师申请状态已更新",
    title="新生导师申请",
    heading="您的新生导师申请状态已更新",
    action="查看新生导师申请状态",
)


def format_status_lines(status: dict[str, str]) -> str:
    """One ``key：value`` line per status entry."""
    return "\n".join(f"{key}：{value}" for key, value in status.items())


def _render_html(template: EmailTemplate, recipient_name: str, heading: str, body: str, portal_url: str) -> str:
    paragraphs = "".join(f"<p>{escape(line)}</p>" for line in body.split("\n") if line.strip())
    note = f'<p class="note">{escape(template.note)}</p>' if template.note else ""
    return (
        "<!DOCTYPE html>"
        f"<html><head><meta charset=\"utf-8\"><title>{escape(template.title)}</title></head>"
        "<body style=\"font-family: sans-serif; color: #424242;\">"
        f"<p>{escape(recipient_name)}，您好</p>"
        f"<h2 style=\"color: #1a237e;\">{escape(heading)}</h2>"
        f"{paragraphs}"
        f"{note}"
        f"<p><a href=\"{escape(portal_url, quote=True)}\" style=\"color: #1565c0;\">{escape(template.action)}</a></p>"
        f"<p style=\"color: #9e9e9e;\">{SENDER_SIGNATURE}</p>"
        "</body></html>"
    )


def compose_email(
    template: EmailTemplate,
    to: str,
    recipient_name: str,
    body: str,
    portal_url: str,
    applicant: str = "",
) -> EmailMessage:
    """
    Compose the plain text and HTML versions of one notification.

    Args:
        template: Wording for this notification
        to: Recipient address
        recipient_name: Name used in the greeting
        body: Notification specific lines
        portal_url: Link to the information portal
        applicant: Applicant name substituted into the heading

    Returns:
        EmailMessage with both bodies
    """
    heading = template.heading.format(applicant=applicant)
    text_lines = [f"{recipient_name}，您好", heading, body]
    if template.note:
        text_lines.append(template.note)
    text_lines.append(f"请前往 {portal_url} {template.action}。")

    return EmailMessage(
        to=to,
        subject=template.subject,
        text="\n".join(text_lines),
        html=_render_html(template, recipient_name, heading, body, portal_url),
    )
