"""Application interfaces - Port definitions for external services."""

from .archiver import IArchiver
from .attachment_store import IAttachmentStore
from .letter_renderer import ILetterRenderer
from .mail_sender import IMailSender

__all__ = ["IArchiver", "IAttachmentStore", "ILetterRenderer", "IMailSender"]
