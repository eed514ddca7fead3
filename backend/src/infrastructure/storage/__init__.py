"""File storage access."""

from .local_attachment_store import LocalAttachmentStore

__all__ = ["LocalAttachmentStore"]
