"""Application use cases."""

from .amend_application import AmendApplicationUseCase
from .collect_attachments import CollectAttachmentBatchUseCase, CollectAttachmentUseCase
from .generate_thank_letters import GenerateThankLetterBatchUseCase, GenerateThankLetterUseCase
from .query_applications import DeleteApplicationUseCase, GetApplicationUseCase, ListApplicationsUseCase
from .submit_application import SubmitApplicationUseCase

__all__ = [
    "SubmitApplicationUseCase",
    "AmendApplicationUseCase",
    "GetApplicationUseCase",
    "ListApplicationsUseCase",
    "DeleteApplicationUseCase",
    "GenerateThankLetterUseCase",
    "GenerateThankLetterBatchUseCase",
    "CollectAttachmentUseCase",
    "CollectAttachmentBatchUseCase",
]
