"""Shared query handling for the document download endpoints."""

from typing import Optional, Union
from urllib.parse import quote

from fastapi import Response

from application.dto import GeneratedFile
from application.use_cases import (
    CollectAttachmentBatchUseCase,
    CollectAttachmentUseCase,
    GenerateThankLetterBatchUseCase,
    GenerateThankLetterUseCase,
)
from domain.exceptions import UnprocessableError

SingleDocumentUseCase = Union[GenerateThankLetterUseCase, CollectAttachmentUseCase]
BatchDocumentUseCase = Union[GenerateThankLetterBatchUseCase, CollectAttachmentBatchUseCase]


def file_response(generated: GeneratedFile) -> Response:
    """Attachment response; non-ASCII filenames use the RFC 5987 form."""
    disposition = f"attachment; filename*=UTF-8''{quote(generated.filename)}"
    return Response(
        content=generated.content,
        media_type=generated.media_type,
        headers={"Content-Disposition": disposition},
    )


async def serve_document(
    single_use_case: SingleDocumentUseCase,
    batch_use_case: BatchDocumentUseCase,
    category: Optional[str],
    grade: Optional[str],
    title: Optional[str],
    application_id: Optional[int],
) -> Response:
    """``grade`` selects the batch form, ``title`` with ``id`` the single form."""
    if grade:
        generated = await batch_use_case.execute(category, grade)
    elif title and application_id is not None:
        generated = await single_use_case.execute(application_id, category, title)
    else:
        raise UnprocessableError("Missing queries.")
    return file_response(generated)
