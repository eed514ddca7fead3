"""Uploaded attachment download endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from application.dto import Caller
from application.use_cases import CollectAttachmentBatchUseCase, CollectAttachmentUseCase
from domain.enums import Capability
from presentation.api.v1.dependencies import (
    get_attachment_batch_use_case,
    get_attachment_use_case,
    require,
)
from presentation.api.v1.endpoints.documents import serve_document

router = APIRouter(prefix="/e-forms", tags=["documents"])


@router.get("")
async def get_e_forms(
    category: Optional[str] = Query(None, alias="type"),
    grade: Optional[str] = Query(None),
    title: Optional[str] = Query(None),
    application_id: Optional[int] = Query(None, alias="id"),
    _: Caller = Depends(require(Capability.READ, allow_self=False)),
    single: CollectAttachmentUseCase = Depends(get_attachment_use_case),
    batch: CollectAttachmentBatchUseCase = Depends(get_attachment_batch_use_case),
) -> Response:
    """One uploaded file (``title`` and ``id``) or a zip of a whole grade (``grade``)."""
    return await serve_document(single, batch, category, grade, title, application_id)
