"""Thank-you letter download endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from application.dto import Caller
from application.use_cases import GenerateThankLetterBatchUseCase, GenerateThankLetterUseCase
from domain.enums import Capability
from presentation.api.v1.dependencies import (
    get_thank_letter_batch_use_case,
    get_thank_letter_use_case,
    require,
)
from presentation.api.v1.endpoints.documents import serve_document

router = APIRouter(prefix="/thank-letters", tags=["documents"])


@router.get("")
async def get_thank_letters(
    category: Optional[str] = Query(None, alias="type"),
    grade: Optional[str] = Query(None),
    title: Optional[str] = Query(None),
    application_id: Optional[int] = Query(None, alias="id"),
    _: Caller = Depends(require(Capability.READ, allow_self=False)),
    single: GenerateThankLetterUseCase = Depends(get_thank_letter_use_case),
    batch: GenerateThankLetterBatchUseCase = Depends(get_thank_letter_batch_use_case),
) -> Response:
    """One PDF letter (``title`` and ``id``) or a zip of a whole grade (``grade``)."""
    return await serve_document(single, batch, category, grade, title, application_id)
