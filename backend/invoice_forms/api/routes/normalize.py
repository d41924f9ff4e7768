"""Normalizers — stateless endpoints exposing the input normalizers to the UI.

Invariants:
    - No session state read or written
"""

from fastapi import APIRouter

from invoice_forms.core.normalize_input import TextInputOptions, group_digits, normalize_text
from invoice_forms.schemas.form import GroupDigitsRequest, NormalizedValue, NormalizeTextRequest

router = APIRouter(prefix="/api/v1/normalize", tags=["normalize"])


@router.post("/text", response_model=NormalizedValue)
async def normalize_text_value(body: NormalizeTextRequest):
    options = TextInputOptions(
        trim=body.trim,
        collapse_whitespace=body.collapse_whitespace,
        remove_diacritics=body.remove_diacritics,
        casing=body.casing,
        max_length=body.max_length,
    )
    return NormalizedValue(value=normalize_text(body.value, options))


@router.post("/digits", response_model=NormalizedValue)
async def group_digits_value(body: GroupDigitsRequest):
    return NormalizedValue(value=group_digits(body.value, body.block_sizes))
