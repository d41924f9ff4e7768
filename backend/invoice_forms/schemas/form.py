"""Form Schemas — Pydantic models for the form session and normalizer endpoints.

Invariants:
    - FormSessionCreate.form_type is a known definition name (checked by the service)
    - Field values are untyped (Any): rules decide what a value means
    - GroupDigitsRequest.block_sizes entries are positive

Design Decisions:
    - Locale as the core enum: Pydantic rejects unsupported cultures natively
    - normalize flag on field events: the client may send already-normalized values
"""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from invoice_forms.core.domain_types import Locale, TextCasing


class FormSessionCreate(BaseModel):
    form_type: str = Field(min_length=1, max_length=50)
    locale: Locale | None = None

    @field_validator("form_type")
    @classmethod
    def strip_form_type(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("form_type cannot be empty or whitespace")
        return v


class FormSessionResponse(BaseModel):
    id: UUID
    form_type: str
    locale: Locale
    fields: list[str]
    blurred_fields: list[str] = []


class FieldEvent(BaseModel):
    """Blur / validate payload for one field."""
    value: Any = None
    normalize: bool = True


class FieldValidationResponse(BaseModel):
    field: str
    value: Any = None
    errors: list[str]
    valid: bool


class FormValidationRequest(BaseModel):
    values: dict[str, Any] = {}
    normalize: bool = True


class FormValidationResponse(BaseModel):
    valid: bool
    errors: dict[str, list[str]]


class ResetRequest(BaseModel):
    prefix: str = ""


class LocaleUpdate(BaseModel):
    locale: Locale


# --- Normalizers --------------------------------------------------------------

class NormalizeTextRequest(BaseModel):
    value: str | None = None
    trim: bool = True
    collapse_whitespace: bool = True
    remove_diacritics: bool = False
    casing: TextCasing = TextCasing.NONE
    max_length: int | None = Field(None, ge=0)


class GroupDigitsRequest(BaseModel):
    value: str | None = None
    block_sizes: list[int] = Field(default_factory=list, max_length=20)

    @field_validator("block_sizes")
    @classmethod
    def positive_blocks(cls, v: list[int]) -> list[int]:
        if any(size < 1 for size in v):
            raise ValueError("block sizes must be positive")
        return v


class NormalizedValue(BaseModel):
    value: str
