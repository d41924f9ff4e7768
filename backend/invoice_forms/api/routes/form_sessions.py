"""Form Sessions — lifecycle and field events for in-memory form validation engines.

Invariants:
    - FormSession is per open form, in-memory (module-level dict)
    - Field values are normalized (when requested) BEFORE validation
    - Validation failures return 200 with errors; only unknown sessions/form
      types and configuration faults produce error statuses

Design Decisions:
    - _form_sessions as module-level dict: deliberate exception to no-global-state rule
      (single-process uvicorn, sessions lost on restart, forms are short-lived)
    - get_form_session_or_404 raises ResourceNotFoundError; the global handler
      renders the envelope
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from invoice_forms.config import Settings, get_settings
from invoice_forms.core.errors import ResourceNotFoundError
from invoice_forms.schemas.form import (
    FieldEvent,
    FieldValidationResponse,
    FormSessionCreate,
    FormSessionResponse,
    FormValidationRequest,
    FormValidationResponse,
    LocaleUpdate,
    ResetRequest,
)
from invoice_forms.services import form_session as forms
from invoice_forms.services.form_session import FormSession

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/form-sessions", tags=["form-sessions"])

_form_sessions: dict[UUID, FormSession] = {}


def get_form_session_or_404(form_id: UUID) -> FormSession:
    session = _form_sessions.get(form_id)
    if session is None:
        raise ResourceNotFoundError("Form session", str(form_id))
    return session


def _summary(session: FormSession) -> FormSessionResponse:
    return FormSessionResponse(
        id=session.id,
        form_type=session.form_type,
        locale=session.locale,
        fields=session.validator.registered_fields,
        blurred_fields=list(session.blur_tracker.blurred_fields),
    )


def _field_response(field: str, value, errors: list[str]) -> FieldValidationResponse:
    return FieldValidationResponse(
        field=field, value=value, errors=errors, valid=not errors,
    )


# ─── Lifecycle ───────────────────────────────────────────────────

@router.post(
    "", response_model=FormSessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_form_session(
    body: FormSessionCreate, settings: Settings = Depends(get_settings),
):
    """Open a validation engine for a form instance."""
    session = forms.create_form_session(body.form_type, settings, body.locale)
    _form_sessions[session.id] = session
    return _summary(session)


@router.get("/{form_id}", response_model=FormSessionResponse)
async def get_form_session(form_id: UUID):
    return _summary(get_form_session_or_404(form_id))


@router.delete("/{form_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_form_session(form_id: UUID):
    get_form_session_or_404(form_id)
    _form_sessions.pop(form_id, None)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{form_id}/locale", response_model=FormSessionResponse)
async def update_locale(form_id: UUID, body: LocaleUpdate):
    session = get_form_session_or_404(form_id)
    forms.set_locale(session, body.locale)
    return _summary(session)


@router.post("/{form_id}/reset", response_model=FormSessionResponse)
async def reset_form(form_id: UUID, body: ResetRequest | None = None):
    """Reuse the form for another entity: drop blur state and cached errors."""
    session = get_form_session_or_404(form_id)
    forms.reset_form(session, body.prefix if body else "")
    return _summary(session)


# ─── Field events ────────────────────────────────────────────────

@router.post("/{form_id}/fields/{field}/blur", response_model=FieldValidationResponse)
async def blur_field(form_id: UUID, field: str, body: FieldEvent):
    session = get_form_session_or_404(form_id)
    value = session.normalize(field, body.value) if body.normalize else body.value
    errors = await forms.handle_blur(session, field, value)
    return _field_response(field, value, errors)


@router.post("/{form_id}/fields/{field}/focus", status_code=status.HTTP_204_NO_CONTENT)
async def focus_field(form_id: UUID, field: str):
    session = get_form_session_or_404(form_id)
    forms.handle_focus(session, field)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{form_id}/fields/{field}/validate", response_model=FieldValidationResponse)
async def validate_field(form_id: UUID, field: str, body: FieldEvent):
    session = get_form_session_or_404(form_id)
    value = session.normalize(field, body.value) if body.normalize else body.value
    errors = await forms.validate_field(session, field, value)
    return _field_response(field, value, errors)


@router.get("/{form_id}/fields/{field}/errors", response_model=FieldValidationResponse)
async def get_field_errors(form_id: UUID, field: str):
    """Cached result of the last validation; does not run rules."""
    session = get_form_session_or_404(form_id)
    errors = session.validator.get_errors(field)
    return _field_response(field, None, errors)


@router.post("/{form_id}/validate", response_model=FormValidationResponse)
async def validate_form(form_id: UUID, body: FormValidationRequest):
    session = get_form_session_or_404(form_id)
    values = body.values
    if body.normalize:
        values = {name: session.normalize(name, value) for name, value in values.items()}
    errors = await forms.validate_form(session, values)
    return FormValidationResponse(
        valid=not any(errors.values()),
        errors={name: msgs for name, msgs in errors.items() if msgs},
    )
