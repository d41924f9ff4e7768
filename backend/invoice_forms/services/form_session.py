"""Form Session — one validation engine instance per open form.

Invariants:
    - A session owns its BlurTracker, text lookups, resolver and FormValidator;
      nothing is shared between sessions
    - The culture is explicit per session; set_locale switches both lookups
      and drops cached errors rendered in the previous culture
    - reset_form clears blur state AND cached errors for the same prefix

Design Decisions:
    - FORM_DEFINITIONS table maps a form type to its message scope, rule builder
      and normalizers (explicit registration, no discovery)
    - Blur handler validates right after marking: gated rules must see the new
      blur state on the same event
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable
from uuid import UUID, uuid4

from invoice_forms.config import Settings
from invoice_forms.core.domain_types import ErrorList, Locale, MessageScope, field_token
from invoice_forms.core.errors import UnknownFormTypeError
from invoice_forms.validation.blur_tracker import BlurTracker
from invoice_forms.validation.form_validator import FormValidator
from invoice_forms.validation.message_resolver import MessageResolver
from invoice_forms.validation.person_form import PERSON_NORMALIZERS, build_person_form
from invoice_forms.validation.text_lookup import CatalogTextLookup

logger = logging.getLogger(__name__)

Normalizer = Callable[[str | None], str]


@dataclass(frozen=True)
class FormDefinition:
    scope: MessageScope
    build: Callable[[FormValidator], FormValidator]
    normalizers: dict[str, Normalizer]


FORM_DEFINITIONS: dict[str, FormDefinition] = {
    "person": FormDefinition(
        scope=MessageScope.PERSON_FORM,
        build=build_person_form,
        normalizers=PERSON_NORMALIZERS,
    ),
}


@dataclass
class FormSession:
    """Per-form engine state."""

    form_type: str
    locale: Locale
    blur_tracker: BlurTracker
    specific_lookup: CatalogTextLookup
    generic_lookup: CatalogTextLookup
    validator: FormValidator
    normalizers: dict[str, Normalizer] = field(default_factory=dict)
    id: UUID = field(default_factory=uuid4)

    def normalize(self, field_key: str, raw: Any) -> Any:
        """Apply the field's normalizer to text input; other values pass through."""
        if raw is not None and not isinstance(raw, str):
            return raw
        token = field_token(field_key)
        for name, normalizer in self.normalizers.items():
            if field_token(name) == token:
                return normalizer(raw)
        return raw


def create_form_session(
    form_type: str, settings: Settings, locale: Locale | None = None,
) -> FormSession:
    """Build a fresh engine for form_type in the requested culture."""
    definition = FORM_DEFINITIONS.get(form_type)
    if definition is None:
        raise UnknownFormTypeError(form_type, sorted(FORM_DEFINITIONS))

    culture = locale or settings.default_locale
    blur_tracker = BlurTracker()
    specific = CatalogTextLookup(definition.scope, culture)
    generic = CatalogTextLookup(MessageScope.VALIDATION, culture)
    validator = FormValidator(
        MessageResolver(specific, generic, strict=settings.strict_messages),
        blur_tracker,
        rule_timeout_seconds=settings.rule_timeout_seconds,
    )
    definition.build(validator)

    session = FormSession(
        form_type=form_type,
        locale=culture,
        blur_tracker=blur_tracker,
        specific_lookup=specific,
        generic_lookup=generic,
        validator=validator,
        normalizers=definition.normalizers,
    )
    logger.info(
        f"Form session created: {form_type} ({culture.value})",
        extra={"form_id": str(session.id)},
    )
    return session


# ─── Field events ────────────────────────────────────────────────

async def handle_blur(session: FormSession, field_key: str, value: Any) -> ErrorList:
    """User left the field: gated rules become active, then validate."""
    session.blur_tracker.mark_blurred(field_key)
    return await session.validator.validate_field(field_key, value)


def handle_focus(session: FormSession, field_key: str) -> None:
    session.blur_tracker.mark_focused(field_key)


async def validate_field(session: FormSession, field_key: str, value: Any) -> ErrorList:
    return await session.validator.validate_field(field_key, value)


async def validate_form(session: FormSession, values: dict[str, Any]) -> dict[str, ErrorList]:
    return await session.validator.validate_form(values)


def reset_form(session: FormSession, prefix: str = "") -> None:
    """Forget blur state and cached errors (all, or fields starting with prefix)."""
    session.blur_tracker.reset_form(prefix)
    session.validator.clear_errors(prefix)


def set_locale(session: FormSession, locale: Locale) -> None:
    if locale == session.locale:
        return
    session.locale = locale
    session.specific_lookup.locale = locale
    session.generic_lookup.locale = locale
    session.validator.clear_errors()
    logger.info(
        f"Form session locale switched to {locale.value}",
        extra={"form_id": str(session.id)},
    )
