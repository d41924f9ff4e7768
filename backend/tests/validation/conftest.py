"""Validation test fixtures — catalog-backed resolver, blur tracker, validator.

Design Decisions:
    - Real CatalogTextLookup in English: assertions read the actual catalog texts
    - StubLookup (stub_lookup.py) records calls so fallback order can be
      asserted without mocks
"""

import pytest

from invoice_forms.core.domain_types import Locale, MessageScope
from invoice_forms.validation.blur_tracker import BlurTracker
from invoice_forms.validation.form_validator import FormValidator
from invoice_forms.validation.message_resolver import MessageResolver
from invoice_forms.validation.text_lookup import CatalogTextLookup


@pytest.fixture
def messages():
    return MessageResolver(
        CatalogTextLookup(MessageScope.PERSON_FORM, Locale.EN),
        CatalogTextLookup(MessageScope.VALIDATION, Locale.EN),
    )


@pytest.fixture
def blur():
    return BlurTracker()


@pytest.fixture
def validator(messages, blur):
    return FormValidator(messages, blur)
