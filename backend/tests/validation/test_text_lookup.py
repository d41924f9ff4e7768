"""CatalogTextLookup tests — locale binding and neutral fallback.

Tests cover:
    - Lookup formats positional args into the template
    - Missing keys report found=False with the key as text
    - Culture falls back to the neutral locale when a key is missing
    - Locale can be switched on an existing lookup
"""

from invoice_forms.core.domain_types import Locale, MessageScope
from invoice_forms.validation.text_lookup import CatalogTextLookup, LookupResult


def test_lookup_formats_arguments():
    lookup = CatalogTextLookup(MessageScope.VALIDATION, Locale.EN)
    result = lookup.lookup("MaxLength", 12)
    assert result == LookupResult(True, "The value must not be longer than 12 characters.")


def test_lookup_in_czech():
    lookup = CatalogTextLookup(MessageScope.VALIDATION, Locale.CS)
    assert lookup.lookup("Required").text == "Toto pole je povinné."


def test_missing_key_returns_key_as_text():
    lookup = CatalogTextLookup(MessageScope.PERSON_FORM, Locale.EN)
    assert lookup.lookup("StreetFormat") == LookupResult(False, "StreetFormat")


def test_lookup_is_case_insensitive():
    lookup = CatalogTextLookup(MessageScope.PERSON_FORM, Locale.EN)
    assert lookup.lookup("telephoneformat").text == "Telephone number is not valid."


def test_missing_culture_key_falls_back_to_neutral_locale():
    catalog = {
        MessageScope.VALIDATION: {
            Locale.CS: {},
            Locale.EN: {"Format": "Bad format."},
        },
    }
    lookup = CatalogTextLookup(MessageScope.VALIDATION, Locale.CS, catalog=catalog)
    assert lookup.lookup("Format") == LookupResult(True, "Bad format.")


def test_switching_locale_changes_texts():
    lookup = CatalogTextLookup(MessageScope.VALIDATION, Locale.EN)
    lookup.locale = Locale.CS
    assert lookup.lookup("Format").text == "Hodnota nemá správný formát."
