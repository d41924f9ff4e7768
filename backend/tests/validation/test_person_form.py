"""Person form tests — rule wiring and normalizers end to end through FormValidator.

Tests cover:
    - Empty form reports only the required fields
    - A fully filled valid form has no errors
    - Gated fields stay silent while typing and report after blur
    - Field-specific messages come from the person_form scope, in both cultures
    - Normalizers reshape input before validation
"""

from invoice_forms.core.domain_types import Locale, MessageScope
from invoice_forms.validation.blur_tracker import BlurTracker
from invoice_forms.validation.form_validator import FormValidator
from invoice_forms.validation.message_resolver import MessageResolver
from invoice_forms.validation.person_form import (
    ACCOUNT_NUMBER,
    BANK_CODE,
    CITY,
    IBAN,
    IDENTIFICATION_NUMBER,
    MAIL,
    NOTE,
    PERSON_NORMALIZERS,
    TELEPHONE,
    ZIP,
    build_person_form,
)
from invoice_forms.validation.text_lookup import CatalogTextLookup

VALID_PERSON = {
    "Name": "Jana Nováková",
    "IdentificationNumber": "12345678",
    "TaxNumber": "CZ12345678",
    "AccountNumber": "123456",
    "BankCode": "0800",
    "Iban": "CZ6508000000192000145399",
    "Telephone": "123 456 789",
    "Mail": "jana@example.cz",
    "Street": "Dlouhá 12",
    "Zip": "110 00",
    "City": "Praha",
    "Country": "CZ",
    "Note": "",
}


async def test_registers_every_person_field(validator):
    build_person_form(validator)
    assert set(validator.registered_fields) == set(VALID_PERSON)


async def test_empty_form_reports_required_fields_only(validator):
    build_person_form(validator)
    results = await validator.validate_form({})
    failing = {name: errors for name, errors in results.items() if errors}
    assert failing == {
        "Name": ["Name is required."],
        "Country": ["Country is required."],
    }


async def test_valid_person_has_no_errors(validator, blur):
    build_person_form(validator)
    for name in VALID_PERSON:
        blur.mark_blurred(name)
    results = await validator.validate_form(VALID_PERSON)
    assert all(errors == [] for errors in results.values()), results


async def test_telephone_checked_once_nine_digits_typed(validator):
    build_person_form(validator)
    assert await validator.validate_field(TELEPHONE, "123 45") == []
    assert await validator.validate_field(TELEPHONE, "123456789") == []
    assert await validator.validate_field(TELEPHONE, "12-3456789") == [
        "Telephone number is not valid."
    ]


async def test_telephone_reported_after_blur(validator, blur):
    build_person_form(validator)
    blur.mark_blurred(TELEPHONE)
    assert await validator.validate_field(TELEPHONE, "123 45") == [
        "Telephone number is not valid."
    ]


async def test_account_number_format_before_checksum(validator, blur):
    build_person_form(validator)
    blur.mark_blurred(ACCOUNT_NUMBER)
    assert await validator.validate_field(ACCOUNT_NUMBER, "12-34") == [
        "Account number must be numeric."
    ]
    assert await validator.validate_field(ACCOUNT_NUMBER, "00000005") == [
        "Account number is not valid."
    ]
    assert await validator.validate_field(ACCOUNT_NUMBER, "123456") == []


async def test_checksum_waits_for_blur(validator):
    build_person_form(validator)
    assert await validator.validate_field(ACCOUNT_NUMBER, "00000005") == []


async def test_identification_number_digit_count(validator, blur):
    build_person_form(validator)
    assert await validator.validate_field(IDENTIFICATION_NUMBER, "1234") == []
    blur.mark_blurred(IDENTIFICATION_NUMBER)
    assert await validator.validate_field(IDENTIFICATION_NUMBER, "1234") == [
        "Company ID must have 8 digits."
    ]


async def test_bank_code_too_long_reported_while_typing(validator):
    build_person_form(validator)
    assert await validator.validate_field(BANK_CODE, "08000") == ["Bank code has 4 digits."]


async def test_mail_and_iban_gated_on_blur(validator, blur):
    build_person_form(validator)
    assert await validator.validate_field(MAIL, "jana") == []
    assert await validator.validate_field(IBAN, "cz65") == []
    blur.mark_blurred(MAIL)
    blur.mark_blurred(IBAN)
    assert await validator.validate_field(MAIL, "jana") == ["E-mail is not valid."]
    assert await validator.validate_field(IBAN, "cz65") == ["IBAN must be valid."]


async def test_zip_accepts_both_spellings(validator, blur):
    build_person_form(validator)
    blur.mark_blurred(ZIP)
    assert await validator.validate_field(ZIP, "11000") == []
    assert await validator.validate_field(ZIP, "110 00") == []
    assert await validator.validate_field(ZIP, "1100") == [
        "Postal code must be in the format 12345 or 123 45."
    ]


async def test_czech_messages():
    blur = BlurTracker()
    validator = build_person_form(FormValidator(
        MessageResolver(
            CatalogTextLookup(MessageScope.PERSON_FORM, Locale.CS),
            CatalogTextLookup(MessageScope.VALIDATION, Locale.CS),
        ),
        blur,
    ))
    blur.mark_blurred(TELEPHONE)
    assert await validator.validate_field(TELEPHONE, "1") == ["Telefonní číslo není platné."]
    assert await validator.validate_field(NOTE, "x" * 501) == [
        "Hodnota nesmí být delší než 500 znaků."
    ]


# --- Normalizers --------------------------------------------------------------

def test_city_normalized_to_title_case():
    assert PERSON_NORMALIZERS[CITY]("  nové   město  ") == "Nové Město"


def test_mail_lowercased_and_iban_uppercased():
    assert PERSON_NORMALIZERS[MAIL](" Jana@Example.CZ ") == "jana@example.cz"
    assert PERSON_NORMALIZERS[IBAN]("cz65 0800") == "CZ65 0800"


def test_telephone_and_zip_grouped():
    assert PERSON_NORMALIZERS[TELEPHONE]("123456789") == "123 456 789"
    assert PERSON_NORMALIZERS[ZIP]("11000") == "110 00"


def test_note_keeps_inner_whitespace():
    assert PERSON_NORMALIZERS[NOTE]("  line one\n\nline two  ") == "line one\n\nline two"
