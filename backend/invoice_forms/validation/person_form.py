"""Person Form — rule wiring and input normalizers for the customer/supplier form.

Invariants:
    - Field names match the person DTO ("Name", "IdentificationNumber", ...)
      and the "{Field}{Rule}" keys of the PERSON_FORM message scope
    - Per field, cheap presence/length rules are registered before shape rules
    - Normalizers only reshape input; they never decide validity
"""

from typing import Callable

from invoice_forms.core.domain_types import TextCasing
from invoice_forms.core.normalize_input import (
    TextInputOptions,
    format_postal_code,
    format_telephone,
    normalize_text,
)
from invoice_forms.validation.form_validator import FormValidator

NAME = "Name"
IDENTIFICATION_NUMBER = "IdentificationNumber"
TAX_NUMBER = "TaxNumber"
ACCOUNT_NUMBER = "AccountNumber"
BANK_CODE = "BankCode"
IBAN = "Iban"
TELEPHONE = "Telephone"
MAIL = "Mail"
STREET = "Street"
ZIP = "Zip"
CITY = "City"
COUNTRY = "Country"
NOTE = "Note"

IDENTIFICATION_NUMBER_PATTERN = r"^\d{8}$"
ACCOUNT_NUMBER_PATTERN = r"^\d{1,20}$"
BANK_CODE_PATTERN = r"^\d{4}$"
IBAN_PATTERN = r"^[A-Z0-9]{15,34}$"
TELEPHONE_PATTERN = r"^\d{3} ?\d{3} ?\d{3}$"
MAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
ZIP_PATTERN = r"^\d{3} ?\d{2}$"


def build_person_form(validator: FormValidator) -> FormValidator:
    """Register every person form rule on validator and return it."""
    validator.required(NAME)
    validator.max_length(NAME, 200)

    validator.digits_exact_length(IDENTIFICATION_NUMBER, 8)
    validator.format(IDENTIFICATION_NUMBER, IDENTIFICATION_NUMBER_PATTERN, required_digits=8)

    validator.max_length(TAX_NUMBER, 12)

    validator.format(ACCOUNT_NUMBER, ACCOUNT_NUMBER_PATTERN)
    validator.account_number_modulo11(ACCOUNT_NUMBER)

    validator.digits_exact_length(BANK_CODE, 4)
    validator.format(BANK_CODE, BANK_CODE_PATTERN, required_digits=4)

    validator.max_length(IBAN, 34)
    validator.format(IBAN, IBAN_PATTERN, required_digits=None)

    validator.format(TELEPHONE, TELEPHONE_PATTERN, required_digits=9)
    validator.format(MAIL, MAIL_PATTERN, required_digits=None)
    validator.max_length(STREET, 200)
    validator.format(ZIP, ZIP_PATTERN, required_digits=5)
    validator.max_length(CITY, 100)
    validator.required(COUNTRY)
    validator.max_length(NOTE, 500)
    return validator


def _text(options: TextInputOptions) -> Callable[[str | None], str]:
    return lambda raw: normalize_text(raw, options)


PERSON_NORMALIZERS: dict[str, Callable[[str | None], str]] = {
    NAME: _text(TextInputOptions(max_length=200)),
    TAX_NUMBER: _text(TextInputOptions(casing=TextCasing.UPPER, max_length=12)),
    IBAN: _text(TextInputOptions(casing=TextCasing.UPPER, max_length=34)),
    MAIL: _text(TextInputOptions(casing=TextCasing.LOWER)),
    STREET: _text(TextInputOptions(max_length=200)),
    CITY: _text(TextInputOptions(casing=TextCasing.TITLE, max_length=100)),
    NOTE: _text(TextInputOptions(collapse_whitespace=False, max_length=500)),
    TELEPHONE: format_telephone,
    ZIP: format_postal_code,
}
