"""Message Catalog — centralized, culture-specific validation texts.

Invariants:
    - All entries are pure data (no IO, no computation beyond formatting)
    - The VALIDATION scope defines every RuleName in every Locale (generic fallback tier)
    - Form scopes only hold field-specific overrides keyed "{Field}{RuleName}"
    - Templates use positional str.format placeholders ({0}) for rule arguments

Design Decisions:
    - Python dicts over resource files: the catalog ships with the package and
      is testable without a loader
    - Keys kept in their display spelling; lookups compare them case-insensitively
      through build_index()
"""

from typing import Mapping

from invoice_forms.core.domain_types import Locale, MessageScope

Catalog = Mapping[MessageScope, Mapping[Locale, Mapping[str, str]]]
CatalogIndex = dict[MessageScope, dict[Locale, dict[str, str]]]


# --- Generic rule vocabulary (fallback tier) ---------------------------------

_VALIDATION_MESSAGES: dict[Locale, dict[str, str]] = {
    Locale.CS: {
        "Required": "Toto pole je povinné.",
        "Length": "Hodnota musí mít přesně {0} znaků.",
        "MinLength": "Hodnota musí mít alespoň {0} znaků.",
        "MaxLength": "Hodnota nesmí být delší než {0} znaků.",
        "Format": "Hodnota nemá správný formát.",
        "DigitsExactLength": "Hodnota musí obsahovat přesně {0} číslic.",
        "InvalidModulo11": "Číslo účtu neodpovídá kontrole modulo 11.",
    },
    Locale.EN: {
        "Required": "This field is required.",
        "Length": "The value must be exactly {0} characters long.",
        "MinLength": "The value must be at least {0} characters long.",
        "MaxLength": "The value must not be longer than {0} characters.",
        "Format": "The value has an invalid format.",
        "DigitsExactLength": "The value must contain exactly {0} digits.",
        "InvalidModulo11": "The account number fails the modulo 11 check.",
    },
}


# --- Person form overrides (specific tier) -----------------------------------

_PERSON_FORM_MESSAGES: dict[Locale, dict[str, str]] = {
    Locale.CS: {
        "NameRequired": "Jméno je povinné.",
        "NameMaxLength": "Jméno nesmí být delší než {0} znaků.",
        "IdentificationNumberDigitsExactLength": "IČO musí mít {0} číslic.",
        "IdentificationNumberFormat": "IČO musí být číslo o délce 8.",
        "TaxNumberMaxLength": "DIČ nesmí být delší než {0} znaků.",
        "AccountNumberFormat": "Číslo účtu musí být číslo.",
        "AccountNumberInvalidModulo11": "Číslo účtu není platné.",
        "BankCodeDigitsExactLength": "Kód banky má {0} číslice.",
        "BankCodeFormat": "Kód banky smí obsahovat pouze číslice.",
        "IbanFormat": "IBAN musí být platný.",
        "TelephoneFormat": "Telefonní číslo není platné.",
        "MailFormat": "E-mail není platný.",
        "ZipFormat": "PSČ musí být ve formátu 12345 nebo 123 45.",
        "CountryRequired": "Stát je povinný.",
    },
    Locale.EN: {
        "NameRequired": "Name is required.",
        "NameMaxLength": "Name must not be longer than {0} characters.",
        "IdentificationNumberDigitsExactLength": "Company ID must have {0} digits.",
        "IdentificationNumberFormat": "Company ID must be a number of length 8.",
        "TaxNumberMaxLength": "VAT ID must not be longer than {0} characters.",
        "AccountNumberFormat": "Account number must be numeric.",
        "AccountNumberInvalidModulo11": "Account number is not valid.",
        "BankCodeDigitsExactLength": "Bank code has {0} digits.",
        "BankCodeFormat": "Bank code may contain digits only.",
        "IbanFormat": "IBAN must be valid.",
        "TelephoneFormat": "Telephone number is not valid.",
        "MailFormat": "E-mail is not valid.",
        "ZipFormat": "Postal code must be in the format 12345 or 123 45.",
        "CountryRequired": "Country is required.",
    },
}


MESSAGE_CATALOG: Catalog = {
    MessageScope.VALIDATION: _VALIDATION_MESSAGES,
    MessageScope.PERSON_FORM: _PERSON_FORM_MESSAGES,
}


# --- Public API ---------------------------------------------------------------


def build_index(catalog: Catalog) -> CatalogIndex:
    """Re-key a catalog by casefolded message key for case-insensitive lookup."""
    return {
        scope: {
            locale: {key.casefold(): template for key, template in messages.items()}
            for locale, messages in per_locale.items()
        }
        for scope, per_locale in catalog.items()
    }


def find_template(
    index: CatalogIndex, scope: MessageScope, locale: Locale, key: str,
) -> str | None:
    """Return the raw template for key, or None when the culture lacks it."""
    return index.get(scope, {}).get(locale, {}).get(key.casefold())
