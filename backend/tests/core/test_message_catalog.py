"""Message catalog tests — pure data coverage checks.

Tests cover:
    - Every RuleName has a generic message in every Locale
    - Form scope keys follow the "{Field}{RuleName}" convention
    - Templates with arguments format with positional args
    - find_template is case-insensitive and returns None for unknown keys
"""

from invoice_forms.core.domain_types import Locale, MessageScope, RuleName
from invoice_forms.core.message_catalog import (
    MESSAGE_CATALOG,
    build_index,
    find_template,
)

_INDEX = build_index(MESSAGE_CATALOG)


def test_generic_scope_covers_every_rule_in_every_locale():
    for locale in Locale:
        for rule in RuleName:
            template = find_template(_INDEX, MessageScope.VALIDATION, locale, rule.value)
            assert template, f"missing {rule.value} for {locale.value}"


def test_person_form_keys_end_with_a_rule_name():
    rule_names = tuple(rule.value for rule in RuleName)
    for messages in MESSAGE_CATALOG[MessageScope.PERSON_FORM].values():
        for key in messages:
            assert key.endswith(rule_names), key


def test_person_form_locales_define_same_keys():
    person = MESSAGE_CATALOG[MessageScope.PERSON_FORM]
    assert set(person[Locale.CS]) == set(person[Locale.EN])


def test_length_templates_take_one_positional_argument():
    template = find_template(_INDEX, MessageScope.VALIDATION, Locale.EN, "MaxLength")
    assert "200" in template.format(200)


def test_find_template_is_case_insensitive():
    upper = find_template(_INDEX, MessageScope.PERSON_FORM, Locale.CS, "TELEPHONEFORMAT")
    exact = find_template(_INDEX, MessageScope.PERSON_FORM, Locale.CS, "TelephoneFormat")
    assert upper == exact is not None


def test_find_template_unknown_key_returns_none():
    assert find_template(_INDEX, MessageScope.VALIDATION, Locale.EN, "NoSuchRule") is None
