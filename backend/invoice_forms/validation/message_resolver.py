"""Message Resolver — two-tier (field-specific -> generic) validation message lookup.

Invariants:
    - Specific key is "{field}{rule}" in the form scope; generic key is "{rule}"
      in the shared validation scope; both receive the same interpolation args
    - Always returns a non-empty string unless strict mode raises
    - Exceptions raised by a lookup propagate untouched (configuration fault)

Design Decisions:
    - Lenient by default: a missing generic key returns the lookup's own failure
      text (the key itself) and logs a warning, so a form keeps working while a
      translation is missing
    - strict=True raises MessageNotFoundError instead; enabled in development
      through Settings.strict_messages
"""

import logging
from typing import Any

from invoice_forms.core.domain_types import RuleName
from invoice_forms.core.errors import ErrorContext, MessageNotFoundError
from invoice_forms.validation.text_lookup import TextLookup

logger = logging.getLogger(__name__)


class MessageResolver:
    """Resolve human-facing rule messages through two text lookups."""

    def __init__(self, specific: TextLookup, generic: TextLookup, strict: bool = False):
        self.specific = specific
        self.generic = generic
        self.strict = strict

    def resolve(self, field: str, rule_name: RuleName | str, *args: Any) -> str:
        rule_key = rule_name.value if isinstance(rule_name, RuleName) else rule_name
        specific_key = f"{field}{rule_key}"

        specific = self.specific.lookup(specific_key, *args)
        if specific.found:
            return specific.text or rule_key

        generic = self.generic.lookup(rule_key, *args)
        if generic.found:
            return generic.text or rule_key

        if self.strict:
            raise MessageNotFoundError(
                specific_key, rule_key,
                context=ErrorContext(field=field, rule=rule_key),
            )
        logger.warning(
            f"No message for '{specific_key}' or '{rule_key}', using raw key",
            extra={"field": field, "rule": rule_key},
        )
        return generic.text or rule_key
