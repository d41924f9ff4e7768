"""Rule Library — factories producing async validation rules for one field.

Invariants:
    - Every rule has the shape: async (value) -> list[str]; empty list = valid
    - None, "" and whitespace-only values are ABSENT: only Required reports them
    - Rules never mutate shared state; gated rules only READ the BlurTracker
    - chain_rules runs rules in order and stops at the first non-empty result

Design Decisions:
    - Closures over rule classes: a rule is just a coroutine function, the factory
      captures its parameters (ADR: one rule shape for sync and async checks)
    - Gated rules (Format, DigitsExactLength, InvalidModulo11) stay silent until
      the user plausibly finished typing: field blurred, or enough digits typed
    - Text rules coerce non-str values with str() instead of rejecting them
"""

import re
from typing import Any

from invoice_forms.core.checksum import digit_count, is_valid_modulo11
from invoice_forms.core.domain_types import ErrorList, RuleName, ValidationRule
from invoice_forms.validation.blur_tracker import BlurTracker
from invoice_forms.validation.message_resolver import MessageResolver


# ─── Helpers ─────────────────────────────────────────────────────

def _present_text(value: Any) -> str | None:
    """Text form of value, or None when the value is absent."""
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    if not text.strip():
        return None
    return text


def _named(rule: ValidationRule, rule_name: RuleName, field: str) -> ValidationRule:
    rule.__name__ = rule.__qualname__ = f"{rule_name.value}[{field}]"
    return rule


# ─── Presence ────────────────────────────────────────────────────

def required_rule(messages: MessageResolver, field: str) -> ValidationRule:
    """Fail on None or blank text. Non-text values only need to be non-None."""

    async def rule(value: Any) -> ErrorList:
        missing = value is None or (isinstance(value, str) and not value.strip())
        if missing:
            return [messages.resolve(field, RuleName.REQUIRED)]
        return []

    return _named(rule, RuleName.REQUIRED, field)


# ─── Length ──────────────────────────────────────────────────────

def length_rule(messages: MessageResolver, field: str, length: int) -> ValidationRule:
    async def rule(value: Any) -> ErrorList:
        text = _present_text(value)
        if text is None or len(text) == length:
            return []
        return [messages.resolve(field, RuleName.LENGTH, length)]

    return _named(rule, RuleName.LENGTH, field)


def min_length_rule(messages: MessageResolver, field: str, min_length: int) -> ValidationRule:
    async def rule(value: Any) -> ErrorList:
        text = _present_text(value)
        if text is None or len(text) >= min_length:
            return []
        return [messages.resolve(field, RuleName.MIN_LENGTH, min_length)]

    return _named(rule, RuleName.MIN_LENGTH, field)


def max_length_rule(messages: MessageResolver, field: str, max_length: int) -> ValidationRule:
    async def rule(value: Any) -> ErrorList:
        text = _present_text(value)
        if text is None or len(text) <= max_length:
            return []
        return [messages.resolve(field, RuleName.MAX_LENGTH, max_length)]

    return _named(rule, RuleName.MAX_LENGTH, field)


# ─── Blur-gated shape rules ──────────────────────────────────────

def format_rule(
    messages: MessageResolver,
    blur: BlurTracker,
    field: str,
    pattern: str | re.Pattern[str],
    required_digits: int | None = 0,
) -> ValidationRule:
    """Match against pattern once the field is blurred or has enough digits.

    required_digits lets formatted input ("123 456 789") be checked as soon as
    the last digit is typed, separators ignored. None gates on blur alone.
    """
    compiled = re.compile(pattern)

    async def rule(value: Any) -> ErrorList:
        text = _present_text(value)
        if text is None:
            return []
        if not blur.is_blurred(field) and (
            required_digits is None or digit_count(text) < required_digits
        ):
            return []
        if compiled.search(text) is None:
            return [messages.resolve(field, RuleName.FORMAT)]
        return []

    return _named(rule, RuleName.FORMAT, field)


def digits_exact_length_rule(
    messages: MessageResolver, blur: BlurTracker, field: str, exact_digits: int,
) -> ValidationRule:
    async def rule(value: Any) -> ErrorList:
        text = _present_text(value)
        if text is None:
            return []
        digits = digit_count(text)
        if digits < exact_digits and not blur.is_blurred(field):
            return []
        if digits != exact_digits:
            return [messages.resolve(field, RuleName.DIGITS_EXACT_LENGTH, exact_digits)]
        return []

    return _named(rule, RuleName.DIGITS_EXACT_LENGTH, field)


def account_number_modulo11_rule(
    messages: MessageResolver, blur: BlurTracker, field: str,
) -> ValidationRule:
    """Bank account checksum, only evaluated after the field was left."""

    async def rule(value: Any) -> ErrorList:
        text = _present_text(value)
        if text is None or not blur.is_blurred(field):
            return []
        if not is_valid_modulo11(text):
            return [messages.resolve(field, RuleName.INVALID_MODULO11)]
        return []

    return _named(rule, RuleName.INVALID_MODULO11, field)


# ─── Composition ─────────────────────────────────────────────────

def chain_rules(*rules: ValidationRule) -> ValidationRule:
    """Compose ad hoc rules into one: sequential, first error wins."""

    async def chained(value: Any) -> ErrorList:
        for rule in rules:
            errors = await rule(value)
            if errors:
                return list(errors)
        return []

    return chained
