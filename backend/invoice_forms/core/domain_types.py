"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - FieldKey is compared case-insensitively everywhere (use field_token())
    - ErrorList is never None; an empty list means "valid"
    - All rule names and cultures encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and compose into message keys without converters
"""

from enum import Enum
from typing import Any, Awaitable, Callable, NewType


# ─── Identity Types ──────────────────────────────────────────────

FieldKey = NewType("FieldKey", str)


# ─── Value Types ─────────────────────────────────────────────────

ErrorList = list[str]
ValidationRule = Callable[[Any], Awaitable[ErrorList]]


# ─── Enums ───────────────────────────────────────────────────────

class RuleName(str, Enum):
    """Built-in rule names — also the generic message keys."""
    REQUIRED = "Required"
    LENGTH = "Length"
    MIN_LENGTH = "MinLength"
    MAX_LENGTH = "MaxLength"
    FORMAT = "Format"
    DIGITS_EXACT_LENGTH = "DigitsExactLength"
    INVALID_MODULO11 = "InvalidModulo11"


class Locale(str, Enum):
    """Cultures shipped with the message catalog."""
    CS = "cs"
    EN = "en"


NEUTRAL_LOCALE = Locale.EN


class TextCasing(str, Enum):
    """Casing step of the text normalizer."""
    NONE = "none"
    LOWER = "lower"
    UPPER = "upper"
    TITLE = "title"


class MessageScope(str, Enum):
    """Catalog namespaces a text lookup can be bound to."""
    VALIDATION = "validation"
    PERSON_FORM = "person_form"


def field_token(field: str) -> str:
    """Comparison token for a field key (case-insensitive)."""
    return field.casefold()
