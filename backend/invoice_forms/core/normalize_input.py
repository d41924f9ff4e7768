"""Input Normalizers — pure string transforms applied before a value reaches the rules.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - None or empty input always yields ""
    - normalize_text steps run in a fixed order:
      trim -> collapse whitespace -> remove diacritics -> casing -> truncate
    - group_digits output contains only digits and single spaces

Design Decisions:
    - Options as a frozen dataclass: one immutable value per input control
    - Diacritics removed via NFD + drop of non-spacing marks, then recomposed (NFC)
      so unaffected characters keep their canonical form
"""

import re
import unicodedata
from dataclasses import dataclass
from typing import Sequence

from invoice_forms.core.checksum import digits_only
from invoice_forms.core.domain_types import TextCasing

_WHITESPACE_RUN = re.compile(r"\s+")
# Title case words are separated by whitespace or hyphens ("jean-luc" -> "Jean-Luc")
_TITLE_WORD = re.compile(r"[^\s\-]+")

POSTAL_CODE_BLOCKS = (3,)
TELEPHONE_BLOCKS = (3, 3, 3)


@dataclass(frozen=True)
class TextInputOptions:
    """Per-control normalization switches."""
    trim: bool = True
    collapse_whitespace: bool = True
    remove_diacritics: bool = False
    casing: TextCasing = TextCasing.NONE
    max_length: int | None = None


def normalize_text(raw: str | None, options: TextInputOptions | None = None) -> str:
    """Run the enabled normalization steps over raw input."""
    if not raw:
        return ""
    opts = options or TextInputOptions()

    result = raw
    if opts.trim:
        result = result.strip()
    if opts.collapse_whitespace:
        result = _WHITESPACE_RUN.sub(" ", result)
    if opts.remove_diacritics:
        result = strip_diacritics(result)
    result = apply_casing(result, opts.casing)
    return truncate(result, opts.max_length)


def strip_diacritics(text: str) -> str:
    """'Žluťoučký kůň' -> 'Zlutoucky kun'."""
    decomposed = unicodedata.normalize("NFD", text)
    kept = "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")
    return unicodedata.normalize("NFC", kept)


def apply_casing(text: str, casing: TextCasing) -> str:
    if casing == TextCasing.LOWER:
        return text.lower()
    if casing == TextCasing.UPPER:
        return text.upper()
    if casing == TextCasing.TITLE:
        return _TITLE_WORD.sub(_capitalize_word, text.lower())
    return text


def _capitalize_word(match: re.Match) -> str:
    word = match.group(0)
    return word[:1].upper() + word[1:]


def truncate(text: str, max_length: int | None) -> str:
    """Cut to max_length characters; None or < 1 disables truncation."""
    if max_length is None or max_length < 1:
        return text
    return text[:max_length]


def group_digits(raw: str | None, block_sizes: Sequence[int]) -> str:
    """Keep digits only and space them into blocks consumed left to right.

    Digits left over after the last block form one final ungrouped block:
    group_digits("1234567890", [3, 3, 4]) == "123 456 7890"
    group_digits("123456789012", [3, 3]) == "123 456 789012"
    """
    if not raw:
        return ""

    digits = digits_only(raw)
    if not digits or not block_sizes:
        return digits

    parts: list[str] = []
    index = 0
    for size in block_sizes:
        if index >= len(digits):
            break
        if size < 1:
            continue
        parts.append(digits[index:index + size])
        index += size

    if index < len(digits):
        parts.append(digits[index:])

    return " ".join(parts)


def format_postal_code(raw: str | None) -> str:
    """'12345' -> '123 45'."""
    return group_digits(raw, POSTAL_CODE_BLOCKS)


def format_telephone(raw: str | None) -> str:
    """'123456789' -> '123 456 789'."""
    return group_digits(raw, TELEPHONE_BLOCKS)
