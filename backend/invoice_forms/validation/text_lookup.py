"""Text Lookup — the collaborator MessageResolver reads localized texts through.

Invariants:
    - A lookup is bound to ONE scope and ONE explicit locale (no ambient culture)
    - Never raises for a missing key: returns LookupResult(found=False, text=key)
    - Culture fallback: requested locale first, then the neutral locale

Design Decisions:
    - Protocol over ABC: resolvers accept any object with lookup(), tests pass stubs
    - Locale is a mutable attribute so a form session can switch culture in place
"""

from dataclasses import dataclass
from typing import Any, Protocol

from invoice_forms.core.domain_types import Locale, MessageScope, NEUTRAL_LOCALE
from invoice_forms.core.message_catalog import (
    Catalog,
    MESSAGE_CATALOG,
    build_index,
    find_template,
)


@dataclass(frozen=True)
class LookupResult:
    found: bool
    text: str


class TextLookup(Protocol):
    """Resolve a message key to localized, interpolated text."""

    def lookup(self, key: str, *args: Any) -> LookupResult: ...


_DEFAULT_INDEX = build_index(MESSAGE_CATALOG)


class CatalogTextLookup:
    """TextLookup backed by the in-package message catalog."""

    def __init__(
        self,
        scope: MessageScope,
        locale: Locale,
        catalog: Catalog | None = None,
    ):
        self.scope = scope
        self.locale = locale
        self._index = _DEFAULT_INDEX if catalog is None else build_index(catalog)

    def lookup(self, key: str, *args: Any) -> LookupResult:
        template = find_template(self._index, self.scope, self.locale, key)
        if template is None and self.locale != NEUTRAL_LOCALE:
            template = find_template(self._index, self.scope, NEUTRAL_LOCALE, key)
        if template is None:
            return LookupResult(found=False, text=key)
        return LookupResult(found=True, text=template.format(*args))

    def __repr__(self) -> str:
        return f"CatalogTextLookup(scope={self.scope.value!r}, locale={self.locale.value!r})"
