"""Blur Tracker — records which fields the user has left since the last reset.

Invariants:
    - Set semantics: a field is tracked at most once
    - Keys compared case-insensitively ("Telephone" == "telephone")
    - All operations are total: no errors for unknown or absent fields

Design Decisions:
    - Dataclass keyed by casefolded token: pure, deterministic, testable without mocks
    - Original spelling kept alongside the token so snapshots read naturally
"""

from dataclasses import dataclass, field

from invoice_forms.core.domain_types import field_token


@dataclass
class BlurTracker:
    """Per-form blur state — one instance per form session."""

    # token -> field key as first marked
    _blurred: dict[str, str] = field(default_factory=dict)

    def is_blurred(self, field_key: str) -> bool:
        return field_token(field_key) in self._blurred

    def mark_blurred(self, field_key: str) -> None:
        self._blurred.setdefault(field_token(field_key), field_key)

    def mark_focused(self, field_key: str) -> None:
        """Re-entering a field revokes its blurred state."""
        self._blurred.pop(field_token(field_key), None)

    def reset_form(self, prefix: str = "") -> None:
        """Clear all blur state, or only fields whose key starts with prefix.

        Used when a form instance is reused for another entity so stale
        blur state does not leak across them.
        """
        if not prefix:
            self._blurred.clear()
            return
        token_prefix = field_token(prefix)
        for token in [t for t in self._blurred if t.startswith(token_prefix)]:
            del self._blurred[token]

    @property
    def blurred_fields(self) -> tuple[str, ...]:
        return tuple(sorted(self._blurred.values(), key=field_token))
