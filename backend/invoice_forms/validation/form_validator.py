"""Form Validator — binds rules to named fields, runs them, caches the last result.

Invariants:
    - Rule lists are append-only; rules run in registration order
    - validate_field awaits each rule before the next and stops at the first error
      (short-circuit, not accumulate-all)
    - get_errors never triggers validation; unknown fields read as []
    - A validation superseded by a newer call for the same field (or by
      clear_errors) does not write the cache
    - Field keys are case-insensitive

Design Decisions:
    - Per-field generation counter instead of task cancellation: a stale run
      finishes but its result is dropped, the cache always reflects the newest call
    - Optional per-rule timeout turns a hung rule into RuleTimeoutError, the same
      fatal class as a failing text lookup
    - Builder methods (required, length, ...) create AND register, returning the
      rule so a form can also use it inline
"""

import asyncio
import logging
import re
from typing import Any, Mapping

from invoice_forms.core.domain_types import ErrorList, ValidationRule, field_token
from invoice_forms.core.errors import RuleTimeoutError
from invoice_forms.validation import rules
from invoice_forms.validation.blur_tracker import BlurTracker
from invoice_forms.validation.message_resolver import MessageResolver

logger = logging.getLogger(__name__)


class FormValidator:
    """Per-form field validator registry."""

    def __init__(
        self,
        messages: MessageResolver,
        blur_tracker: BlurTracker,
        rule_timeout_seconds: float | None = None,
    ):
        self.messages = messages
        self.blur_tracker = blur_tracker
        self.rule_timeout_seconds = rule_timeout_seconds
        self._rules: dict[str, list[ValidationRule]] = {}
        self._names: dict[str, str] = {}
        self._errors: dict[str, ErrorList] = {}
        self._generations: dict[str, int] = {}

    # ─── Registry ────────────────────────────────────────────────

    def register_validator(self, field: str, rule: ValidationRule) -> None:
        token = field_token(field)
        self._names.setdefault(token, field)
        self._rules.setdefault(token, []).append(rule)

    @property
    def registered_fields(self) -> list[str]:
        return list(self._names.values())

    def rule_count(self, field: str) -> int:
        return len(self._rules.get(field_token(field), ()))

    # ─── Execution ───────────────────────────────────────────────

    async def validate_field(self, field: str, value: Any) -> ErrorList:
        """Run the field's rules in order; cache and return the first errors."""
        token = field_token(field)
        generation = self._generations.get(token, 0) + 1
        self._generations[token] = generation

        errors: ErrorList = []
        for rule in list(self._rules.get(token, ())):
            result = await self._run_rule(field, rule, value)
            if result:
                errors = list(result)
                logger.debug(
                    f"Field '{field}' failed {rule.__name__}, skipping remaining rules",
                    extra={"field": field, "rule": rule.__name__},
                )
                break

        if self._generations.get(token) != generation:
            logger.warning(
                f"Discarding stale validation result for '{field}'",
                extra={"field": field},
            )
            return errors

        self._errors[token] = errors
        return list(errors)

    async def validate_form(self, values: Mapping[str, Any]) -> dict[str, ErrorList]:
        """Validate every registered field; fields run concurrently."""
        by_token = {field_token(name): value for name, value in values.items()}
        fields = self.registered_fields
        results = await asyncio.gather(*(
            self.validate_field(name, by_token.get(field_token(name)))
            for name in fields
        ))
        return dict(zip(fields, results))

    async def _run_rule(self, field: str, rule: ValidationRule, value: Any) -> ErrorList:
        if self.rule_timeout_seconds is None:
            return await rule(value)
        try:
            return await asyncio.wait_for(rule(value), self.rule_timeout_seconds)
        except asyncio.TimeoutError:
            raise RuleTimeoutError(field, self.rule_timeout_seconds) from None

    # ─── Cached results ──────────────────────────────────────────

    def get_errors(self, field: str) -> ErrorList:
        return list(self._errors.get(field_token(field), ()))

    def clear_errors(self, prefix: str = "") -> None:
        """Drop cached results (all, or fields starting with prefix)."""
        token_prefix = field_token(prefix)
        for token in set(self._errors) | set(self._generations):
            if token.startswith(token_prefix):
                self._errors.pop(token, None)
                # in-flight runs for this field must not repopulate the cache
                self._generations[token] = self._generations.get(token, 0) + 1

    # ─── Rule builders (create + register) ───────────────────────

    def required(self, field: str) -> ValidationRule:
        return self._add(field, rules.required_rule(self.messages, field))

    def length(self, field: str, length: int) -> ValidationRule:
        return self._add(field, rules.length_rule(self.messages, field, length))

    def min_length(self, field: str, min_length: int) -> ValidationRule:
        return self._add(field, rules.min_length_rule(self.messages, field, min_length))

    def max_length(self, field: str, max_length: int) -> ValidationRule:
        return self._add(field, rules.max_length_rule(self.messages, field, max_length))

    def format(
        self, field: str, pattern: str | re.Pattern[str], required_digits: int | None = 0,
    ) -> ValidationRule:
        return self._add(field, rules.format_rule(
            self.messages, self.blur_tracker, field, pattern, required_digits,
        ))

    def digits_exact_length(self, field: str, exact_digits: int) -> ValidationRule:
        return self._add(field, rules.digits_exact_length_rule(
            self.messages, self.blur_tracker, field, exact_digits,
        ))

    def account_number_modulo11(self, field: str) -> ValidationRule:
        return self._add(field, rules.account_number_modulo11_rule(
            self.messages, self.blur_tracker, field,
        ))

    @staticmethod
    def validate_all(*field_rules: ValidationRule) -> ValidationRule:
        """Ad hoc combinator for a control that needs several rules inline."""
        return rules.chain_rules(*field_rules)

    def _add(self, field: str, rule: ValidationRule) -> ValidationRule:
        self.register_validator(field, rule)
        return rule
