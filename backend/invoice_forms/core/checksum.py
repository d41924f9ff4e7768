"""Bank Account Checksum — modulo-11 weighted digit sum for Czech/Slovak account numbers.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - Weights run 1..10 from the rightmost digit leftwards
    - Only lengths 6 and 7–10 have an acceptance set; 2–5 fail closed

Design Decisions:
    - str.isdecimal() for digit classification: matches "decimal digit" and lets
      rules count digits in formatted input ("123 456 789")
    - Fail closed for 2–5 digit inputs until the accepted residues are confirmed
"""

_MIN_LENGTH = 2
_MAX_LENGTH = 10

# length -> accepted residues of (weighted sum mod 11)
_ACCEPTED_RESIDUES: dict[int, frozenset[int]] = {
    6: frozenset({0, 1}),
    **{n: frozenset({0, 1, 10}) for n in range(7, _MAX_LENGTH + 1)},
}


def digits_only(value: str) -> str:
    """Strip everything except decimal digits."""
    return "".join(ch for ch in value if ch.isdecimal())


def digit_count(value: str | None) -> int:
    """Count decimal digits, ignoring separators and any other characters."""
    if not value:
        return 0
    return sum(1 for ch in value if ch.isdecimal())


def weighted_sum(digits: str) -> int:
    """Sum of digit * weight with weight 1 on the rightmost digit."""
    return sum(
        int(digit) * weight
        for weight, digit in enumerate(reversed(digits), start=1)
    )


def is_valid_modulo11(account_number: str) -> bool:
    """Check an account number (prefix or base part) against modulo 11."""
    if not account_number or not account_number.isdecimal():
        return False

    length = len(account_number)
    if length < _MIN_LENGTH or length > _MAX_LENGTH:
        return False

    accepted = _ACCEPTED_RESIDUES.get(length)
    if accepted is None:
        return False

    return weighted_sum(account_number) % 11 in accepted
