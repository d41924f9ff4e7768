"""Modulo-11 checksum tests — pure tests for account number validation.

Tests cover:
    - Weighted sum uses weight 1 on the rightmost digit
    - Length 6 accepts residues {0, 1}; lengths 7–10 accept {0, 1, 10}
    - Non-digit input and lengths outside 2–10 are rejected
    - Lengths 2–5 fail closed
    - digit_count ignores separators
"""

import pytest

from invoice_forms.core.checksum import (
    digit_count,
    digits_only,
    is_valid_modulo11,
    weighted_sum,
)


# --- weighted_sum -------------------------------------------------------------

def test_weighted_sum_counts_from_the_right():
    # 1*6 + 2*5 + 3*4 + 4*3 + 5*2 + 6*1
    assert weighted_sum("123456") == 56


def test_weighted_sum_single_digit_has_weight_one():
    assert weighted_sum("7") == 7


# --- is_valid_modulo11 --------------------------------------------------------

def test_length_six_with_residue_one_is_valid():
    assert weighted_sum("123456") % 11 == 1
    assert is_valid_modulo11("123456")


def test_length_six_with_residue_zero_is_valid():
    # 1*6 + 1*5 + 0 + 0 + 0 + 0 = 11
    assert weighted_sum("110000") % 11 == 0
    assert is_valid_modulo11("110000")


def test_length_six_rejects_residue_ten():
    # 1*6 + 4*1 = 10
    assert weighted_sum("100004") % 11 == 10
    assert not is_valid_modulo11("100004")


def test_length_eight_with_residue_five_is_invalid():
    # 5*1 = 5
    assert weighted_sum("00000005") % 11 == 5
    assert not is_valid_modulo11("00000005")


def test_length_seven_to_ten_accepts_residue_ten():
    # 1*10 = 10
    assert weighted_sum("1000000000") % 11 == 10
    assert is_valid_modulo11("1000000000")


def test_ten_digit_account_numbers():
    # 1*10 + 9*9 + 2*3 + 2*2 + 3*1 = 104 = 11*9 + 5 -> invalid
    assert not is_valid_modulo11("1900000223")
    # 1*2 + 9*1 = 11
    assert is_valid_modulo11("0000000019")


@pytest.mark.parametrize("value", ["12a456", "123 456", "-123456", "12345.6"])
def test_non_digit_characters_are_rejected(value):
    assert not is_valid_modulo11(value)


@pytest.mark.parametrize("value", ["", "1", "12345678901"])
def test_lengths_outside_two_to_ten_are_rejected(value):
    assert not is_valid_modulo11(value)


@pytest.mark.parametrize("value", ["01", "000", "0000", "20001"])
def test_lengths_two_to_five_fail_closed(value):
    # residue 0 would pass for 6+ digits, but short inputs have no accept set
    assert weighted_sum(value) % 11 in (0, 1)
    assert not is_valid_modulo11(value)


# --- digit helpers ------------------------------------------------------------

def test_digit_count_ignores_separators():
    assert digit_count("123 456-789") == 9


def test_digit_count_of_none_or_empty_is_zero():
    assert digit_count(None) == 0
    assert digit_count("") == 0


def test_digits_only_strips_everything_else():
    assert digits_only("+420 123-456") == "420123456"
