"""Tests for Decimal helpers."""

from decimal import Decimal

import pytest

from livestock_ledger.utils.decimal_utils import coerce_decimal, safe_divide


def test_coerce_decimal_normalizes_inputs() -> None:
    """Ints, floats and strings become Decimals; missing values zero."""
    assert coerce_decimal(5) == Decimal("5")
    assert coerce_decimal(0.1) == Decimal("0.1")
    assert coerce_decimal(" 7.25 ") == Decimal("7.25")
    assert coerce_decimal(None) == Decimal("0")
    assert coerce_decimal("") == Decimal("0")


def test_coerce_decimal_rejects_invalid_values() -> None:
    """Booleans, garbage and non-finite values raise ValueError."""
    for value in (True, "abc", float("inf"), Decimal("NaN")):
        with pytest.raises(ValueError):
            coerce_decimal(value)


def test_safe_divide_handles_zero() -> None:
    """Division by zero yields zero instead of raising."""
    assert safe_divide(Decimal("10"), 4) == Decimal("2.5")
    assert safe_divide(Decimal("10"), 0) == Decimal("0")
