"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation

ZERO = Decimal("0")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Missing values count as zero.

    Args:
        value: Raw numeric value from SQL, records or adapters.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value is not a finite number.
    """
    if value is None or value == "":
        return ZERO
    if isinstance(value, bool):
        raise ValueError(f"Not a numeric amount: {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Not a numeric amount: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Amount is not finite: {value!r}")
    return result


def safe_divide(numerator: Decimal, denominator) -> Decimal:
    """Divide two amounts, returning zero for a zero denominator."""
    divisor = coerce_decimal(denominator)
    if divisor == 0:
        return ZERO
    return numerator / divisor


__all__ = ["ZERO", "coerce_decimal", "safe_divide"]
