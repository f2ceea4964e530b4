"""Display helpers for monetary amounts."""

from decimal import ROUND_HALF_UP, Decimal

from livestock_ledger.utils.decimal_utils import coerce_decimal

DEFAULT_CURRENCY_SYMBOL = "₹"
_CENTS = Decimal("0.01")


def format_currency(amount, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format an amount for display.

    The sign is dropped: callers label amounts as profit or loss themselves.

    Args:
        amount: Exact amount produced by the aggregation services.
        symbol: Currency symbol prefixed to the value.

    Returns:
        str: Value such as ``₹1200.50``.
    """
    value = abs(coerce_decimal(amount)).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{symbol}{value}"


__all__ = ["DEFAULT_CURRENCY_SYMBOL", "format_currency"]
