"""Reporting period filters for records and expenses."""

from collections.abc import Iterable
from datetime import date

from livestock_ledger.domain.errors import InvalidDateRangeError
from livestock_ledger.domain.models import AnimalRecord, MonthlyExpense
from livestock_ledger.domain.services.days import to_datetime

PERIOD_MONTH = "month"
PERIOD_YEAR = "year"
PERIOD_ALL = "all"

REPORT_PERIODS = (PERIOD_MONTH, PERIOD_YEAR, PERIOD_ALL)


def normalize_period(period: str | None) -> str:
    """Return a known period name.

    Raises:
        ValueError: If the period is not one of ``REPORT_PERIODS``.
    """
    candidate = (period or PERIOD_ALL).strip().lower()
    if candidate not in REPORT_PERIODS:
        raise ValueError(f"Unknown report period: {period}")
    return candidate


def in_period(year: int, month: int, period: str, today: date) -> bool:
    """Return True when a year/month falls in the period around today."""
    if period == PERIOD_MONTH:
        return year == today.year and month == today.month
    if period == PERIOD_YEAR:
        return year == today.year
    return True


def filter_animals_by_period(
    animals: Iterable[AnimalRecord],
    period: str,
    *,
    today: date | None = None,
) -> list[AnimalRecord]:
    """Keep records sold in the current month or year.

    Every record is kept for the ``all`` period. Otherwise records without a
    usable sold date are dropped.
    """
    resolved = normalize_period(period)
    records = list(animals)
    if resolved == PERIOD_ALL:
        return records
    reference = today or date.today()
    kept: list[AnimalRecord] = []
    for animal in records:
        if not animal.sold_date:
            continue
        try:
            sold = to_datetime(animal.sold_date, animal.id)
        except InvalidDateRangeError:
            continue
        if in_period(sold.year, sold.month, resolved, reference):
            kept.append(animal)
    return kept


def filter_expenses_by_period(
    expenses: Iterable[MonthlyExpense],
    period: str,
    *,
    today: date | None = None,
) -> list[MonthlyExpense]:
    """Keep monthly expenses booked in the current month or year."""
    resolved = normalize_period(period)
    reference = today or date.today()
    return [
        expense
        for expense in expenses
        if in_period(expense.year, expense.month, resolved, reference)
    ]


__all__ = [
    "PERIOD_MONTH",
    "PERIOD_YEAR",
    "PERIOD_ALL",
    "REPORT_PERIODS",
    "normalize_period",
    "in_period",
    "filter_animals_by_period",
    "filter_expenses_by_period",
]
