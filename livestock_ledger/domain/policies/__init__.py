"""Domain policies package."""

from .periods import (
    PERIOD_ALL,
    PERIOD_MONTH,
    PERIOD_YEAR,
    REPORT_PERIODS,
    filter_animals_by_period,
    filter_expenses_by_period,
    normalize_period,
)

__all__ = [
    "PERIOD_ALL",
    "PERIOD_MONTH",
    "PERIOD_YEAR",
    "REPORT_PERIODS",
    "filter_animals_by_period",
    "filter_expenses_by_period",
    "normalize_period",
]
