"""Domain package for livestock profit/loss rules and models."""

from .constants import (
    ATTRIBUTION_FULL,
    ATTRIBUTION_PRORATED,
    STATUS_ACTIVE,
    STATUS_DECEASED,
    STATUS_SOLD,
)
from .errors import InvalidDateRangeError, InvalidRecordError
from .models import (
    AnimalRecord,
    AnimalStats,
    CollectionStats,
    DayWiseEntry,
    DirectExpense,
    FarmStats,
    IndividualAnimal,
    LoadRecord,
    MonthlyExpense,
    ProfitLoss,
    ProfitLossReport,
)
from .policies import filter_animals_by_period, filter_expenses_by_period
from .services import (
    build_day_wise_series,
    compute_animal_stats,
    compute_profit_loss,
    compute_profit_loss_report,
    days_in_farm,
    total_cost,
)

__all__ = [
    "ATTRIBUTION_FULL",
    "ATTRIBUTION_PRORATED",
    "STATUS_ACTIVE",
    "STATUS_DECEASED",
    "STATUS_SOLD",
    "InvalidDateRangeError",
    "InvalidRecordError",
    "AnimalRecord",
    "AnimalStats",
    "CollectionStats",
    "DayWiseEntry",
    "DirectExpense",
    "FarmStats",
    "IndividualAnimal",
    "LoadRecord",
    "MonthlyExpense",
    "ProfitLoss",
    "ProfitLossReport",
    "filter_animals_by_period",
    "filter_expenses_by_period",
    "build_day_wise_series",
    "compute_animal_stats",
    "compute_profit_loss",
    "compute_profit_loss_report",
    "days_in_farm",
    "total_cost",
]
