"""Domain services package."""

from .aggregation import (
    aggregate_animal_stats,
    compute_profit_loss_report,
    list_collection_names,
)
from .attribution import (
    base_cost,
    build_expense_shares,
    direct_expense_total,
    tagged_expense_total,
    total_cost,
    unit_count,
)
from .bulk import allocate_bulk_units
from .day_wise import build_day_wise_series, iter_day_wise_series
from .days import days_in_farm, to_datetime
from .normalization import (
    load_record_as_animal,
    normalize_collection_names,
    normalize_status,
)
from .pooled import compute_pooled_allocation
from .profit_loss import compute_animal_stats, compute_profit_loss
from .validation import validate_animal_record, validate_monthly_expense

__all__ = [
    "aggregate_animal_stats",
    "compute_profit_loss_report",
    "list_collection_names",
    "base_cost",
    "build_expense_shares",
    "direct_expense_total",
    "tagged_expense_total",
    "total_cost",
    "unit_count",
    "allocate_bulk_units",
    "build_day_wise_series",
    "iter_day_wise_series",
    "days_in_farm",
    "to_datetime",
    "load_record_as_animal",
    "normalize_collection_names",
    "normalize_status",
    "compute_pooled_allocation",
    "compute_animal_stats",
    "compute_profit_loss",
    "validate_animal_record",
    "validate_monthly_expense",
]
