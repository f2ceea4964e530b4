"""Domain models package."""

from .records import (
    AnimalRecord,
    DirectExpense,
    IndividualAnimal,
    LoadRecord,
    MonthlyExpense,
)
from .stats import (
    AnimalStats,
    CollectionStats,
    DayWiseEntry,
    FarmStats,
    PooledAllocationReport,
    PooledAnimalAllocation,
    PooledTotals,
    ProfitLoss,
    ProfitLossReport,
    RejectedRecord,
    UnitStats,
)

__all__ = [
    "AnimalRecord",
    "DirectExpense",
    "IndividualAnimal",
    "LoadRecord",
    "MonthlyExpense",
    "AnimalStats",
    "CollectionStats",
    "DayWiseEntry",
    "FarmStats",
    "PooledAllocationReport",
    "PooledAnimalAllocation",
    "PooledTotals",
    "ProfitLoss",
    "ProfitLossReport",
    "RejectedRecord",
    "UnitStats",
]
