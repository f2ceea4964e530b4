"""Domain models for computed profit/loss aggregates."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from livestock_ledger.utils.decimal_utils import ZERO


@dataclass(frozen=True)
class ProfitLoss:
    """Profit or loss of a single disposition; at most one is non-zero."""

    profit: Decimal = ZERO
    loss: Decimal = ZERO

    @property
    def net(self) -> Decimal:
        """Return profit minus loss."""
        return self.profit - self.loss


@dataclass(frozen=True)
class AnimalStats:
    """Cost and profit/loss figures for one record.

    Attributes:
        animal_id: Record identifier.
        animal_number: Human-readable tag.
        status: Record status at evaluation time.
        collection_names: Collections the record is reported under.
        unit_count: Physical animals represented (quantity for bulk).
        total_expense: Base, direct and tagged cost.
        realized_price: Sale or load-out value, zero until disposed.
        profit: Positive margin over total expense.
        loss: Shortfall against total expense.
        days_in_farm: Stay length in whole days, at least one.
        disposed_on: Disposition date when one is recorded.
    """

    animal_id: str
    animal_number: str
    status: str
    collection_names: tuple[str, ...]
    unit_count: int
    total_expense: Decimal
    realized_price: Decimal
    profit: Decimal
    loss: Decimal
    days_in_farm: int
    disposed_on: date | None = None


@dataclass(frozen=True)
class CollectionStats:
    """Totals for every animal tagged with one collection name."""

    name: str
    total_expense: Decimal = ZERO
    total_sale: Decimal = ZERO
    profit: Decimal = ZERO
    loss: Decimal = ZERO
    animal_count: int = 0
    animal_ids: tuple[str, ...] = ()

    @property
    def net(self) -> Decimal:
        """Return profit minus loss."""
        return self.profit - self.loss


@dataclass(frozen=True)
class FarmStats:
    """Farm-wide totals computed from the raw record list."""

    total_expense: Decimal = ZERO
    total_sale: Decimal = ZERO
    profit: Decimal = ZERO
    loss: Decimal = ZERO
    animal_count: int = 0

    @property
    def net(self) -> Decimal:
        """Return profit minus loss."""
        return self.profit - self.loss


@dataclass(frozen=True)
class RejectedRecord:
    """Record left out of a report because it failed validation."""

    record_id: str | None
    reason: str


@dataclass(frozen=True)
class ProfitLossReport:
    """Per-animal, per-collection and farm-wide profit/loss."""

    animals: dict[str, AnimalStats]
    collections: dict[str, CollectionStats]
    overall: FarmStats
    rejected: tuple[RejectedRecord, ...] = ()


@dataclass(frozen=True)
class DayWiseEntry:
    """Prorated totals for one day of stay."""

    day: int
    total_expense: Decimal = ZERO
    total_sale: Decimal = ZERO
    profit: Decimal = ZERO
    loss: Decimal = ZERO
    animal_count: int = 0


@dataclass(frozen=True)
class PooledAnimalAllocation:
    """Expense of one animal under the farm-wide expense-per-day rate."""

    animal_number: str
    expected_expense: Decimal
    actual_expense: Decimal
    profit_or_loss: Decimal
    days_in_farm: int


@dataclass(frozen=True)
class PooledTotals:
    """Summed pooled allocation for a collection or the whole farm."""

    expected_expense: Decimal = ZERO
    actual_expense: Decimal = ZERO
    profit_or_loss: Decimal = ZERO
    total_days: int = 0
    animal_numbers: tuple[str, ...] = ()


@dataclass(frozen=True)
class PooledAllocationReport:
    """Pooled allocation per animal, per collection and overall."""

    expense_per_day: Decimal
    per_animal: dict[str, PooledAnimalAllocation]
    per_collection: dict[str, PooledTotals]
    overall: PooledTotals
    rejected: tuple[RejectedRecord, ...] = ()


@dataclass(frozen=True)
class UnitStats:
    """Share of a bulk record's cost carried by one sold unit."""

    unit_id: str
    days_in_farm: int
    expense: Decimal
    selling_price: Decimal
    profit: Decimal
    loss: Decimal


__all__ = [
    "ProfitLoss",
    "AnimalStats",
    "CollectionStats",
    "FarmStats",
    "RejectedRecord",
    "ProfitLossReport",
    "DayWiseEntry",
    "PooledAnimalAllocation",
    "PooledTotals",
    "PooledAllocationReport",
    "UnitStats",
]
