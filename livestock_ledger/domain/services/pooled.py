"""Day-pooled allocation of farm cost across every animal stay."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from logging import Logger

from livestock_ledger.domain.models import (
    AnimalRecord,
    MonthlyExpense,
    PooledAllocationReport,
    PooledAnimalAllocation,
    PooledTotals,
)
from livestock_ledger.domain.services.aggregation import (
    screen_animal_records,
    screen_monthly_expenses,
)
from livestock_ledger.domain.services.attribution import (
    direct_expense_total,
    tagged_expense_total,
)
from livestock_ledger.domain.services.days import days_in_farm
from livestock_ledger.domain.services.normalization import (
    normalize_collection_names,
)
from livestock_ledger.domain.services.profit_loss import is_disposed
from livestock_ledger.domain.services.validation import checked_amount
from livestock_ledger.utils.decimal_utils import ZERO, safe_divide


@dataclass
class _PooledBucket:
    expected_expense: Decimal = ZERO
    actual_expense: Decimal = ZERO
    profit_or_loss: Decimal = ZERO
    total_days: int = 0
    animal_numbers: list[str] = field(default_factory=list)

    def add(self, allocation: PooledAnimalAllocation) -> None:
        self.expected_expense += allocation.expected_expense
        self.actual_expense += allocation.actual_expense
        self.profit_or_loss += allocation.profit_or_loss
        self.total_days += allocation.days_in_farm
        self.animal_numbers.append(allocation.animal_number)

    def freeze(self) -> PooledTotals:
        return PooledTotals(
            expected_expense=self.expected_expense,
            actual_expense=self.actual_expense,
            profit_or_loss=self.profit_or_loss,
            total_days=self.total_days,
            animal_numbers=tuple(self.animal_numbers),
        )


def compute_pooled_allocation(
    animals: Sequence[AnimalRecord],
    monthly_expenses: Sequence[MonthlyExpense],
    *,
    today: date | None = None,
    logger: Logger | None = None,
) -> PooledAllocationReport:
    """Charge every animal the farm-wide cost per day of stay.

    The full cost of all records (whole purchase price, direct and tagged
    expenses) is pooled and divided by the sum of all stays. Each animal then
    carries ``days_in_farm * rate`` against its selling price, recorded or
    not yet realized, giving a signed profit (positive) or loss (negative).

    Args:
        animals: Animal records of the snapshot.
        monthly_expenses: Monthly expenses of the snapshot.
        today: Reference date for open stays.
        logger: Optional logger for warnings about rejected records.

    Returns:
        PooledAllocationReport: Allocation per animal (keyed by record id),
        per collection, and overall.
    """
    expenses, rejected_expenses = screen_monthly_expenses(
        monthly_expenses, logger
    )
    records, rejected_records = screen_animal_records(
        animals, today=today, logger=logger
    )

    stays: dict[str, int] = {}
    pooled_cost = ZERO
    for animal in records:
        stays[animal.id] = days_in_farm(
            animal.purchase_date,
            animal.sold_date if is_disposed(animal) else None,
            today=today,
            record_id=animal.id,
        )
        pooled_cost += (
            checked_amount(animal.purchase_price, "purchase_price", animal.id)
            + direct_expense_total(animal)
            + tagged_expense_total(animal, expenses)
        )
    rate = safe_divide(pooled_cost, sum(stays.values()))

    per_animal: dict[str, PooledAnimalAllocation] = {}
    collections: dict[str, _PooledBucket] = {}
    overall = _PooledBucket()
    for animal in records:
        days = stays[animal.id]
        actual = rate * days
        expected = checked_amount(
            animal.selling_price, "selling_price", animal.id
        )
        allocation = PooledAnimalAllocation(
            animal_number=animal.animal_number,
            expected_expense=expected,
            actual_expense=actual,
            profit_or_loss=expected - actual,
            days_in_farm=days,
        )
        per_animal[animal.id] = allocation
        for name in normalize_collection_names(animal.collection_names):
            collections.setdefault(name, _PooledBucket()).add(allocation)
        overall.add(allocation)

    return PooledAllocationReport(
        expense_per_day=rate,
        per_animal=per_animal,
        per_collection={
            name: bucket.freeze() for name, bucket in collections.items()
        },
        overall=overall.freeze(),
        rejected=tuple(rejected_expenses + rejected_records),
    )


__all__ = ["compute_pooled_allocation"]
