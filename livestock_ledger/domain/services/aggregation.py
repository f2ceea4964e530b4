"""Collection and farm-wide rollups of per-animal profit/loss."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from logging import Logger

from livestock_ledger.domain.constants import ATTRIBUTION_FULL
from livestock_ledger.domain.errors import InvalidRecordError
from livestock_ledger.domain.models import (
    AnimalRecord,
    AnimalStats,
    CollectionStats,
    FarmStats,
    MonthlyExpense,
    ProfitLossReport,
    RejectedRecord,
)
from livestock_ledger.domain.services.attribution import build_expense_shares
from livestock_ledger.domain.services.days import days_in_farm
from livestock_ledger.domain.services.normalization import (
    normalize_collection_names,
)
from livestock_ledger.domain.services.profit_loss import (
    compute_animal_stats,
    is_disposed,
)
from livestock_ledger.domain.services.validation import (
    validate_animal_record,
    validate_monthly_expense,
)
from livestock_ledger.utils.decimal_utils import ZERO


@dataclass
class _Bucket:
    total_expense: Decimal = ZERO
    total_sale: Decimal = ZERO
    profit: Decimal = ZERO
    loss: Decimal = ZERO
    animal_count: int = 0
    animal_ids: list[str] = field(default_factory=list)

    def add(self, stats: AnimalStats) -> None:
        self.total_expense += stats.total_expense
        self.total_sale += stats.realized_price
        self.profit += stats.profit
        self.loss += stats.loss
        self.animal_count += stats.unit_count
        self.animal_ids.append(stats.animal_id)


def aggregate_animal_stats(
    stats: Iterable[AnimalStats],
) -> tuple[dict[str, CollectionStats], FarmStats]:
    """Roll per-animal figures up per collection and for the whole farm.

    A record tagged with several collections is counted in full under each
    of them. The farm-wide totals count every record once.

    Args:
        stats: Per-animal figures.

    Returns:
        tuple[dict[str, CollectionStats], FarmStats]: Collection totals in
        discovery order, and farm-wide totals.
    """
    buckets: dict[str, _Bucket] = {}
    overall = _Bucket()
    for item in stats:
        for name in item.collection_names:
            buckets.setdefault(name, _Bucket()).add(item)
        overall.add(item)

    collections = {
        name: CollectionStats(
            name=name,
            total_expense=bucket.total_expense,
            total_sale=bucket.total_sale,
            profit=bucket.profit,
            loss=bucket.loss,
            animal_count=bucket.animal_count,
            animal_ids=tuple(bucket.animal_ids),
        )
        for name, bucket in buckets.items()
    }
    farm = FarmStats(
        total_expense=overall.total_expense,
        total_sale=overall.total_sale,
        profit=overall.profit,
        loss=overall.loss,
        animal_count=overall.animal_count,
    )
    return collections, farm


def screen_monthly_expenses(
    monthly_expenses: Iterable[MonthlyExpense],
    logger: Logger | None = None,
) -> tuple[list[MonthlyExpense], list[RejectedRecord]]:
    """Split monthly expenses into usable ones and rejections.

    Expenses are keyed by id when shared out, so an id seen earlier in the
    snapshot rejects the later expense.
    """
    accepted: list[MonthlyExpense] = []
    rejected: list[RejectedRecord] = []
    seen: set[str] = set()
    for expense in monthly_expenses:
        try:
            if expense.id in seen:
                raise InvalidRecordError("duplicate expense id", expense.id)
            validate_monthly_expense(expense)
        except InvalidRecordError as exc:
            _reject(rejected, exc, logger)
            continue
        seen.add(expense.id)
        accepted.append(expense)
    return accepted, rejected


def screen_animal_records(
    animals: Iterable[AnimalRecord],
    *,
    today: date | None = None,
    logger: Logger | None = None,
) -> tuple[list[AnimalRecord], list[RejectedRecord]]:
    """Split animal records into usable ones and rejections.

    A record is rejected when an amount or date is unusable, or when its id
    was already seen in the snapshot.
    """
    accepted: list[AnimalRecord] = []
    rejected: list[RejectedRecord] = []
    seen: set[str] = set()
    for animal in animals:
        try:
            if animal.id in seen:
                raise InvalidRecordError("duplicate record id", animal.id)
            validate_animal_record(animal)
            days_in_farm(
                animal.purchase_date,
                animal.sold_date if is_disposed(animal) else None,
                today=today,
                record_id=animal.id,
            )
        except InvalidRecordError as exc:
            _reject(rejected, exc, logger)
            continue
        seen.add(animal.id)
        accepted.append(animal)
    return accepted, rejected


def compute_profit_loss_report(
    animals: Sequence[AnimalRecord],
    monthly_expenses: Sequence[MonthlyExpense],
    *,
    today: date | None = None,
    attribution_mode: str = ATTRIBUTION_FULL,
    logger: Logger | None = None,
) -> ProfitLossReport:
    """Compute per-animal, per-collection and farm-wide profit/loss.

    Args:
        animals: Animal records of the snapshot.
        monthly_expenses: Monthly expenses of the snapshot.
        today: Reference date for open stays.
        attribution_mode: How tagged expenses are shared between records.
        logger: Optional logger for warnings about rejected records.

    Returns:
        ProfitLossReport: Figures for every accepted record, plus the
        rejected ones.
    """
    expenses, rejected_expenses = screen_monthly_expenses(
        monthly_expenses, logger
    )
    records, rejected_records = screen_animal_records(
        animals, today=today, logger=logger
    )
    shares = build_expense_shares(records, expenses, attribution_mode)

    per_animal: dict[str, AnimalStats] = {}
    for animal in records:
        per_animal[animal.id] = compute_animal_stats(
            animal,
            expenses,
            today=today,
            shares=shares,
            logger=logger,
        )

    collections, overall = aggregate_animal_stats(per_animal.values())
    return ProfitLossReport(
        animals=per_animal,
        collections=collections,
        overall=overall,
        rejected=tuple(rejected_expenses + rejected_records),
    )


def list_collection_names(animals: Iterable[AnimalRecord]) -> list[str]:
    """Return the sorted collection names used across the records."""
    names: set[str] = set()
    for animal in animals:
        names.update(normalize_collection_names(animal.collection_names))
    return sorted(names)


def _reject(
    rejected: list[RejectedRecord],
    error: InvalidRecordError,
    logger: Logger | None,
) -> None:
    rejected.append(RejectedRecord(record_id=error.record_id, reason=error.reason))
    if logger is not None:
        logger.warning(f"Skipping record {error.record_id}: {error.reason}")


__all__ = [
    "aggregate_animal_stats",
    "screen_monthly_expenses",
    "screen_animal_records",
    "compute_profit_loss_report",
    "list_collection_names",
]
