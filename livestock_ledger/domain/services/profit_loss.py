"""Profit/loss of single animal records."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from logging import Logger

from livestock_ledger.domain.constants import STATUS_SOLD
from livestock_ledger.domain.models import (
    AnimalRecord,
    AnimalStats,
    MonthlyExpense,
    ProfitLoss,
)
from livestock_ledger.domain.services.attribution import total_cost, unit_count
from livestock_ledger.domain.services.days import days_in_farm, to_datetime
from livestock_ledger.domain.services.normalization import (
    normalize_collection_names,
    normalize_status,
)
from livestock_ledger.domain.services.validation import (
    checked_amount,
    validate_animal_record,
)
from livestock_ledger.utils.decimal_utils import ZERO


def compute_profit_loss(total_cost: Decimal, realized_price: Decimal) -> ProfitLoss:
    """Split the margin of a disposition into profit or loss.

    Args:
        total_cost: Everything the record cost the farm.
        realized_price: What the disposition brought in.

    Returns:
        ProfitLoss: Profit when the price exceeds the cost, loss otherwise.
    """
    if realized_price > total_cost:
        return ProfitLoss(profit=realized_price - total_cost, loss=ZERO)
    return ProfitLoss(profit=ZERO, loss=total_cost - realized_price)


def is_disposed(animal: AnimalRecord) -> bool:
    """Return whether the record has a completed sale."""
    return normalize_status(animal.status) == STATUS_SOLD


def realized_price(animal: AnimalRecord) -> Decimal:
    """Return the sale value of a disposed record, zero otherwise."""
    if not is_disposed(animal):
        return ZERO
    return checked_amount(animal.selling_price, "selling_price", animal.id)


def compute_animal_stats(
    animal: AnimalRecord,
    monthly_expenses: Iterable[MonthlyExpense],
    *,
    today: date | None = None,
    shares: dict[str, Decimal] | None = None,
    logger: Logger | None = None,
) -> AnimalStats:
    """Compute cost, stay and profit/loss for one record.

    Profit and loss stay at zero until the record is sold.

    Args:
        animal: Record to evaluate.
        monthly_expenses: Monthly expenses matched against its collections.
        today: Reference date for open stays.
        shares: Optional tagged-expense shares per record.
        logger: Optional logger for validation warnings.

    Returns:
        AnimalStats: Per-animal figures.

    Raises:
        InvalidRecordError: If the record holds unusable values.
    """
    validate_animal_record(animal, logger)
    disposed = is_disposed(animal)
    disposition = animal.sold_date if disposed and animal.sold_date else None
    days = days_in_farm(
        animal.purchase_date,
        disposition,
        today=today,
        record_id=animal.id,
        logger=logger,
    )
    cost = total_cost(animal, monthly_expenses, shares=shares)
    price = realized_price(animal)
    outcome = compute_profit_loss(cost, price) if disposed else ProfitLoss()
    disposed_on = (
        to_datetime(disposition, animal.id).date() if disposition else None
    )
    return AnimalStats(
        animal_id=animal.id,
        animal_number=animal.animal_number,
        status=normalize_status(animal.status),
        collection_names=normalize_collection_names(animal.collection_names),
        unit_count=unit_count(animal),
        total_expense=cost,
        realized_price=price,
        profit=outcome.profit,
        loss=outcome.loss,
        days_in_farm=days,
        disposed_on=disposed_on,
    )


__all__ = [
    "compute_profit_loss",
    "is_disposed",
    "realized_price",
    "compute_animal_stats",
]
