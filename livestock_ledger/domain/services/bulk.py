"""Per-unit breakdown of bulk records."""

from collections.abc import Iterable
from datetime import date
from logging import Logger

from livestock_ledger.domain.constants import STATUS_SOLD
from livestock_ledger.domain.errors import InvalidRecordError
from livestock_ledger.domain.models import (
    AnimalRecord,
    MonthlyExpense,
    UnitStats,
)
from livestock_ledger.domain.services.attribution import (
    direct_expense_total,
    tagged_expense_total,
)
from livestock_ledger.domain.services.days import days_in_farm
from livestock_ledger.domain.services.normalization import normalize_status
from livestock_ledger.domain.services.profit_loss import compute_profit_loss
from livestock_ledger.domain.services.validation import (
    checked_amount,
    validate_animal_record,
)


def allocate_bulk_units(
    animal: AnimalRecord,
    monthly_expenses: Iterable[MonthlyExpense],
    *,
    today: date | None = None,
    logger: Logger | None = None,
) -> list[UnitStats]:
    """Spread a bulk record's cost over its sold units by length of stay.

    The record's whole cost (purchase price, direct and tagged expenses) is
    divided by the summed stays of the sold units, and each sold unit
    carries its own stay times that daily rate.

    Args:
        animal: Bulk record with individual units.
        monthly_expenses: Monthly expenses matched against its collections.
        today: Reference date for open stays.
        logger: Optional logger for validation warnings.

    Returns:
        list[UnitStats]: One entry per sold unit, in record order.

    Raises:
        InvalidRecordError: If the record is not a bulk record or holds
            unusable values.
    """
    if not animal.is_bulk:
        raise InvalidRecordError("not a bulk record", animal.id)
    validate_animal_record(animal, logger)

    sold_units = [
        unit
        for unit in animal.individual_animals
        if normalize_status(unit.status) == STATUS_SOLD and unit.sold_date
    ]
    if not sold_units:
        return []

    record_cost = (
        checked_amount(animal.purchase_price, "purchase_price", animal.id)
        + direct_expense_total(animal)
        + tagged_expense_total(animal, monthly_expenses)
    )
    stays = [
        days_in_farm(
            animal.purchase_date,
            unit.sold_date,
            today=today,
            record_id=f"{animal.id}/{unit.id}",
        )
        for unit in sold_units
    ]
    daily_rate = record_cost / sum(stays)

    breakdown: list[UnitStats] = []
    for unit, stay in zip(sold_units, stays):
        expense = daily_rate * stay
        price = checked_amount(
            unit.selling_price, "selling_price", f"{animal.id}/{unit.id}"
        )
        outcome = compute_profit_loss(expense, price)
        breakdown.append(
            UnitStats(
                unit_id=unit.id,
                days_in_farm=stay,
                expense=expense,
                selling_price=price,
                profit=outcome.profit,
                loss=outcome.loss,
            )
        )
    return breakdown


__all__ = ["allocate_bulk_units"]
