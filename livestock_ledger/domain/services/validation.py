"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from livestock_ledger.domain.constants import ANIMAL_STATUSES, STATUS_SOLD
from livestock_ledger.domain.errors import InvalidRecordError
from livestock_ledger.domain.models import AnimalRecord, MonthlyExpense
from livestock_ledger.domain.services.normalization import normalize_status
from livestock_ledger.utils.decimal_utils import coerce_decimal


def checked_amount(
    value,
    field_name: str,
    record_id: str | None = None,
    *,
    allow_negative: bool = False,
) -> Decimal:
    """Coerce a record amount, rejecting values the engine cannot sum.

    Args:
        value: Raw amount; missing values count as zero.
        field_name: Field name used in error messages.
        record_id: Identifier of the record holding the value.
        allow_negative: Whether negative amounts are accepted.

    Returns:
        Decimal: The amount as a finite Decimal.

    Raises:
        InvalidRecordError: If the amount is not a finite number or is
            negative when that is not allowed.
    """
    try:
        amount = coerce_decimal(value)
    except ValueError as exc:
        raise InvalidRecordError(f"{field_name}: {exc}", record_id) from exc
    if amount < 0 and not allow_negative:
        raise InvalidRecordError(
            f"{field_name} must not be negative, got {amount}", record_id
        )
    return amount


def validate_animal_record(
    animal: AnimalRecord,
    logger: Logger | None = None,
) -> None:
    """Reject records with unusable values and warn about odd ones.

    Args:
        animal: Record to check.
        logger: Optional logger used for warnings.

    Raises:
        InvalidRecordError: If a price, expense or quantity is invalid.
    """
    checked_amount(animal.purchase_price, "purchase_price", animal.id)
    checked_amount(animal.selling_price, "selling_price", animal.id)
    for expense_id, expense in animal.expenses.items():
        checked_amount(expense.amount, f"expense {expense_id}", animal.id)
    if animal.quantity is not None and animal.quantity < 0:
        raise InvalidRecordError(
            f"quantity must not be negative, got {animal.quantity}", animal.id
        )
    if logger is None:
        return
    status = normalize_status(animal.status)
    if status not in ANIMAL_STATUSES:
        logger.warning(f"Unknown status '{animal.status}' for record {animal.id}")
    if status == STATUS_SOLD and animal.selling_price is None:
        logger.warning(f"Sold record {animal.id} has no selling price")
    if status == STATUS_SOLD and not animal.sold_date:
        logger.warning(f"Sold record {animal.id} has no sold date")


def validate_monthly_expense(expense: MonthlyExpense) -> None:
    """Reject monthly expenses with an unusable amount or period.

    Raises:
        InvalidRecordError: If the amount is invalid or the month is out of
            range.
    """
    checked_amount(expense.amount, "amount", expense.id)
    if not 1 <= expense.month <= 12:
        raise InvalidRecordError(
            f"month must be between 1 and 12, got {expense.month}", expense.id
        )


__all__ = [
    "checked_amount",
    "validate_animal_record",
    "validate_monthly_expense",
]
