"""Expense attribution: what each animal record costs the farm."""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from livestock_ledger.domain.constants import (
    ATTRIBUTION_FULL,
    ATTRIBUTION_MODES,
    ATTRIBUTION_PRORATED,
)
from livestock_ledger.domain.models import AnimalRecord, MonthlyExpense
from livestock_ledger.domain.services.normalization import (
    normalize_collection_names,
)
from livestock_ledger.domain.services.validation import checked_amount
from livestock_ledger.utils.decimal_utils import ZERO


def unit_count(animal: AnimalRecord) -> int:
    """Return how many physical animals a record stands for.

    Non-bulk records count once. A bulk record with a missing or zero
    quantity also counts once.
    """
    if not animal.is_bulk:
        return 1
    return max(1, animal.quantity or 1)


def base_cost(animal: AnimalRecord) -> Decimal:
    """Return the purchase price, per unit for bulk records."""
    price = checked_amount(animal.purchase_price, "purchase_price", animal.id)
    if animal.is_bulk:
        return price / unit_count(animal)
    return price


def direct_expense_total(animal: AnimalRecord) -> Decimal:
    """Sum the expenses booked directly against the record."""
    return sum(
        (
            checked_amount(expense.amount, f"expense {expense_id}", animal.id)
            for expense_id, expense in animal.expenses.items()
        ),
        ZERO,
    )


def matches_collections(
    expense: MonthlyExpense,
    collection_names: Iterable[str],
) -> bool:
    """Return whether an expense is tagged with any of the collections."""
    tags = set(normalize_collection_names(expense.tags))
    if not tags:
        return False
    return any(name in tags for name in collection_names)


def build_expense_shares(
    animals: Sequence[AnimalRecord],
    monthly_expenses: Sequence[MonthlyExpense],
    mode: str = ATTRIBUTION_FULL,
) -> dict[str, Decimal]:
    """Return the per-unit share of each tagged expense.

    In ``full`` mode no shares are built: every matching record absorbs the
    whole expense. In ``prorated`` mode the expense is split evenly over the
    units of every matching record, so a bulk record of four units carries
    four shares.

    Args:
        animals: Every record of the snapshot.
        monthly_expenses: Monthly expenses of the snapshot, with unique ids.
        mode: One of ``ATTRIBUTION_MODES``.

    Returns:
        dict[str, Decimal]: Share per unit, keyed by expense id. Empty in
        ``full`` mode and for expenses no record matches.

    Raises:
        ValueError: If the mode is unknown.
    """
    if mode not in ATTRIBUTION_MODES:
        raise ValueError(f"Unknown expense attribution mode: {mode}")
    shares: dict[str, Decimal] = {}
    if mode != ATTRIBUTION_PRORATED:
        return shares
    for expense in monthly_expenses:
        amount = checked_amount(expense.amount, "amount", expense.id)
        units = sum(
            unit_count(animal)
            for animal in animals
            if matches_collections(
                expense,
                normalize_collection_names(animal.collection_names),
            )
        )
        if units:
            shares[expense.id] = amount / units
    return shares


def tagged_expense_total(
    animal: AnimalRecord,
    monthly_expenses: Iterable[MonthlyExpense],
    shares: dict[str, Decimal] | None = None,
) -> Decimal:
    """Sum the monthly expenses tagged with one of the record's collections.

    Args:
        animal: Record whose collections are matched.
        monthly_expenses: Candidate monthly expenses.
        shares: Optional per-unit shares from ``build_expense_shares``;
            expenses without a share are charged in full.

    Returns:
        Decimal: Attributed amount.
    """
    names = normalize_collection_names(animal.collection_names)
    if not names:
        return ZERO
    total = ZERO
    for expense in monthly_expenses:
        if not matches_collections(expense, names):
            continue
        if shares and expense.id in shares:
            total += shares[expense.id] * unit_count(animal)
        else:
            total += checked_amount(expense.amount, "amount", expense.id)
    return total


def total_cost(
    animal: AnimalRecord,
    monthly_expenses: Iterable[MonthlyExpense],
    *,
    shares: dict[str, Decimal] | None = None,
) -> Decimal:
    """Return base, direct and tagged cost of a record.

    Raises:
        InvalidRecordError: If an amount on the record or on a matching
            expense is unusable.
    """
    return (
        base_cost(animal)
        + direct_expense_total(animal)
        + tagged_expense_total(animal, monthly_expenses, shares)
    )


__all__ = [
    "unit_count",
    "base_cost",
    "direct_expense_total",
    "matches_collections",
    "build_expense_shares",
    "tagged_expense_total",
    "total_cost",
]
