"""Domain models for farm records read from the record store."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from livestock_ledger.domain.constants import (
    LOAD_STATUS_PENDING,
    STATUS_ACTIVE,
)


@dataclass(frozen=True)
class DirectExpense:
    """Cost booked directly against one animal record."""

    amount: Decimal
    description: str | None = None


@dataclass(frozen=True)
class IndividualAnimal:
    """One physical unit of a bulk record."""

    id: str
    status: str = STATUS_ACTIVE
    sold_date: date | str | None = None
    selling_price: Decimal | None = None


@dataclass(frozen=True)
class AnimalRecord:
    """Purchased animal, or a bulk purchase of identical animals.

    Attributes:
        id: Opaque record identifier.
        animal_number: Human-readable tag.
        collection_names: Collection tags the animal belongs to.
        purchase_price: Price paid for the record (all units when bulk).
        purchase_date: Intake date.
        status: One of active, sold or deceased.
        sold_date: Disposition date, set when sold.
        selling_price: Realized price, set when sold.
        expenses: Direct costs keyed by expense id.
        is_bulk: Whether the record stands for several animals.
        quantity: Number of units represented by the record.
        individual_animals: Per-unit sale data for bulk records.
    """

    id: str
    animal_number: str
    purchase_price: Decimal | None
    purchase_date: date | str | None
    collection_names: tuple[str, ...] = ()
    status: str = STATUS_ACTIVE
    sold_date: date | str | None = None
    selling_price: Decimal | None = None
    expenses: dict[str, DirectExpense] = field(default_factory=dict)
    is_bulk: bool = False
    quantity: int | None = 1
    individual_animals: tuple[IndividualAnimal, ...] = ()


@dataclass(frozen=True)
class MonthlyExpense:
    """Farm expense for a month, attributable to tagged collections."""

    id: str
    year: int
    month: int
    amount: Decimal | None
    tags: tuple[str, ...] = ()
    expense_type: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class LoadRecord:
    """Load-in/load-out record for an animal passing through the farm."""

    id: str
    animal_number: str
    load_in_price: Decimal | None
    load_in_date: date | str | None
    collection_names: tuple[str, ...] = ()
    status: str = LOAD_STATUS_PENDING
    load_out_date: date | str | None = None
    load_out_price: Decimal | None = None


__all__ = [
    "DirectExpense",
    "IndividualAnimal",
    "AnimalRecord",
    "MonthlyExpense",
    "LoadRecord",
]
