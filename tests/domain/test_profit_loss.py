"""Tests for single-animal profit/loss."""

from datetime import date
from decimal import Decimal

from livestock_ledger.domain.models import (
    AnimalRecord,
    DirectExpense,
    LoadRecord,
    MonthlyExpense,
)
from livestock_ledger.domain.services.normalization import (
    load_record_as_animal,
)
from livestock_ledger.domain.services.profit_loss import (
    compute_animal_stats,
    compute_profit_loss,
)


def test_profit_when_price_exceeds_cost() -> None:
    """A sale above cost yields only profit."""
    outcome = compute_profit_loss(Decimal("1200"), Decimal("1500"))

    assert outcome.profit == Decimal("300")
    assert outcome.loss == Decimal("0")
    assert outcome.net == Decimal("300")


def test_loss_when_price_below_cost() -> None:
    """A sale below cost yields only loss."""
    outcome = compute_profit_loss(Decimal("1300"), Decimal("1200"))

    assert outcome.profit == Decimal("0")
    assert outcome.loss == Decimal("100")


def test_profit_and_loss_are_exclusive() -> None:
    """At most one of profit and loss is non-zero."""
    values = [Decimal(v) for v in ("0", "0.01", "99.99", "100", "1500")]
    for cost in values:
        for price in values:
            outcome = compute_profit_loss(cost, price)
            if cost == price:
                assert outcome.profit == 0 and outcome.loss == 0
            else:
                assert (outcome.profit > 0) != (outcome.loss > 0)


def test_sold_animal_stats() -> None:
    """Sold animals carry cost, realized price and profit."""
    animal = AnimalRecord(
        id="a1",
        animal_number="COW-001",
        purchase_price=Decimal("1000"),
        purchase_date=date(2024, 1, 1),
        status="sold",
        sold_date="2024-01-31",
        selling_price=Decimal("1500"),
        expenses={"feed": DirectExpense(amount=Decimal("200"))},
    )

    stats = compute_animal_stats(animal, [])

    assert stats.total_expense == Decimal("1200")
    assert stats.realized_price == Decimal("1500")
    assert stats.profit == Decimal("300")
    assert stats.loss == Decimal("0")
    assert stats.days_in_farm == 30
    assert stats.disposed_on == date(2024, 1, 31)


def test_active_animal_has_no_profit_or_loss() -> None:
    """Profit/loss is not computed before a sale."""
    animal = AnimalRecord(
        id="a2",
        animal_number="COW-002",
        purchase_price=Decimal("1000"),
        purchase_date=date(2024, 1, 1),
        collection_names=("Batch-A",),
        selling_price=Decimal("5000"),
    )
    expenses = [
        MonthlyExpense(
            id="e1",
            year=2024,
            month=1,
            amount=Decimal("300"),
            tags=("Batch-A",),
        )
    ]

    stats = compute_animal_stats(animal, expenses, today=date(2024, 1, 21))

    assert stats.total_expense == Decimal("1300")
    assert stats.realized_price == Decimal("0")
    assert stats.profit == Decimal("0")
    assert stats.loss == Decimal("0")
    assert stats.days_in_farm == 20
    assert stats.disposed_on is None


def test_loaded_out_record_uses_load_out_price() -> None:
    """Load-out price is the realized price of a load record."""
    record = LoadRecord(
        id="l1",
        animal_number="L-1",
        load_in_price=Decimal("900"),
        load_in_date=date(2024, 1, 1),
        collection_names=["Truck-1"],
        status="Loaded Out",
        load_out_date=date(2024, 1, 4),
        load_out_price=Decimal("1200"),
    )

    stats = compute_animal_stats(load_record_as_animal(record), [])

    assert stats.total_expense == Decimal("900")
    assert stats.realized_price == Decimal("1200")
    assert stats.profit == Decimal("300")
    assert stats.days_in_farm == 3
    assert stats.collection_names == ("Truck-1",)


def test_loaded_out_record_without_price_falls_back_to_load_in() -> None:
    """Without a load-out price the load-in price is realized."""
    record = LoadRecord(
        id="l2",
        animal_number="L-2",
        load_in_price=Decimal("900"),
        load_in_date=date(2024, 1, 1),
        status="loaded out",
        load_out_date=date(2024, 1, 4),
    )

    animal = load_record_as_animal(record)
    stats = compute_animal_stats(animal, [])

    assert animal.selling_price == Decimal("900")
    assert stats.profit == Decimal("0")
    assert stats.loss == Decimal("0")


def test_pending_load_record_stays_active() -> None:
    """A pending load record is not disposed."""
    record = LoadRecord(
        id="l3",
        animal_number="L-3",
        load_in_price=Decimal("900"),
        load_in_date=date(2024, 1, 1),
        load_out_date=date(2024, 1, 9),
    )

    animal = load_record_as_animal(record)

    assert animal.status == "active"
    assert animal.sold_date is None
    assert animal.selling_price is None
