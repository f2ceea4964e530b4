"""Tests for the GetProfitLossReportUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from livestock_ledger.application.use_cases.get_profit_loss_report import (
    GetProfitLossReportUseCase,
)
from livestock_ledger.domain.models import (
    AnimalRecord,
    DirectExpense,
    MonthlyExpense,
)


def _record_store() -> MagicMock:
    record_store = MagicMock()
    record_store.fetch_animal_records.return_value = [
        AnimalRecord(
            id="a1",
            animal_number="COW-001",
            purchase_price=Decimal("1000"),
            purchase_date=date(2024, 1, 1),
            collection_names=("Batch-A",),
            status="sold",
            sold_date=date(2024, 5, 10),
            selling_price=Decimal("1500"),
            expenses={"feed": DirectExpense(amount=Decimal("200"))},
        ),
        AnimalRecord(
            id="a2",
            animal_number="COW-002",
            purchase_price=Decimal("1000"),
            purchase_date=date(2024, 1, 1),
            collection_names=("Batch-A",),
            status="sold",
            sold_date=date(2024, 2, 10),
            selling_price=Decimal("900"),
        ),
    ]
    record_store.fetch_monthly_expenses.return_value = [
        MonthlyExpense(
            id="e1",
            year=2024,
            month=5,
            amount=Decimal("100"),
            tags=("Batch-A",),
        ),
        MonthlyExpense(
            id="e2",
            year=2024,
            month=2,
            amount=Decimal("50"),
            tags=("Batch-A",),
        ),
    ]
    return record_store


def test_execute_returns_report_for_all_records() -> None:
    """Every record and expense counts for the whole-history period."""
    record_store = _record_store()
    logger = MagicMock()
    use_case = GetProfitLossReportUseCase(record_store, logger=logger)

    report = use_case.execute(today=date(2024, 5, 15))

    # a1: 1000 + 200 + 150 = 1350 vs 1500; a2: 1000 + 150 = 1150 vs 900.
    assert report.animals["a1"].profit == Decimal("150")
    assert report.animals["a2"].loss == Decimal("250")
    assert report.overall.total_expense == Decimal("2500")
    assert report.overall.total_sale == Decimal("2400")
    assert report.collections["Batch-A"].animal_count == 2
    record_store.fetch_animal_records.assert_called_once_with()
    record_store.fetch_monthly_expenses.assert_called_once_with()
    assert logger.info.call_count == 2


def test_execute_restricts_to_the_current_month() -> None:
    """The month period keeps this month's sales and expenses."""
    use_case = GetProfitLossReportUseCase(_record_store(), logger=MagicMock())

    report = use_case.execute(period="month", today=date(2024, 5, 15))

    assert list(report.animals) == ["a1"]
    assert report.animals["a1"].total_expense == Decimal("1300")
    assert report.overall.profit == Decimal("200")


def test_execute_honors_prorated_attribution() -> None:
    """Prorated mode splits the tagged expenses over the collection."""
    use_case = GetProfitLossReportUseCase(
        _record_store(),
        logger=MagicMock(),
        attribution_mode="prorated",
    )

    report = use_case.execute(today=date(2024, 5, 15))

    assert report.animals["a1"].total_expense == Decimal("1275")
    assert report.animals["a2"].total_expense == Decimal("1075")
    assert report.overall.total_expense == Decimal("2350")
