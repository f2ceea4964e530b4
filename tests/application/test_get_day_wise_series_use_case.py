"""Tests for the GetDayWiseSeriesUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from livestock_ledger.application.use_cases.get_day_wise_series import (
    SOURCE_LOADS,
    GetDayWiseSeriesUseCase,
)
from livestock_ledger.domain.models import AnimalRecord, LoadRecord


def test_execute_builds_series_from_animal_records() -> None:
    """Sold animals are spread over their days of stay."""
    record_store = MagicMock()
    record_store.fetch_animal_records.return_value = [
        AnimalRecord(
            id="a1",
            animal_number="COW-001",
            purchase_price=Decimal("900"),
            purchase_date=date(2024, 1, 1),
            status="sold",
            sold_date=date(2024, 1, 4),
            selling_price=Decimal("1200"),
        ),
        AnimalRecord(
            id="a2",
            animal_number="COW-002",
            purchase_price=Decimal("500"),
            purchase_date=date(2024, 1, 1),
        ),
    ]
    record_store.fetch_monthly_expenses.return_value = []
    use_case = GetDayWiseSeriesUseCase(record_store, logger=MagicMock())

    series = use_case.execute(today=date(2024, 2, 1))

    assert len(series) == 3
    assert all(entry.total_expense == Decimal("300") for entry in series)
    assert all(entry.profit == Decimal("100") for entry in series)
    assert all(entry.animal_count == 1 for entry in series)


def test_execute_builds_series_from_load_records() -> None:
    """The load source reads load-in/load-out records."""
    record_store = MagicMock()
    record_store.fetch_load_records.return_value = [
        LoadRecord(
            id="l1",
            animal_number="L-1",
            load_in_price=Decimal("1000"),
            load_in_date=date(2024, 1, 1),
            status="loaded out",
            load_out_date=date(2024, 1, 3),
            load_out_price=Decimal("600"),
        )
    ]
    record_store.fetch_monthly_expenses.return_value = []
    use_case = GetDayWiseSeriesUseCase(record_store, logger=MagicMock())

    series = use_case.execute(today=date(2024, 2, 1), source=SOURCE_LOADS)

    assert [entry.loss for entry in series] == [Decimal("200"), Decimal("200")]
    record_store.fetch_animal_records.assert_not_called()


def test_execute_rejects_unknown_source() -> None:
    """Only animal and load sources are supported."""
    use_case = GetDayWiseSeriesUseCase(MagicMock(), logger=MagicMock())

    with pytest.raises(ValueError):
        use_case.execute(source="pens")
