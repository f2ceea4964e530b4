"""Port for reading farm records."""

from typing import Protocol

from livestock_ledger.domain.models import (
    AnimalRecord,
    LoadRecord,
    MonthlyExpense,
)


class RecordStorePort(Protocol):
    """Port exposing the record snapshot the profit/loss engine works on."""

    def fetch_animal_records(self) -> list[AnimalRecord]:
        """Return every animal record."""

    def fetch_animal_record(self, record_id: str) -> AnimalRecord:
        """Return one animal record, raising LookupError when unknown."""

    def fetch_monthly_expenses(self) -> list[MonthlyExpense]:
        """Return every monthly expense."""

    def fetch_load_records(self) -> list[LoadRecord]:
        """Return every load-in/load-out record."""


__all__ = ["RecordStorePort"]
