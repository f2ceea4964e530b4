"""Use case to break a bulk record down into its sold units."""

from datetime import date

from livestock_ledger.application.ports.record_store import RecordStorePort
from livestock_ledger.domain.models import UnitStats
from livestock_ledger.domain.services.bulk import allocate_bulk_units
from livestock_ledger.infrastructure.logging.logger import get_app_logger


class GetBulkUnitBreakdownUseCase:
    """Compute expense and profit/loss per sold unit of a bulk record."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing animal records and expenses.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        record_id: str,
        today: date | None = None,
    ) -> list[UnitStats]:
        """Return the per-unit breakdown of a bulk record.

        Args:
            record_id: Identifier of the bulk record.
            today: Reference date for open stays.

        Returns:
            list[UnitStats]: One entry per sold unit.

        Raises:
            LookupError: If the record does not exist.
            InvalidRecordError: If the record is not a usable bulk record.
        """
        animal = self._record_store.fetch_animal_record(record_id)
        expenses = self._record_store.fetch_monthly_expenses()
        units = allocate_bulk_units(
            animal,
            expenses,
            today=today,
            logger=self._logger,
        )
        self._logger.info(
            f"Bulk record {record_id}: {len(units)} sold units "
            f"out of {animal.quantity}"
        )
        return units


__all__ = ["GetBulkUnitBreakdownUseCase"]
