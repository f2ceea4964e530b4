"""Use case to compute profit/loss over load-in/load-out records."""

from datetime import date

from livestock_ledger.application.ports.record_store import RecordStorePort
from livestock_ledger.domain.constants import ATTRIBUTION_FULL
from livestock_ledger.domain.models import AnimalRecord, ProfitLossReport
from livestock_ledger.domain.services.aggregation import (
    compute_profit_loss_report,
)
from livestock_ledger.domain.services.normalization import (
    load_record_as_animal,
)
from livestock_ledger.infrastructure.logging.logger import get_app_logger


class GetLoadReportUseCase:
    """Compute the profit/loss report for load-in/load-out records."""

    def __init__(
        self,
        record_store: RecordStorePort,
        logger=None,
        attribution_mode: str = ATTRIBUTION_FULL,
    ) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing load records and expenses.
            logger: Optional logger compatible with logging.Logger-like API.
            attribution_mode: How tagged expenses are shared between records.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()
        self._attribution_mode = attribution_mode

    def load_animals(self) -> list[AnimalRecord]:
        """Return load records mapped onto the animal record shape."""
        records = self._record_store.fetch_load_records()
        self._logger.info(f"Fetched {len(records)} load records")
        return [load_record_as_animal(record) for record in records]

    def execute(self, today: date | None = None) -> ProfitLossReport:
        """Return the load-in/load-out profit/loss report.

        Args:
            today: Reference date for records not loaded out yet.

        Returns:
            ProfitLossReport: Report over every load record.
        """
        animals = self.load_animals()
        expenses = self._record_store.fetch_monthly_expenses()
        report = compute_profit_loss_report(
            animals,
            expenses,
            today=today,
            attribution_mode=self._attribution_mode,
            logger=self._logger,
        )
        self._logger.info(
            f"Load report computed: expense={report.overall.total_expense}, "
            f"sale={report.overall.total_sale}, "
            f"profit={report.overall.profit}, loss={report.overall.loss}"
        )
        return report


__all__ = ["GetLoadReportUseCase"]
