"""Use case to allocate pooled farm cost per day of stay."""

from datetime import date

from livestock_ledger.application.ports.record_store import RecordStorePort
from livestock_ledger.domain.models import PooledAllocationReport
from livestock_ledger.domain.services.pooled import compute_pooled_allocation
from livestock_ledger.infrastructure.logging.logger import get_app_logger


class GetPooledAllocationUseCase:
    """Charge every animal the farm-wide expense per day."""

    def __init__(self, record_store: RecordStorePort, logger=None) -> None:
        self._record_store = record_store
        self._logger = logger or get_app_logger()

    def execute(self, today: date | None = None) -> PooledAllocationReport:
        """Return the pooled allocation over every animal record."""
        animals = self._record_store.fetch_animal_records()
        expenses = self._record_store.fetch_monthly_expenses()
        report = compute_pooled_allocation(
            animals,
            expenses,
            today=today,
            logger=self._logger,
        )
        self._logger.info(
            f"Pooled allocation computed: rate={report.expense_per_day}/day, "
            f"days={report.overall.total_days}, "
            f"profit_or_loss={report.overall.profit_or_loss}"
        )
        return report


__all__ = ["GetPooledAllocationUseCase"]
