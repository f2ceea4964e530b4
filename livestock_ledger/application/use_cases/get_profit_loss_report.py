"""Use case to compute the farm profit/loss report for a period."""

from datetime import date

from livestock_ledger.application.ports.record_store import RecordStorePort
from livestock_ledger.domain.constants import ATTRIBUTION_FULL
from livestock_ledger.domain.models import ProfitLossReport
from livestock_ledger.domain.policies.periods import (
    PERIOD_ALL,
    filter_animals_by_period,
    filter_expenses_by_period,
)
from livestock_ledger.domain.services.aggregation import (
    compute_profit_loss_report,
)
from livestock_ledger.infrastructure.logging.logger import get_app_logger


class GetProfitLossReportUseCase:
    """Compute per-animal, per-collection and farm profit/loss."""

    def __init__(
        self,
        record_store: RecordStorePort,
        logger=None,
        attribution_mode: str = ATTRIBUTION_FULL,
    ) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing animal records and expenses.
            logger: Optional logger compatible with logging.Logger-like API.
            attribution_mode: How tagged expenses are shared between records.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()
        self._attribution_mode = attribution_mode

    def execute(
        self,
        period: str = PERIOD_ALL,
        today: date | None = None,
    ) -> ProfitLossReport:
        """Return the profit/loss report.

        Args:
            period: Reporting period (month, year or all).
            today: Reference date for the period and for open stays.

        Returns:
            ProfitLossReport: Report over the records of the period.
        """
        animals = self._record_store.fetch_animal_records()
        expenses = self._record_store.fetch_monthly_expenses()
        self._logger.info(
            f"Fetched {len(animals)} animal records and "
            f"{len(expenses)} monthly expenses"
        )

        report = compute_profit_loss_report(
            filter_animals_by_period(animals, period, today=today),
            filter_expenses_by_period(expenses, period, today=today),
            today=today,
            attribution_mode=self._attribution_mode,
            logger=self._logger,
        )
        self._logger.info(
            f"Profit/loss computed for period={period}: "
            f"expense={report.overall.total_expense}, "
            f"sale={report.overall.total_sale}, "
            f"profit={report.overall.profit}, loss={report.overall.loss}, "
            f"rejected={len(report.rejected)}"
        )
        return report


__all__ = ["GetProfitLossReportUseCase", "ProfitLossReport"]
