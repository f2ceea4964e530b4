"""Use case to build the day-wise profit/loss series."""

from datetime import date

from livestock_ledger.application.ports.record_store import RecordStorePort
from livestock_ledger.application.use_cases.get_load_report import (
    GetLoadReportUseCase,
)
from livestock_ledger.application.use_cases.get_profit_loss_report import (
    GetProfitLossReportUseCase,
)
from livestock_ledger.domain.constants import ATTRIBUTION_FULL
from livestock_ledger.domain.models import DayWiseEntry
from livestock_ledger.domain.services.day_wise import build_day_wise_series
from livestock_ledger.infrastructure.logging.logger import get_app_logger

SOURCE_ANIMALS = "animals"
SOURCE_LOADS = "loads"


class GetDayWiseSeriesUseCase:
    """Build prorated expense/sale/profit/loss per day of stay."""

    def __init__(
        self,
        record_store: RecordStorePort,
        logger=None,
        attribution_mode: str = ATTRIBUTION_FULL,
    ) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing the record snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
            attribution_mode: How tagged expenses are shared between records.
        """
        self._record_store = record_store
        self._logger = logger or get_app_logger()
        self._attribution_mode = attribution_mode

    def execute(
        self,
        today: date | None = None,
        source: str = SOURCE_ANIMALS,
    ) -> list[DayWiseEntry]:
        """Return the day-wise series.

        Args:
            today: Reference date for open stays.
            source: ``animals`` for animal records, ``loads`` for load
                records.

        Returns:
            list[DayWiseEntry]: Entries for day 1 to the longest stay.

        Raises:
            ValueError: If the source is unknown.
        """
        if source == SOURCE_ANIMALS:
            report = GetProfitLossReportUseCase(
                self._record_store,
                logger=self._logger,
                attribution_mode=self._attribution_mode,
            ).execute(today=today)
        elif source == SOURCE_LOADS:
            report = GetLoadReportUseCase(
                self._record_store,
                logger=self._logger,
                attribution_mode=self._attribution_mode,
            ).execute(today=today)
        else:
            raise ValueError(f"Unknown day-wise source: {source}")

        series = build_day_wise_series(report.animals.values())
        self._logger.info(
            f"Day-wise series built from {source}: {len(series)} days"
        )
        return series


__all__ = [
    "SOURCE_ANIMALS",
    "SOURCE_LOADS",
    "GetDayWiseSeriesUseCase",
]
