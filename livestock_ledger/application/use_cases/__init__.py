"""Application use cases package."""

from .get_bulk_unit_breakdown import GetBulkUnitBreakdownUseCase
from .get_day_wise_series import GetDayWiseSeriesUseCase
from .get_load_report import GetLoadReportUseCase
from .get_pooled_allocation import GetPooledAllocationUseCase
from .get_profit_loss_report import (
    GetProfitLossReportUseCase,
    ProfitLossReport,
)

__all__ = [
    "GetBulkUnitBreakdownUseCase",
    "GetDayWiseSeriesUseCase",
    "GetLoadReportUseCase",
    "GetPooledAllocationUseCase",
    "GetProfitLossReportUseCase",
    "ProfitLossReport",
]
