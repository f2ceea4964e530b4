"""CLI adapter printing the farm profit/loss report.

This module wires the GetProfitLossReportUseCase to the SQL record store and
prints farm totals, collection totals and the day-wise series.
"""

from livestock_ledger.application.use_cases.get_profit_loss_report import (
    GetProfitLossReportUseCase,
)
from livestock_ledger.domain.services.day_wise import build_day_wise_series
from livestock_ledger.infrastructure.container import build_record_store
from livestock_ledger.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from livestock_ledger.infrastructure.settings import FarmReportSettings
from livestock_ledger.utils.currency import format_currency


def main() -> None:
    """Run the profit/loss report for the configured period."""
    logger = get_app_logger()
    settings = FarmReportSettings.from_env()
    get_usage_logger().info(
        f"farm-report run period={settings.period} "
        f"attribution={settings.attribution_mode}"
    )

    use_case = GetProfitLossReportUseCase(
        record_store=build_record_store(),
        logger=logger,
        attribution_mode=settings.attribution_mode,
    )
    report = use_case.execute(period=settings.period)

    def money(amount) -> str:
        return format_currency(amount, settings.currency_symbol)

    overall = report.overall
    print(f"Farm profit/loss (period={settings.period})")
    print(
        f"animals={overall.animal_count}, "
        f"expense={money(overall.total_expense)}, "
        f"sale={money(overall.total_sale)}, "
        f"profit={money(overall.profit)}, loss={money(overall.loss)}"
    )
    for name, stats in report.collections.items():
        outcome = "profit" if stats.net >= 0 else "loss"
        print(
            f"{name}: animals={stats.animal_count}, "
            f"expense={money(stats.total_expense)}, "
            f"sale={money(stats.total_sale)}, "
            f"net={money(stats.net)} ({outcome})"
        )
    if report.rejected:
        print(f"Skipped {len(report.rejected)} invalid records")

    for entry in build_day_wise_series(report.animals.values()):
        print(
            f"Day {entry.day}: animals={entry.animal_count}, "
            f"expense={money(entry.total_expense)}, "
            f"sale={money(entry.total_sale)}, "
            f"profit={money(entry.profit)}, loss={money(entry.loss)}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
