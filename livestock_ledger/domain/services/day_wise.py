"""Day-indexed series of prorated expense, sale and profit/loss."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from decimal import Decimal

from livestock_ledger.domain.models import AnimalStats, DayWiseEntry
from livestock_ledger.utils.decimal_utils import ZERO


@dataclass
class _DayBucket:
    total_expense: Decimal = ZERO
    total_sale: Decimal = ZERO
    profit: Decimal = ZERO
    loss: Decimal = ZERO
    animal_count: int = 0


def iter_day_wise_series(stats: Iterable[AnimalStats]) -> Iterator[DayWiseEntry]:
    """Yield prorated totals for day 1 up to the longest completed stay.

    Only records with a disposition date take part, since an open stay has
    no known length to prorate over. Each included record spreads its total
    expense and realized price evenly over the days of its stay.

    Args:
        stats: Per-animal figures.

    Yields:
        DayWiseEntry: One entry per day, in ascending order, without gaps.
    """
    included = [item for item in stats if item.disposed_on is not None]
    if not included:
        return
    buckets = [
        _DayBucket() for _ in range(max(item.days_in_farm for item in included))
    ]
    for item in included:
        stay = item.days_in_farm
        daily_expense = item.total_expense / stay
        daily_sale = item.realized_price / stay
        daily_profit = max(ZERO, daily_sale - daily_expense)
        daily_loss = max(ZERO, daily_expense - daily_sale)
        for bucket in buckets[:stay]:
            bucket.total_expense += daily_expense
            bucket.total_sale += daily_sale
            bucket.profit += daily_profit
            bucket.loss += daily_loss
            bucket.animal_count += item.unit_count

    for index, bucket in enumerate(buckets, start=1):
        yield DayWiseEntry(
            day=index,
            total_expense=bucket.total_expense,
            total_sale=bucket.total_sale,
            profit=bucket.profit,
            loss=bucket.loss,
            animal_count=bucket.animal_count,
        )


def build_day_wise_series(stats: Iterable[AnimalStats]) -> list[DayWiseEntry]:
    """Return the full day-wise series as a list."""
    return list(iter_day_wise_series(stats))


__all__ = ["iter_day_wise_series", "build_day_wise_series"]
