"""Day-allocation helpers for animal stays on the farm."""

from datetime import date, datetime, timezone
from logging import Logger

from livestock_ledger.domain.errors import InvalidDateRangeError

MIN_DAYS_IN_FARM = 1


def to_datetime(
    value: date | str | None,
    record_id: str | None = None,
) -> datetime:
    """Normalize a record date to a naive datetime.

    Args:
        value: Date, datetime or ISO-8601 string from a record.
        record_id: Identifier used in error messages.

    Returns:
        datetime: Naive datetime; aware values are converted to UTC first
        and plain dates map to midnight.

    Raises:
        InvalidDateRangeError: If the value is missing or unparseable.
    """
    if value is None or value == "":
        raise InvalidDateRangeError("missing date", record_id)
    if isinstance(value, datetime):
        return _naive_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        raw = value.strip()
        if raw.endswith("Z"):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError as exc:
            raise InvalidDateRangeError(
                f"unparseable date '{value}'", record_id
            ) from exc
        return _naive_utc(parsed)
    raise InvalidDateRangeError(f"unsupported date value {value!r}", record_id)


def _naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def days_in_farm(
    intake: date | str | None,
    disposition: date | str | None = None,
    *,
    today: date | None = None,
    record_id: str | None = None,
    logger: Logger | None = None,
) -> int:
    """Return the whole days an animal stayed on the farm.

    The stay runs from intake to disposition, or to ``today`` while the
    animal is still on the farm, and is never shorter than one day.

    Args:
        intake: Purchase or load-in date.
        disposition: Sale or load-out date, if any.
        today: Reference date for open stays; defaults to now.
        record_id: Identifier used in errors and warnings.
        logger: Optional logger for clamped stays.

    Returns:
        int: Floor of the elapsed days, at least ``MIN_DAYS_IN_FARM``.

    Raises:
        InvalidDateRangeError: If a date is malformed or the disposition
            precedes the intake.
    """
    start = to_datetime(intake, record_id)
    if disposition is not None and disposition != "":
        end = to_datetime(disposition, record_id)
        if end < start:
            raise InvalidDateRangeError(
                f"disposition {end.date()} precedes intake {start.date()}",
                record_id,
            )
    else:
        end = to_datetime(today, record_id) if today else datetime.now()
        if end < start and logger is not None:
            logger.warning(
                f"Intake date {start.date()} is in the future for "
                f"record {record_id}; counting {MIN_DAYS_IN_FARM} day"
            )
    return max(MIN_DAYS_IN_FARM, (end - start).days)


__all__ = ["MIN_DAYS_IN_FARM", "to_datetime", "days_in_farm"]
