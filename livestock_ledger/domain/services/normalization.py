"""Domain normalization helpers."""

from collections.abc import Iterable

from livestock_ledger.domain.constants import (
    LOAD_STATUS_LOADED_OUT,
    STATUS_ACTIVE,
    STATUS_SOLD,
)
from livestock_ledger.domain.models import AnimalRecord, LoadRecord


def normalize_collection_names(names: Iterable[str] | str | None) -> tuple[str, ...]:
    """Normalize collection tags.

    Args:
        names: Raw tag values from a record.

    Returns:
        tuple[str, ...]: Stripped, non-empty tags without duplicates, in
        their original order.
    """
    if not names:
        return ()
    if isinstance(names, str):
        names = [names]
    seen: dict[str, None] = {}
    for name in names:
        if name is None:
            continue
        cleaned = str(name).strip()
        if cleaned:
            seen.setdefault(cleaned, None)
    return tuple(seen)


def normalize_status(status: str | None, default: str = STATUS_ACTIVE) -> str:
    """Normalize record status values.

    Args:
        status: Raw status value from a record.
        default: Status used when the value is empty.

    Returns:
        str: Lower-cased status with collapsed whitespace.
    """
    if not status:
        return default
    cleaned = " ".join(status.split()).lower()
    return cleaned or default


def load_record_as_animal(record: LoadRecord) -> AnimalRecord:
    """Map a load-in/load-out record onto the animal record shape.

    The load-in price is the cost basis. The load-out price is the realized
    price; records without one fall back to the load-in price.

    Args:
        record: Load record from the record store.

    Returns:
        AnimalRecord: Equivalent record for the shared calculators.
    """
    loaded_out = normalize_status(record.status) == LOAD_STATUS_LOADED_OUT
    realized = record.load_out_price
    if realized is None:
        realized = record.load_in_price
    return AnimalRecord(
        id=record.id,
        animal_number=record.animal_number,
        purchase_price=record.load_in_price,
        purchase_date=record.load_in_date,
        collection_names=normalize_collection_names(record.collection_names),
        status=STATUS_SOLD if loaded_out else STATUS_ACTIVE,
        sold_date=record.load_out_date if loaded_out else None,
        selling_price=realized if loaded_out else None,
    )


__all__ = [
    "normalize_collection_names",
    "normalize_status",
    "load_record_as_animal",
]
