"""Domain constants for livestock profit/loss analytics."""

STATUS_ACTIVE = "active"
STATUS_SOLD = "sold"
STATUS_DECEASED = "deceased"

ANIMAL_STATUSES = (
    STATUS_ACTIVE,
    STATUS_SOLD,
    STATUS_DECEASED,
)

LOAD_STATUS_LOADED_OUT = "loaded out"
LOAD_STATUS_PENDING = "pending"

LOAD_STATUSES = (
    LOAD_STATUS_LOADED_OUT,
    LOAD_STATUS_PENDING,
)

ATTRIBUTION_FULL = "full"
ATTRIBUTION_PRORATED = "prorated"

ATTRIBUTION_MODES = (
    ATTRIBUTION_FULL,
    ATTRIBUTION_PRORATED,
)


__all__ = [
    "STATUS_ACTIVE",
    "STATUS_SOLD",
    "STATUS_DECEASED",
    "ANIMAL_STATUSES",
    "LOAD_STATUS_LOADED_OUT",
    "LOAD_STATUS_PENDING",
    "LOAD_STATUSES",
    "ATTRIBUTION_FULL",
    "ATTRIBUTION_PRORATED",
    "ATTRIBUTION_MODES",
]
