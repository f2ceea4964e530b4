"""Domain errors raised for records the engine cannot evaluate."""


class InvalidRecordError(ValueError):
    """Raised when a record holds values the calculators cannot use.

    Attributes:
        record_id: Identifier of the offending record, when known.
        reason: Human-readable description of the problem.
    """

    def __init__(self, reason: str, record_id: str | None = None) -> None:
        self.record_id = record_id
        self.reason = reason
        prefix = f"record {record_id}: " if record_id else ""
        super().__init__(f"{prefix}{reason}")


class InvalidDateRangeError(InvalidRecordError):
    """Raised for unparseable dates or a disposition before intake."""


__all__ = ["InvalidRecordError", "InvalidDateRangeError"]
