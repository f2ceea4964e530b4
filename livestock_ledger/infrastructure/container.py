"""Composition root for wiring infrastructure adapters."""

from livestock_ledger.application.ports.database import DatabaseEnginePort
from livestock_ledger.application.ports.record_store import RecordStorePort
from livestock_ledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from livestock_ledger.infrastructure.record_store import SqlAlchemyRecordStore


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_record_store(
    db_port: DatabaseEnginePort | None = None,
) -> RecordStorePort:
    """Return the record store used by the report use cases."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyRecordStore(resolved_db)


__all__ = [
    "build_database_adapter",
    "build_record_store",
]
