"""Database ports for the livestock ledger.

This module defines the application-layer protocol for accessing the farm
database engine. Infrastructure implementations are expected to provide a
concrete adapter that satisfies this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the farm database engine.

    Record store adapters depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_farm_engine(self) -> Engine:
        """Get the engine for the farm records database.

        Returns:
            Engine: SQLAlchemy engine connected to the farm database.
        """


__all__ = ["DatabaseEnginePort"]
