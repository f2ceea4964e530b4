"""Database infrastructure for the livestock ledger.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the farm records database. It belongs to the
infrastructure layer because it deals with an external system.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from livestock_ledger.application.ports.database import DatabaseEnginePort

FARM_DB_URL_VAR = "FARM_DB_URL"


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Values from a local ``.env`` file are loaded first.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_farm_engine: Optional[Engine] = None


def get_farm_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the farm database.

    Returns:
        Engine: Lazily initialized engine connected to the farm records.
    """
    global _farm_engine
    if _farm_engine is None:
        db_url = _get_env_var(FARM_DB_URL_VAR)
        _farm_engine = _create_engine(db_url)
    return _farm_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so record stores can depend only on the protocol.
    """

    def get_farm_engine(self) -> Engine:
        """Get the engine for the farm database.

        Returns:
            Engine: SQLAlchemy engine connected to the farm records.
        """
        return get_farm_engine()


__all__ = [
    "FARM_DB_URL_VAR",
    "get_farm_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
