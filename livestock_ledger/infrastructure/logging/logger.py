"""Logging helpers shared by every layer.

Loggers write to ``<project root>/logs/<subdir>/<YYYYMMDD>_<prefix>.log`` and
optionally to the console. ``get_app_logger`` and ``get_usage_logger`` return
process-wide singletons.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from livestock_ledger.utils.utils import get_project_root

DEFAULT_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


class LoggerBuilder:
    """Fluent builder for file and console loggers."""

    def __init__(self) -> None:
        self._name = "livestock_ledger"
        self._subdir = "app"
        self._prefix = "app_logs"
        self._console = False
        self._level = logging.INFO
        self._formatter_factory: Callable[[], logging.Formatter] = (
            self._default_formatter
        )
        self._file_handler_factory: Callable[
            [Path, logging.Formatter], logging.Handler
        ] = self._default_file_handler
        self._console_handler_factory: Callable[
            [logging.Formatter], logging.Handler
        ] = self._default_console_handler

    def name(self, name: str) -> "LoggerBuilder":
        self._name = name
        return self

    def subdir(self, subdir: str) -> "LoggerBuilder":
        self._subdir = subdir
        return self

    def prefix(self, prefix: str) -> "LoggerBuilder":
        self._prefix = prefix
        return self

    def console(self, enabled: bool) -> "LoggerBuilder":
        self._console = enabled
        return self

    def level(self, level: int) -> "LoggerBuilder":
        self._level = level
        return self

    def formatter(
        self,
        factory: Callable[[], logging.Formatter],
    ) -> "LoggerBuilder":
        self._formatter_factory = factory
        return self

    def file_handler(
        self,
        factory: Callable[[Path, logging.Formatter], logging.Handler],
    ) -> "LoggerBuilder":
        self._file_handler_factory = factory
        return self

    def console_handler(
        self,
        factory: Callable[[logging.Formatter], logging.Handler],
    ) -> "LoggerBuilder":
        self._console_handler_factory = factory
        return self

    def build(self) -> logging.Logger:
        """Return the configured logger.

        A logger that already has handlers is returned unchanged, so
        building twice never duplicates output.

        Returns:
            logging.Logger: Logger with a file handler and, when enabled, a
            console handler.
        """
        logger = logging.getLogger(self._name)
        if logger.handlers:
            return logger
        logger.setLevel(self._level)
        logger.propagate = False

        log_dir = get_project_root() / "logs" / self._subdir
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / f"{self._today_stamp()}_{self._prefix}.log"

        fmt = self._formatter_factory()
        logger.addHandler(self._file_handler_factory(log_path, fmt))
        if self._console:
            logger.addHandler(self._console_handler_factory(fmt))
        return logger

    @staticmethod
    def _today_stamp() -> str:
        return datetime.now().strftime("%Y%m%d")

    @staticmethod
    def _default_formatter() -> logging.Formatter:
        return logging.Formatter(DEFAULT_FORMAT)

    @staticmethod
    def _default_file_handler(
        path: Path,
        fmt: logging.Formatter,
    ) -> logging.FileHandler:
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler

    @staticmethod
    def _default_console_handler(fmt: logging.Formatter) -> logging.StreamHandler:
        handler = logging.StreamHandler()
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler


class Logger:
    """Singleton wrapper around a built logger."""

    _instance = None
    _subdir = "app"
    _prefix = "app_logs"
    _console = True

    def __new__(cls, name: str = "livestock_ledger"):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance.logger = (
                LoggerBuilder()
                .name(name)
                .subdir(cls._subdir)
                .prefix(cls._prefix)
                .console(cls._console)
                .build()
            )
            cls._instance = instance
        return cls._instance

    def debug(self, msg: str) -> None:
        self.logger.debug(msg)

    def info(self, msg: str) -> None:
        self.logger.info(msg)

    def warning(self, msg: str) -> None:
        self.logger.warning(msg)

    def error(self, msg: str) -> None:
        self.logger.error(msg)

    def critical(self, msg: str) -> None:
        self.logger.critical(msg)


class AppLogger(Logger):
    """Application log: engine warnings and use case summaries."""

    _instance = None


class UsageLogger(Logger):
    """Usage log: one line per report run, file only."""

    _instance = None
    _subdir = "usage"
    _prefix = "usage_logs"
    _console = False


def get_app_logger() -> AppLogger:
    """Return the application logger singleton."""
    return AppLogger("livestock_ledger")


def get_usage_logger() -> UsageLogger:
    """Return the usage logger singleton."""
    return UsageLogger("livestock_ledger.usage")


__all__ = [
    "LoggerBuilder",
    "Logger",
    "AppLogger",
    "UsageLogger",
    "get_app_logger",
    "get_usage_logger",
]
