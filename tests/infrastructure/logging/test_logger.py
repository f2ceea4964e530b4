"""Tests for the livestock_ledger loggers."""

import logging
from unittest.mock import MagicMock

import pytest

from livestock_ledger.infrastructure.logging import logger as logger_module


@pytest.fixture
def log_root(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240301"),
    )
    return tmp_path


def _close(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_default_build_writes_app_log_file_only(log_root):
    """Defaults log INFO to logs/app without a console handler."""
    report_logger = (
        logger_module.LoggerBuilder().name("livestock_ledger.tests.app").build()
    )

    try:
        assert report_logger.level == logging.INFO
        assert report_logger.propagate is False
        (handler,) = report_logger.handlers
        assert isinstance(handler, logging.FileHandler)
        assert handler.baseFilename == str(
            log_root / "logs" / "app" / "20240301_app_logs.log"
        )
        assert (log_root / "logs" / "app").is_dir()
    finally:
        _close(report_logger)


def test_build_uses_custom_factories_once(log_root):
    """Custom factories receive the log path; rebuilding adds nothing."""
    fmt = logging.Formatter("%(message)s")
    paths = []

    def file_factory(path, formatter):
        paths.append(path)
        assert formatter is fmt
        return logging.NullHandler()

    builder = (
        logger_module.LoggerBuilder()
        .name("livestock_ledger.tests.usage")
        .subdir("usage")
        .prefix("usage_logs")
        .console(True)
        .level(logging.WARNING)
        .formatter(lambda: fmt)
        .file_handler(file_factory)
        .console_handler(lambda formatter: logging.NullHandler())
    )

    first = builder.build()
    second = builder.build()

    try:
        assert first is second
        assert first.level == logging.WARNING
        assert len(first.handlers) == 2
        assert paths == [log_root / "logs" / "usage" / "20240301_usage_logs.log"]
    finally:
        _close(first)


@pytest.mark.parametrize(
    "level", ["debug", "info", "warning", "error", "critical"]
)
def test_wrapper_forwards_each_level(monkeypatch, level):
    """The singleton wrapper forwards every level to the built logger."""
    built = MagicMock()
    monkeypatch.setattr(logger_module.LoggerBuilder, "build", lambda self: built)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    getattr(app_logger, level)("Skipping record a1: missing date")

    getattr(built, level).assert_called_once_with(
        "Skipping record a1: missing date"
    )


def test_app_and_usage_loggers_are_distinct_singletons(monkeypatch):
    """Each accessor returns its own cached instance and configuration."""
    configs = []

    def fake_build(self):
        configs.append((self._name, self._subdir, self._prefix, self._console))
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert configs == [
        ("livestock_ledger", "app", "app_logs", True),
        ("livestock_ledger.usage", "usage", "usage_logs", False),
    ]
