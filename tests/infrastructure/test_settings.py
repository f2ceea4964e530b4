"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

from livestock_ledger.infrastructure import settings as settings_module
from livestock_ledger.infrastructure.settings import FarmReportSettings


def test_from_env_uses_defaults(monkeypatch) -> None:
    """Unset variables fall back to the defaults."""
    monkeypatch.setattr(settings_module, "get_app_logger", MagicMock)
    for name in ("REPORT_PERIOD", "EXPENSE_ATTRIBUTION", "CURRENCY_SYMBOL"):
        monkeypatch.delenv(name, raising=False)

    settings = FarmReportSettings.from_env()

    assert settings == FarmReportSettings()
    assert settings.currency_symbol == "₹"


def test_from_env_reads_values(monkeypatch) -> None:
    """Known values are normalized and used."""
    monkeypatch.setattr(settings_module, "get_app_logger", MagicMock)
    monkeypatch.setenv("REPORT_PERIOD", " Month ")
    monkeypatch.setenv("EXPENSE_ATTRIBUTION", "PRORATED")
    monkeypatch.setenv("CURRENCY_SYMBOL", "$")

    settings = FarmReportSettings.from_env()

    assert settings.period == "month"
    assert settings.attribution_mode == "prorated"
    assert settings.currency_symbol == "$"


def test_from_env_warns_on_invalid_values(monkeypatch) -> None:
    """Invalid values are logged and replaced by the default."""
    logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    monkeypatch.setenv("REPORT_PERIOD", "fortnight")
    monkeypatch.delenv("EXPENSE_ATTRIBUTION", raising=False)

    settings = FarmReportSettings.from_env()

    assert settings.period == "all"
    logger.warning.assert_called_once()
    assert "REPORT_PERIOD" in logger.warning.call_args.args[0]
