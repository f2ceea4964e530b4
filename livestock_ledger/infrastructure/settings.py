"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

from livestock_ledger.domain.constants import (
    ATTRIBUTION_FULL,
    ATTRIBUTION_MODES,
)
from livestock_ledger.domain.policies.periods import PERIOD_ALL, REPORT_PERIODS
from livestock_ledger.infrastructure.logging.logger import get_app_logger
from livestock_ledger.utils.currency import DEFAULT_CURRENCY_SYMBOL


@dataclass(frozen=True)
class FarmReportSettings:
    """Settings for profit/loss reporting.

    Attributes:
        period: Default reporting period (month, year or all).
        attribution_mode: How tagged expenses are shared (full or prorated).
        currency_symbol: Symbol used when printing amounts.
    """

    period: str = PERIOD_ALL
    attribution_mode: str = ATTRIBUTION_FULL
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL

    @classmethod
    def from_env(cls) -> "FarmReportSettings":
        """Build settings from environment variables.

        Returns:
            FarmReportSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        period = cls._choice(
            "REPORT_PERIOD", REPORT_PERIODS, PERIOD_ALL, logger
        )
        attribution_mode = cls._choice(
            "EXPENSE_ATTRIBUTION", ATTRIBUTION_MODES, ATTRIBUTION_FULL, logger
        )
        symbol = os.getenv("CURRENCY_SYMBOL") or DEFAULT_CURRENCY_SYMBOL
        return cls(
            period=period,
            attribution_mode=attribution_mode,
            currency_symbol=symbol,
        )

    @staticmethod
    def _choice(
        name: str,
        allowed: tuple[str, ...],
        default: str,
        logger,
    ) -> str:
        """Read an environment variable restricted to known values.

        Args:
            name: Environment variable name.
            allowed: Accepted values.
            default: Value used when unset or invalid.
            logger: Logger used for warnings.

        Returns:
            str: The normalized value or the default.
        """
        raw = os.getenv(name, default).strip().lower()
        if raw in allowed:
            return raw
        logger.warning(
            f"Invalid {name}='{raw}'. Expected one of {', '.join(allowed)}; "
            f"using '{default}'."
        )
        return default


__all__ = ["FarmReportSettings"]
