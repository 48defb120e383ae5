"""
Calculator Configuration

Loads runtime settings from environment variables.
The engine never reads configuration itself; callers pass the values in.
"""

import math
import os
from dataclasses import dataclass
from pathlib import Path

from llm_cost_calculator.exceptions import ConfigError

DEFAULT_USD_TO_INR = 86.65
DEFAULT_LOG_LEVEL = "WARNING"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_exchange_rate(raw: str | float, source: str = "exchange rate") -> float:
    """Parse a USD to INR rate; it must be a finite positive number."""
    try:
        rate = float(raw)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{source} is not a number: {raw!r}") from e
    if not math.isfinite(rate) or rate <= 0:
        raise ConfigError(f"{source} must be positive, got {rate}")
    return rate


@dataclass
class CalculatorConfig:
    """Configuration for the calculator.

    Environment Variables:
        LLM_COST_USD_TO_INR: USD to INR exchange rate (default: 86.65)
        LLM_COST_CATALOG: Path to a JSON pricing catalog (default: built-in table)
        LLM_COST_LOG_LEVEL: Log level for the CLI (default: WARNING)
    """

    usd_to_inr: float = DEFAULT_USD_TO_INR
    catalog_path: Path | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "CalculatorConfig":
        """Load config from environment variables."""
        raw_rate = os.environ.get("LLM_COST_USD_TO_INR", "").strip()
        if raw_rate:
            rate = parse_exchange_rate(raw_rate, source="LLM_COST_USD_TO_INR")
        else:
            rate = DEFAULT_USD_TO_INR

        level = os.environ.get("LLM_COST_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(f"LLM_COST_LOG_LEVEL must be one of {_LOG_LEVELS}, got {level!r}")

        catalog = os.environ.get("LLM_COST_CATALOG") or None

        return cls(
            usd_to_inr=rate,
            catalog_path=Path(catalog) if catalog else None,
            log_level=level,
        )


# Global config singleton
_config: CalculatorConfig | None = None


def get_config() -> CalculatorConfig:
    """Get the global config (lazy-loaded from env)."""
    global _config
    if _config is None:
        _config = CalculatorConfig.from_env()
    return _config


def reset_config() -> None:
    """Reset config (useful for testing)."""
    global _config
    _config = None
