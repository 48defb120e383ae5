"""
Input collection - turns raw user input into CalculationParams.

The engine never validates. This layer is where invalid entry is absorbed:
non-numeric, non-finite or negative numbers become 0, unknown enum values
fall back to their defaults. It never raises for bad values.
"""

import logging
import math
from typing import Any

from pydantic import BaseModel, field_validator

from llm_cost_calculator.engine.params import (
    CalculationParams,
    ChartType,
    Currency,
    TimeFrame,
)

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on", "tokens"}


def coerce_non_negative(value: Any) -> float:
    """Parse a number, mapping anything unusable to 0."""
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.debug("Coercing non-numeric input %r to 0", value)
        return 0.0
    if not math.isfinite(number) or number < 0:
        logger.debug("Coercing out-of-range input %r to 0", value)
        return 0.0
    return number


class CalculationRequest(BaseModel):
    """Raw calculator form input.

    Field defaults mirror the calculator's initial form state.
    """

    input_size: float = 20
    output_size: float = 200
    requests: int = 100
    use_tokens: bool = False
    currency: Currency = Currency.USD
    chart_type: ChartType = ChartType.BAR
    timeframe: TimeFrame = TimeFrame.MONTHLY

    @field_validator("input_size", "output_size", mode="before")
    @classmethod
    def _coerce_size(cls, value: Any) -> float:
        return coerce_non_negative(value)

    @field_validator("requests", mode="before")
    @classmethod
    def _coerce_requests(cls, value: Any) -> int:
        return int(coerce_non_negative(value))

    @field_validator("use_tokens", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in _TRUTHY

    @field_validator("currency", mode="before")
    @classmethod
    def _coerce_currency(cls, value: Any) -> Currency:
        if isinstance(value, Currency):
            return value
        try:
            return Currency(str(value).strip().upper())
        except ValueError:
            return Currency.USD

    @field_validator("chart_type", mode="before")
    @classmethod
    def _coerce_chart_type(cls, value: Any) -> ChartType:
        if isinstance(value, ChartType):
            return value
        try:
            return ChartType(str(value).strip().lower())
        except ValueError:
            return ChartType.BAR

    @field_validator("timeframe", mode="before")
    @classmethod
    def _coerce_timeframe(cls, value: Any) -> TimeFrame:
        if isinstance(value, TimeFrame):
            return value
        try:
            return TimeFrame(str(value).strip().lower())
        except ValueError:
            return TimeFrame.MONTHLY

    def to_params(self) -> CalculationParams:
        return CalculationParams(
            input_size=self.input_size,
            output_size=self.output_size,
            requests=self.requests,
            use_tokens=self.use_tokens,
            currency=self.currency,
            chart_type=self.chart_type,
            timeframe=self.timeframe,
        )


def parse_params(**raw: Any) -> CalculationParams:
    """Coerce raw keyword input straight to CalculationParams."""
    return CalculationRequest(**raw).to_params()
