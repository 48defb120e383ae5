"""
Workload parameters - what the user is asking the calculator to project.

CalculationParams is plain mutable state owned by whoever collects input.
The engine only reads it; validation happens before it gets here (see
llm_cost_calculator.inputs).
"""

from dataclasses import dataclass
from enum import Enum


class Currency(str, Enum):
    USD = "USD"
    INR = "INR"


class ChartType(str, Enum):
    BAR = "bar"
    RADAR = "radar"
    SCATTER = "scatter"


class TimeFrame(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass
class CalculationParams:
    """Workload description for a cost projection.

    Sizes are token counts when use_tokens is True, word counts otherwise.
    chart_type and timeframe are display-only and never affect the math.
    """

    input_size: float = 20
    output_size: float = 200
    requests: int = 100
    use_tokens: bool = False
    currency: Currency = Currency.USD
    chart_type: ChartType = ChartType.BAR
    timeframe: TimeFrame = TimeFrame.MONTHLY
