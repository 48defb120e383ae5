"""
Display formatting - the only place numbers get rounded.
"""

from llm_cost_calculator.engine.params import Currency

CURRENCY_SYMBOLS = {
    Currency.USD: "$",
    Currency.INR: "₹",
}

# (threshold, divisor, suffix), largest first
_USD_UNITS = (
    (1_000_000, 1_000_000, "M"),
    (1_000, 1_000, "K"),
)
_INR_UNITS = (
    (10_000_000, 10_000_000, "Cr"),  # crore
    (100_000, 100_000, "L"),  # lakh
    (1_000, 1_000, "K"),
)


def currency_symbol(currency: Currency | str) -> str:
    return CURRENCY_SYMBOLS[Currency(currency)]


def format_currency(value: float, currency: Currency | str = Currency.USD) -> str:
    """Compact currency string: $1.50K, ₹2.30L, ₹1.00Cr."""
    currency = Currency(currency)
    symbol = CURRENCY_SYMBOLS[currency]
    units = _INR_UNITS if currency is Currency.INR else _USD_UNITS
    for threshold, divisor, suffix in units:
        if value >= threshold:
            return f"{symbol}{value / divisor:.2f}{suffix}"
    return f"{symbol}{value:.2f}"


def format_amount(value: float, currency: Currency | str = Currency.USD, places: int = 4) -> str:
    """Full-precision currency string for table cells."""
    return f"{currency_symbol(currency)}{value:.{places}f}"


def format_percentage(value: float | None) -> str:
    """Signed percentage, "n/a" when undefined."""
    if value is None:
        return "n/a"
    return f"{value:+.1f}%"


def format_tokens(value: float) -> str:
    return f"{round(value):,}"


def format_score(value: float) -> str:
    if value == float("inf"):
        return "inf"
    return f"{value:.1f}"


# Score grades shown next to each model, highest threshold first
EFFICIENCY_TIERS = (
    (70, "high"),
    (50, "medium"),
)


def efficiency_tier(score: float) -> str:
    for threshold, label in EFFICIENCY_TIERS:
        if score >= threshold:
            return label
    return "low"
