"""
Amount Formatting

The single rounding policy for every amount injected into a decree:
whole euro, ROUND_HALF_UP, period as thousands separator (1.418).
Internal arithmetic is never rounded; rounding happens only here.
"""

from decimal import ROUND_HALF_UP, Decimal


def round_amount(value: Decimal) -> Decimal:
    """Round to whole currency units."""
    return Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def format_amount(value: Decimal) -> str:
    """Render an amount for the decree, e.g. Decimal('1418.4') -> '1.418'."""
    return f"{round_amount(value):,}".replace(",", ".")


def format_percentage(rate: Decimal) -> str:
    """Render a fraction as a whole percentage, e.g. Decimal('0.30') -> '30'."""
    return format_amount(rate * 100)
