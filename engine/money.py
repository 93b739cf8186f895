"""
Money formatting helpers.

All amounts inside the engine are integer cents.
"""

from decimal import Decimal, ROUND_HALF_UP


def cents_to_display(cents: int) -> str:
    """Format cents as dollars, e.g. 1250 -> '$12.50'."""
    dollars = (Decimal(cents) / 100).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    if dollars < 0:
        return f"-${-dollars}"
    return f"${dollars}"


def dollars_to_cents(dollars: float) -> int:
    """Convert a dollar amount to whole cents, halves away from zero."""
    return int((Decimal(str(dollars)) * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def format_stakes(cents: int) -> str:
    """Format a stake: dollars from $1 up, cents below (e.g. '75¢')."""
    if cents >= 100:
        return cents_to_display(cents)
    return f"{cents}¢"
