"""Dollar formatting for price breakdowns.

Build prices and grand totals print in whole dollars ('$728,000'); smaller
line items such as container or permit charges keep their cents.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from takeplace.models.breakdown import CostSpread

WHOLE_DOLLAR_THRESHOLD = 10_000


def format_currency(amount: float) -> str:
    """Render an amount with comma grouping, dropping cents from $10,000 up."""
    decimals = 0 if amount >= WHOLE_DOLLAR_THRESHOLD else 2
    return f"${amount:,.{decimals}f}"


def format_spread(spread: CostSpread) -> str:
    """Render a CostSpread as its low and high ends, e.g. '$772,000 – $803,000'."""
    return f"{format_currency(spread.min)} – {format_currency(spread.max)}"
