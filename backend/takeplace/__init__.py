"""Take Place build price estimator.

Usage::

    from takeplace import calculate_detailed_price

    breakdown = calculate_detailed_price("MB", 1040, 1040, early_adopter=True)
    breakdown.total_price  # 707000
"""

from takeplace.engine import PricingEngine
from takeplace.exceptions import (
    InvalidAreaValue,
    InvalidProvinceCode,
    PricingError,
    TakePlaceError,
)
from takeplace.factory import (
    calculate_detailed_price,
    calculate_price,
    create_default_engine,
)
from takeplace.models.breakdown import CostSpread, DetailedPriceBreakdown
from takeplace.models.enums import FloorAreaType, ProvinceCode
from takeplace.models.inputs import PriceInputs

__all__ = [
    "CostSpread",
    "DetailedPriceBreakdown",
    "FloorAreaType",
    "InvalidAreaValue",
    "InvalidProvinceCode",
    "PriceInputs",
    "PricingEngine",
    "PricingError",
    "ProvinceCode",
    "TakePlaceError",
    "calculate_detailed_price",
    "calculate_price",
    "create_default_engine",
]
