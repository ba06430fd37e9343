"""Factory functions for creating pre-configured PricingEngine instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from takeplace.data.provincial_factors import PROVINCIAL_FACTORS
from takeplace.data.repository import PricingDataRepository
from takeplace.data.step_tables import CONTAINER_STEPS, FOUNDATION_STEPS
from takeplace.engine import PricingEngine

if TYPE_CHECKING:
    from takeplace.models.breakdown import DetailedPriceBreakdown
    from takeplace.models.enums import ProvinceCode


def create_default_engine() -> PricingEngine:
    """Create a PricingEngine wired up with the built-in pricing tables.

    This is the recommended way to create a PricingEngine. It wires up a
    PricingDataRepository with the provincial factors and the foundation
    and container step tables so callers don't need to know the internal
    wiring. Construction is cheap and nothing is cached between engines.

    Example::

        from takeplace import create_default_engine

        engine = create_default_engine()
        breakdown = engine.calculate_detailed_price("ON", 1248, 624)
    """
    repository = PricingDataRepository(
        PROVINCIAL_FACTORS, FOUNDATION_STEPS, CONTAINER_STEPS
    )
    return PricingEngine(repository)


def calculate_detailed_price(
    province: ProvinceCode | str,
    main_floor_area_sqft: float,
    second_floor_area_sqft: float,
    early_adopter: bool = False,
) -> DetailedPriceBreakdown:
    """Price a home with the default tables. See PricingEngine."""
    return create_default_engine().calculate_detailed_price(
        province, main_floor_area_sqft, second_floor_area_sqft, early_adopter
    )


def calculate_price(
    province: ProvinceCode | str,
    main_floor_area_sqft: float,
    second_floor_area_sqft: float,
    early_adopter: bool = False,
) -> int:
    """Return just the rounded base build price with the default tables."""
    return create_default_engine().calculate_price(
        province, main_floor_area_sqft, second_floor_area_sqft, early_adopter
    )
