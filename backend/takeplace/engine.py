"""Core pricing engine for the Take Place build price estimator.

The PricingEngine turns a province, two floor areas and the early-adopter
flag into a fully itemized price:

1. **Base build** — base price plus per-sq-ft main and second floor rates,
   scaled by the provincial base multiplier, less the early-adopter
   discount, rounded to the nearest thousand.
2. **Foundation** — pile counts from the foundation step table (keyed by
   main-floor area), piles scaled by the provincial foundation multiplier,
   mobilization added flat.
3. **Delivery** — container count from the container step table plus the
   province's shipping distance at a per-km rate.
4. **Appliances, electrical, sewer/water/septic, permits** — flat ranges
   and formulas, scaled by provincial multipliers where they apply.
5. **Grand total** — min / max / average of everything above, each rounded
   to the nearest thousand.

The engine holds only a read-only data repository; every call is a pure
function of its arguments.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from takeplace import costs
from takeplace.data import pricing_constants as rates
from takeplace.data.repository import parse_province
from takeplace.exceptions import InvalidAreaValue
from takeplace.models.breakdown import AdditionalCosts, CostSpread, DetailedPriceBreakdown
from takeplace.models.inputs import PriceInputs

if TYPE_CHECKING:
    from takeplace.data.provincial_factors import ProvincialFactors
    from takeplace.data.repository import PricingDataRepository
    from takeplace.models.enums import ProvinceCode

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"


def _validate_area(field: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidAreaValue(field, value)
    if not math.isfinite(value) or value < 0:
        raise InvalidAreaValue(field, value)
    return float(value)


class PricingEngine:
    """Estimator that converts pricing inputs into a DetailedPriceBreakdown.

    Args:
        repository: The pricing data repository providing provincial
            factors and the foundation/container step tables.

    Example::

        from takeplace.data.repository import PricingDataRepository
        from takeplace.data.provincial_factors import PROVINCIAL_FACTORS
        from takeplace.data.step_tables import CONTAINER_STEPS, FOUNDATION_STEPS

        repo = PricingDataRepository(PROVINCIAL_FACTORS, FOUNDATION_STEPS, CONTAINER_STEPS)
        engine = PricingEngine(repo)
        breakdown = engine.calculate_detailed_price("MB", 1040, 1040)
    """

    def __init__(self, repository: PricingDataRepository) -> None:
        self._repository = repository

    @property
    def repository(self) -> PricingDataRepository:
        return self._repository

    def calculate_detailed_price(
        self,
        province: ProvinceCode | str,
        main_floor_area_sqft: float,
        second_floor_area_sqft: float,
        early_adopter: bool = False,
    ) -> DetailedPriceBreakdown:
        """Price a home and itemize every cost category.

        Args:
            province: Province or territory code (e.g. ``"MB"``).
            main_floor_area_sqft: Gross main-floor area in square feet.
            second_floor_area_sqft: Gross second-floor area in square feet.
            early_adopter: Whether the early-adopter discount applies.

        Returns:
            The complete breakdown including grand total min/max/average.

        Raises:
            InvalidProvinceCode: If the province is not a supported code.
            InvalidAreaValue: If either area is negative, non-finite or too
                large to price.
        """
        inputs = PriceInputs(
            province=parse_province(province),
            main_floor_area_sqft=_validate_area(
                "main_floor_area_sqft", main_floor_area_sqft
            ),
            second_floor_area_sqft=_validate_area(
                "second_floor_area_sqft", second_floor_area_sqft
            ),
            early_adopter=bool(early_adopter),
        )
        return self.price(inputs)

    def calculate_price(
        self,
        province: ProvinceCode | str,
        main_floor_area_sqft: float,
        second_floor_area_sqft: float,
        early_adopter: bool = False,
    ) -> int:
        """Return only the rounded base build price."""
        breakdown = self.calculate_detailed_price(
            province, main_floor_area_sqft, second_floor_area_sqft, early_adopter
        )
        return breakdown.total_price

    def price(self, inputs: PriceInputs) -> DetailedPriceBreakdown:
        """Price already-validated inputs.

        Raises:
            InvalidAreaValue: If the areas are so large that a price
                overflows a float.
        """
        factors = self._repository.get_provincial_factors(inputs.province)
        try:
            return self._price(inputs, factors)
        except OverflowError as exc:
            field, value = max(
                (
                    ("main_floor_area_sqft", inputs.main_floor_area_sqft),
                    ("second_floor_area_sqft", inputs.second_floor_area_sqft),
                ),
                key=lambda item: item[1],
            )
            raise InvalidAreaValue(field, value, "is too large to price") from exc

    def _price(
        self, inputs: PriceInputs, factors: ProvincialFactors
    ) -> DetailedPriceBreakdown:
        # 1. Base build
        main_floor_cost, second_floor_cost, discount, total_price = (
            costs.calculate_base_build(
                inputs.main_floor_area_sqft,
                inputs.second_floor_area_sqft,
                factors,
                early_adopter=inputs.early_adopter,
            )
        )

        # 2-4. Additional costs
        foundation_step = self._repository.get_foundation_step(
            inputs.main_floor_area_sqft
        )
        container_step = self._repository.get_container_step(
            inputs.main_floor_area_sqft
        )
        additional = AdditionalCosts(
            foundation=costs.calculate_foundation(foundation_step, factors),
            appliances=costs.calculate_appliances(),
            delivery=costs.calculate_delivery(container_step, factors),
            electrical_hookup=rates.ELECTRICAL_HOOKUP_FLAT,
            sewer_water_septic=costs.calculate_sewer_water_septic(factors),
            permit_fees=costs.calculate_permit_fees(inputs.total_area_sqft, factors),
        )

        # 5. Grand totals
        grand_total = self._calculate_grand_total(total_price, additional)

        logger.debug(
            "Priced %s main=%.0f second=%.0f early_adopter=%s -> %d (grand avg %d)",
            inputs.province,
            inputs.main_floor_area_sqft,
            inputs.second_floor_area_sqft,
            inputs.early_adopter,
            total_price,
            grand_total.average,
        )

        return DetailedPriceBreakdown(
            inputs=inputs,
            base_price=rates.BASE_PRICE,
            main_floor_cost=main_floor_cost,
            second_floor_cost=second_floor_cost,
            provincial_multiplier=factors.base_multiplier,
            early_adopter_discount=discount,
            total_price=total_price,
            additional_costs=additional,
            grand_total=grand_total,
        )

    @staticmethod
    def _calculate_grand_total(
        total_price: int, additional: AdditionalCosts
    ) -> CostSpread:
        """Sum the base price and every additional cost into min/max/average.

        Terms are added in a fixed order so floating-point results match the
        published calculator to the dollar.
        """
        foundation = additional.foundation.total
        appliances = additional.appliances
        delivery = additional.delivery.total
        electrical = additional.electrical_hookup
        servicing = additional.sewer_water_septic.total
        permits = additional.permit_fees.total

        def _sum(appliance_cost: float, servicing_cost: float) -> int:
            return costs.round_to_increment(
                total_price
                + foundation
                + appliance_cost
                + delivery
                + electrical
                + servicing_cost
                + permits
            )

        return CostSpread(
            min=_sum(appliances.min_cost, servicing.min),
            max=_sum(appliances.max_cost, servicing.max),
            average=_sum(appliances.average_cost, servicing.average),
        )
