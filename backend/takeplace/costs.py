"""Per-category cost calculators.

Each calculator is a pure function of its inputs: the caller resolves the
provincial factors and step-table rows, and the calculator returns the
itemized cost for one category. Nothing here rounds except
:func:`round_to_increment`, which the engine applies to the base build
price and the grand totals only.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from takeplace.data import pricing_constants as rates
from takeplace.models.breakdown import (
    ApplianceCost,
    ContainerCharge,
    CostSpread,
    DeliveryCost,
    DistanceCharge,
    FoundationCost,
    LineItem,
    PermitFeesCost,
    SewerWaterSepticCost,
)

if TYPE_CHECKING:
    from takeplace.data.provincial_factors import ProvincialFactors
    from takeplace.data.step_tables import ContainerStep, FoundationStep


def round_to_increment(value: float, increment: int = rates.ROUNDING_INCREMENT) -> int:
    """Round half up to the nearest ``increment``.

    Halves round toward positive infinity (``1500 -> 2000``,
    ``-1500 -> -1000``), unlike Python's built-in banker's rounding.

    Raises:
        OverflowError: If ``value`` is infinite or NaN.
    """
    if not math.isfinite(value):
        raise OverflowError(f"Cannot round non-finite value {value!r}")
    return math.floor(value / increment + 0.5) * increment


def calculate_base_build(
    main_floor_area_sqft: float,
    second_floor_area_sqft: float,
    factors: ProvincialFactors,
    *,
    early_adopter: bool = False,
) -> tuple[float, float, float, int]:
    """Price the modules themselves.

    Returns ``(main_floor_cost, second_floor_cost, discount, total_price)``.
    The early-adopter discount comes off after the provincial multiplier,
    and only the final figure is rounded.
    """
    main_floor_cost = main_floor_area_sqft * rates.MAIN_FLOOR_RATE
    second_floor_cost = second_floor_area_sqft * rates.SECOND_FLOOR_RATE
    raw_total = rates.BASE_PRICE + main_floor_cost + second_floor_cost
    scaled_total = raw_total * factors.base_multiplier

    discount = 0.0
    if early_adopter:
        total_area = main_floor_area_sqft + second_floor_area_sqft
        discount = total_area * rates.EARLY_ADOPTER_DISCOUNT_PER_SQFT

    total_price = round_to_increment(scaled_total - discount)
    return main_floor_cost, second_floor_cost, discount, total_price


def calculate_foundation(
    step: FoundationStep, factors: ProvincialFactors
) -> FoundationCost:
    """Price the pile foundation for one step-table row.

    Mobilization is a flat dispatch fee and is not scaled by the provincial
    foundation multiplier.
    """
    bearing = LineItem(
        quantity=step.bearing_pile_count,
        unit_cost=rates.BEARING_PILE_UNIT_COST,
        subtotal=step.bearing_pile_count * rates.BEARING_PILE_UNIT_COST,
    )
    bracing = LineItem(
        quantity=step.bracing_pile_count,
        unit_cost=rates.BRACING_PILE_UNIT_COST,
        subtotal=step.bracing_pile_count * rates.BRACING_PILE_UNIT_COST,
    )
    mobilization = LineItem(
        quantity=step.mobilization_unit_count,
        unit_cost=rates.MOBILIZATION_UNIT_COST,
        subtotal=step.mobilization_unit_count * rates.MOBILIZATION_UNIT_COST,
    )
    multiplier = factors.foundation_multiplier
    total = (bearing.subtotal + bracing.subtotal) * multiplier + mobilization.subtotal

    return FoundationCost(
        bearing_piles=bearing,
        bracing_piles=bracing,
        mobilization=mobilization,
        provincial_multiplier=multiplier,
        total=total,
    )


def calculate_delivery(step: ContainerStep, factors: ProvincialFactors) -> DeliveryCost:
    """Price shipping: containers plus a per-km charge to the province."""
    count = step.container_count
    additional = max(0, count - 1) * rates.ADDITIONAL_CONTAINER_COST
    containers = ContainerCharge(
        quantity=count,
        first_container_cost=rates.FIRST_CONTAINER_COST,
        additional_containers_cost=additional,
        subtotal=rates.FIRST_CONTAINER_COST + additional,
    )

    km = factors.shipping_distance_km
    distance = DistanceCharge(
        km=km,
        cost_per_km=rates.COST_PER_KM,
        subtotal=km * rates.COST_PER_KM,
    )

    return DeliveryCost(
        containers=containers,
        distance=distance,
        total=containers.subtotal + distance.subtotal,
    )


def calculate_appliances() -> ApplianceCost:
    min_cost = rates.APPLIANCES_MIN
    max_cost = rates.APPLIANCES_MAX
    return ApplianceCost(
        min_cost=min_cost,
        max_cost=max_cost,
        average_cost=(min_cost + max_cost) / 2,
    )


def calculate_sewer_water_septic(factors: ProvincialFactors) -> SewerWaterSepticCost:
    min_cost = rates.SEWER_WATER_SEPTIC_MIN
    max_cost = rates.SEWER_WATER_SEPTIC_MAX
    average_cost = (min_cost + max_cost) / 2
    multiplier = factors.sewer_water_septic_multiplier

    return SewerWaterSepticCost(
        min_cost=min_cost,
        max_cost=max_cost,
        average_cost=average_cost,
        provincial_multiplier=multiplier,
        total=CostSpread(
            min=min_cost * multiplier,
            max=max_cost * multiplier,
            average=average_cost * multiplier,
        ),
    )


def calculate_permit_fees(
    total_area_sqft: float, factors: ProvincialFactors
) -> PermitFeesCost:
    base_cost = total_area_sqft / rates.PERMIT_AREA_DIVISOR + rates.PERMIT_FIXED_OFFSET
    multiplier = factors.permit_fees_multiplier
    return PermitFeesCost(
        base_cost=base_cost,
        provincial_multiplier=multiplier,
        total=base_cost * multiplier,
    )
