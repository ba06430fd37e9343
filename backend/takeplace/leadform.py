"""Lead-capture form parameters.

The customer's configuration and price breakdown are handed to the
proposal form as URL query parameters. The form declares a hidden field
for every key produced here, so the names are part of the contract with
the form and must not change.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlencode

from takeplace.costs import round_to_increment
from takeplace.exceptions import LeadFormConfigError
from takeplace.floor_area import gross_to_net
from takeplace.models.enums import FloorAreaType

if TYPE_CHECKING:
    from takeplace.models.breakdown import DetailedPriceBreakdown

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "calculator"


def _dollars(amount: float) -> str:
    return str(round_to_increment(amount, 1))


def _area(area_sqft: float, floor_area_type: FloorAreaType) -> str:
    if floor_area_type == FloorAreaType.NET:
        area_sqft = gross_to_net(area_sqft)
    return str(round_to_increment(area_sqft, 1))


def build_lead_form_params(
    breakdown: DetailedPriceBreakdown,
    *,
    floor_area_type: FloorAreaType = FloorAreaType.GROSS,
    source: str = DEFAULT_SOURCE,
    model_image_url: str | None = None,
) -> dict[str, str]:
    """Flatten a breakdown into the form's hidden fields.

    Sizes are reported in ``floor_area_type``; money is in whole dollars.
    ``price_per_sqft`` is always based on the gross total area.
    """
    inputs = breakdown.inputs
    extras = breakdown.additional_costs
    total_size = inputs.total_area_sqft
    price_per_sqft = (
        round_to_increment(breakdown.total_price / total_size, 1) if total_size > 0 else 0
    )

    params: dict[str, str] = {
        # Configuration
        "province": inputs.province.value,
        "total_size": _area(total_size, floor_area_type),
        "main_floor_size": _area(inputs.main_floor_area_sqft, floor_area_type),
        "second_floor_size": _area(inputs.second_floor_area_sqft, floor_area_type),
        "floor_area_type": floor_area_type.value,
        "early_adopter": "Yes" if inputs.early_adopter else "No",
        "source": source,
        # Base price
        "base_price": _dollars(breakdown.total_price),
        "base_price_only": _dollars(breakdown.base_price),
        "price_per_sqft": str(price_per_sqft),
        "main_floor_cost": _dollars(breakdown.main_floor_cost),
        "second_floor_cost": _dollars(breakdown.second_floor_cost),
        "provincial_multiplier": f"{breakdown.provincial_multiplier:.2f}",
        "early_adopter_discount": _dollars(breakdown.early_adopter_discount),
        # Foundation
        "foundation_estimate": _dollars(extras.foundation.total),
        "foundation_bearing_piles": str(extras.foundation.bearing_piles.quantity),
        "foundation_bracing_piles": str(extras.foundation.bracing_piles.quantity),
        # Additional costs
        "appliances_estimate_min": _dollars(extras.appliances.min_cost),
        "appliances_estimate_max": _dollars(extras.appliances.max_cost),
        "delivery_estimate": _dollars(extras.delivery.total),
        "delivery_containers": str(extras.delivery.containers.quantity),
        "delivery_distance_km": str(extras.delivery.distance.km),
        "electrical_hookup_estimate": _dollars(extras.electrical_hookup),
        "sewer_water_septic_min": _dollars(extras.sewer_water_septic.total.min),
        "sewer_water_septic_max": _dollars(extras.sewer_water_septic.total.max),
        "permit_fees_estimate": _dollars(extras.permit_fees.total),
        # Totals
        "grand_total_min": _dollars(breakdown.grand_total.min),
        "grand_total_max": _dollars(breakdown.grand_total.max),
        "grand_total_average": _dollars(breakdown.grand_total.average),
    }
    if model_image_url:
        params["model_image_url"] = model_image_url
    return params


def build_lead_form_url(params: dict[str, str], form_id: str, base_url: str) -> str:
    """Build the full form URL with ``params`` as the query string.

    Raises LeadFormConfigError if no form id is configured.
    """
    if not form_id:
        msg = "TYPEFORM_ID is not configured"
        raise LeadFormConfigError(msg)
    url = f"{base_url.rstrip('/')}/{form_id}?{urlencode(params)}"
    logger.info("Built lead form URL for form %s (%d params)", form_id, len(params))
    return url
