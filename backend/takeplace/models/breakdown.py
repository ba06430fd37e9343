"""Price breakdown output models for the Take Place pricing engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, model_validator

from takeplace.models.inputs import PriceInputs  # noqa: TCH001 (pydantic resolves at runtime)


class CostSpread(BaseModel):
    """A min / max / average cost triple.

    Used wherever a cost depends on choices the customer has not made yet
    (appliance package, servicing the lot).
    """

    min: float
    max: float
    average: float

    @model_validator(mode="after")
    def min_le_average_le_max(self) -> CostSpread:
        if not (self.min <= self.average <= self.max):
            msg = (
                f"Must satisfy min <= average <= max, "
                f"got {self.min} <= {self.average} <= {self.max}"
            )
            raise ValueError(msg)
        return self


class LineItem(BaseModel):
    """A quantity priced at a unit cost."""

    quantity: int
    unit_cost: float
    subtotal: float


class FoundationCost(BaseModel):
    """Screw-pile foundation: bearing and bracing piles plus mobilization."""

    bearing_piles: LineItem
    bracing_piles: LineItem
    mobilization: LineItem
    provincial_multiplier: float
    total: float


class ApplianceCost(BaseModel):
    min_cost: float
    max_cost: float
    average_cost: float


class ContainerCharge(BaseModel):
    """Shipping containers needed to carry the modules."""

    quantity: int
    first_container_cost: float
    additional_containers_cost: float
    subtotal: float


class DistanceCharge(BaseModel):
    km: int
    cost_per_km: float
    subtotal: float


class DeliveryCost(BaseModel):
    containers: ContainerCharge
    distance: DistanceCharge
    total: float


class SewerWaterSepticCost(BaseModel):
    min_cost: float
    max_cost: float
    average_cost: float
    provincial_multiplier: float
    total: CostSpread


class PermitFeesCost(BaseModel):
    base_cost: float
    provincial_multiplier: float
    total: float


class AdditionalCosts(BaseModel):
    """Everything outside the base build price."""

    foundation: FoundationCost
    appliances: ApplianceCost
    delivery: DeliveryCost
    electrical_hookup: float
    sewer_water_septic: SewerWaterSepticCost
    permit_fees: PermitFeesCost


class DetailedPriceBreakdown(BaseModel):
    """Complete price breakdown returned by the pricing engine.

    ``total_price`` is the base build price after the provincial multiplier
    and early-adopter discount, rounded to the nearest thousand.
    ``grand_total`` adds every additional cost on top of it.
    """

    inputs: PriceInputs
    base_price: float
    main_floor_cost: float
    second_floor_cost: float
    provincial_multiplier: float
    early_adopter_discount: float
    total_price: int
    additional_costs: AdditionalCosts
    grand_total: CostSpread

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict with display-ready strings."""
        from takeplace.formatting import format_currency, format_spread

        extras = self.additional_costs
        return {
            "province": self.inputs.province.value,
            "total_size_formatted": f"{self.inputs.total_area_sqft:,.0f} sq ft",
            "early_adopter": self.inputs.early_adopter,
            "base_price_formatted": format_currency(self.total_price),
            "foundation_formatted": format_currency(extras.foundation.total),
            "appliances_formatted": format_spread(
                CostSpread(
                    min=extras.appliances.min_cost,
                    max=extras.appliances.max_cost,
                    average=extras.appliances.average_cost,
                )
            ),
            "delivery_formatted": format_currency(extras.delivery.total),
            "electrical_hookup_formatted": format_currency(extras.electrical_hookup),
            "sewer_water_septic_formatted": format_spread(
                extras.sewer_water_septic.total
            ),
            "permit_fees_formatted": format_currency(extras.permit_fees.total),
            "grand_total_formatted": format_spread(self.grand_total),
            "grand_total_average_formatted": format_currency(
                self.grand_total.average
            ),
        }
