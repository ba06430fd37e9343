"""Domain models for the Take Place pricing engine."""

from takeplace.models.breakdown import (
    AdditionalCosts,
    ApplianceCost,
    ContainerCharge,
    CostSpread,
    DeliveryCost,
    DetailedPriceBreakdown,
    DistanceCharge,
    FoundationCost,
    LineItem,
    PermitFeesCost,
    SewerWaterSepticCost,
)
from takeplace.models.enums import FloorAreaType, ProvinceCode
from takeplace.models.inputs import (
    FloorAreaRequest,
    LeadFormRequest,
    PriceInputs,
    ScreenshotUploadRequest,
)

__all__ = [
    "AdditionalCosts",
    "ApplianceCost",
    "ContainerCharge",
    "CostSpread",
    "DeliveryCost",
    "DetailedPriceBreakdown",
    "DistanceCharge",
    "FloorAreaRequest",
    "FloorAreaType",
    "FoundationCost",
    "LeadFormRequest",
    "LineItem",
    "PermitFeesCost",
    "PriceInputs",
    "ProvinceCode",
    "ScreenshotUploadRequest",
    "SewerWaterSepticCost",
]
