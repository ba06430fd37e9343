"""Pricing data layer for the Take Place estimator."""

from takeplace.data.provincial_factors import PROVINCIAL_FACTORS, ProvincialFactors
from takeplace.data.repository import PricingDataRepository, lookup_step
from takeplace.data.step_tables import (
    CONTAINER_STEPS,
    FOUNDATION_STEPS,
    ContainerStep,
    FoundationStep,
)

__all__ = [
    "CONTAINER_STEPS",
    "FOUNDATION_STEPS",
    "PROVINCIAL_FACTORS",
    "ContainerStep",
    "FoundationStep",
    "PricingDataRepository",
    "ProvincialFactors",
    "lookup_step",
]
