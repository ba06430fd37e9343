"""Provincial cost factors.

Each province or territory carries its own multipliers for the base build,
the foundation, servicing and permits, plus one representative shipping
distance (km) from the factory. Manitoba is the reference province (1.00).
"""

from __future__ import annotations

from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from takeplace.models.enums import ProvinceCode


class ProvincialFactors(BaseModel):
    """Cost factors for a single province or territory."""

    model_config = ConfigDict(frozen=True)

    base_multiplier: float = Field(gt=0)
    foundation_multiplier: float = Field(gt=0)
    shipping_distance_km: int = Field(gt=0)
    sewer_water_septic_multiplier: float = Field(gt=0)
    permit_fees_multiplier: float = Field(gt=0)


def _factors(
    base: float, foundation: float, km: int, sewer: float, permit: float
) -> ProvincialFactors:
    return ProvincialFactors(
        base_multiplier=base,
        foundation_multiplier=foundation,
        shipping_distance_km=km,
        sewer_water_septic_multiplier=sewer,
        permit_fees_multiplier=permit,
    )


PROVINCIAL_FACTORS: MappingProxyType[ProvinceCode, ProvincialFactors] = MappingProxyType({
    # Prairies
    ProvinceCode.AB: _factors(1.07, 1.28, 1340, 1.41, 1.60),
    ProvinceCode.MB: _factors(1.00, 1.00, 150, 1.00, 1.00),
    ProvinceCode.SK: _factors(1.00, 1.00, 780, 1.00, 1.00),
    # West coast
    ProvinceCode.BC: _factors(1.15, 1.60, 2140, 1.76, 3.00),
    # Central
    ProvinceCode.ON: _factors(1.11, 1.44, 2225, 1.58, 2.00),
    ProvinceCode.QC: _factors(1.00, 1.00, 2300, 1.00, 1.40),
    # Atlantic
    ProvinceCode.NB: _factors(0.98, 1.00, 2100, 1.00, 0.80),
    ProvinceCode.NL: _factors(0.98, 1.00, 2900, 1.00, 0.90),
    ProvinceCode.NS: _factors(0.98, 1.00, 2400, 1.00, 1.00),
    ProvinceCode.PE: _factors(0.98, 1.00, 2500, 1.00, 0.80),
    # Territories
    ProvinceCode.NT: _factors(1.18, 1.72, 2200, 1.89, 1.50),
    ProvinceCode.NU: _factors(1.22, 1.88, 2300, 2.07, 1.80),
    ProvinceCode.YT: _factors(1.15, 1.60, 3500, 1.76, 1.40),
})
