"""Unit rates and flat costs used by the pricing engine.

All amounts are Canadian dollars. Rates are per gross square foot unless
noted otherwise.
"""

from __future__ import annotations

# Base build
BASE_PRICE: float = 205_000
MAIN_FLOOR_RATE: float = 337
SECOND_FLOOR_RATE: float = 166
EARLY_ADOPTER_DISCOUNT_PER_SQFT: float = 10

# Foundation (screw piles)
BEARING_PILE_UNIT_COST: float = 1_000
BRACING_PILE_UNIT_COST: float = 800
MOBILIZATION_UNIT_COST: float = 3_000

# Appliance package
APPLIANCES_MIN: float = 12_000
APPLIANCES_MAX: float = 25_000

# Delivery
FIRST_CONTAINER_COST: float = 550
ADDITIONAL_CONTAINER_COST: float = 475
COST_PER_KM: float = 1.30

# Utilities
ELECTRICAL_HOOKUP_FLAT: float = 2_500
SEWER_WATER_SEPTIC_MIN: float = 6_500
SEWER_WATER_SEPTIC_MAX: float = 25_000

# Permit fees: total_area / PERMIT_AREA_DIVISOR + PERMIT_FIXED_OFFSET
PERMIT_AREA_DIVISOR: float = 2
PERMIT_FIXED_OFFSET: float = 750

# Totals are quoted to the nearest thousand dollars.
ROUNDING_INCREMENT: int = 1_000
