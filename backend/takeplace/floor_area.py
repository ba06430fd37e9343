"""Floor-area normalization for the calculator sliders.

Sliders move in whole modules. The total floor area and the second floor
snap down to the slider step; the second floor is kept between a minimum
and half of the total, and the main floor takes whatever remains.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from takeplace.data.step_tables import MODULE_SIZE_SQFT
from takeplace.exceptions import InvalidAreaValue

SLIDER_STEP_SQFT = 96
MIN_TOTAL_AREA_SQFT = 768
MAX_TOTAL_AREA_SQFT = 3840
MIN_SECOND_FLOOR_SQFT = 288

# Net floor area is measured to the interior face of the walls.
NET_TO_GROSS_RATIO = 0.92


@dataclass(frozen=True)
class FloorSplit:
    """Gross floor areas after normalization."""

    total_area_sqft: int
    main_floor_area_sqft: int
    second_floor_area_sqft: int


def _check(field: str, value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise InvalidAreaValue(field, value)


def snap_to_grid(area: float, step: int = SLIDER_STEP_SQFT) -> int:
    """Snap an area down to a whole multiple of ``step``."""
    _check("area", area)
    return math.floor(area / step) * step


def max_second_floor(total_area_sqft: float) -> int:
    return math.floor(total_area_sqft / 2)


def split_floor_areas(total_area_sqft: float, second_floor_area_sqft: float) -> FloorSplit:
    """Normalize the total and second-floor sliders into a FloorSplit.

    The total is clamped to the slider range and snapped; the second floor
    is snapped and then clamped to ``[MIN_SECOND_FLOOR_SQFT, total / 2]``.
    """
    _check("total_area_sqft", total_area_sqft)
    _check("second_floor_area_sqft", second_floor_area_sqft)

    total = snap_to_grid(
        min(max(total_area_sqft, MIN_TOTAL_AREA_SQFT), MAX_TOTAL_AREA_SQFT)
    )
    upper = max_second_floor(total)
    second = snap_to_grid(second_floor_area_sqft)
    if second > upper:
        # Stay on the grid when trimming down to half the total.
        second = snap_to_grid(upper)
    second = max(second, MIN_SECOND_FLOOR_SQFT)

    return FloorSplit(
        total_area_sqft=total,
        main_floor_area_sqft=total - second,
        second_floor_area_sqft=second,
    )


def rebalance_main_floor(total_area_sqft: float, requested_main_sqft: float) -> FloorSplit:
    """Move the main-floor slider while keeping the total fixed.

    The request is snapped to the grid, the second floor takes the rest,
    and if that would put the second floor outside its bounds the second
    floor is clamped and the main floor recomputed from it.
    """
    _check("total_area_sqft", total_area_sqft)
    _check("requested_main_sqft", requested_main_sqft)

    total = math.floor(total_area_sqft)
    main = snap_to_grid(requested_main_sqft)
    second = total - main
    upper = max_second_floor(total)

    if second < MIN_SECOND_FLOOR_SQFT:
        second = MIN_SECOND_FLOOR_SQFT
    elif second > upper:
        second = upper
    else:
        return FloorSplit(total, main, second)

    return FloorSplit(total, total - second, second)


def gross_to_net(area_sqft: float) -> float:
    """Convert a gross area to its net equivalent for display."""
    return area_sqft * NET_TO_GROSS_RATIO


def module_count(main_floor_area_sqft: float) -> int:
    """Number of pricing modules needed to cover the main floor."""
    _check("main_floor_area_sqft", main_floor_area_sqft)
    return math.ceil(main_floor_area_sqft / MODULE_SIZE_SQFT)
