"""Step tables keyed by main-floor area.

One row per module count. A module is 104 sq ft of main floor, so the
threshold of each row is ``modules * 104``. Rows are ordered by ascending
threshold.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

MODULE_SIZE_SQFT: int = 104


class FoundationStep(BaseModel):
    """Pile counts for a home up to ``main_floor_area_threshold`` sq ft."""

    model_config = ConfigDict(frozen=True)

    module_count: int = Field(gt=0)
    main_floor_area_threshold: float = Field(gt=0)
    bearing_pile_count: int = Field(ge=0)
    bracing_pile_count: int = Field(ge=0)
    mobilization_unit_count: int = Field(ge=0)


class ContainerStep(BaseModel):
    """Shipping containers needed for a home up to the threshold."""

    model_config = ConfigDict(frozen=True)

    module_count: int = Field(gt=0)
    main_floor_area_threshold: float = Field(gt=0)
    container_count: int = Field(ge=0)


def _foundation(modules: int, bearing: int, bracing: int) -> FoundationStep:
    return FoundationStep(
        module_count=modules,
        main_floor_area_threshold=modules * MODULE_SIZE_SQFT,
        bearing_pile_count=bearing,
        bracing_pile_count=bracing,
        mobilization_unit_count=1,
    )


def _containers(modules: int, containers: int) -> ContainerStep:
    return ContainerStep(
        module_count=modules,
        main_floor_area_threshold=modules * MODULE_SIZE_SQFT,
        container_count=containers,
    )


FOUNDATION_STEPS: tuple[FoundationStep, ...] = (
    _foundation(5, 6, 4),
    _foundation(6, 9, 4),
    _foundation(7, 9, 4),
    _foundation(8, 9, 4),
    _foundation(9, 12, 4),
    _foundation(10, 12, 4),
    _foundation(11, 12, 4),
    _foundation(12, 15, 6),
    _foundation(13, 15, 6),
    _foundation(14, 15, 6),
    _foundation(15, 18, 6),
    _foundation(16, 18, 6),
    _foundation(17, 18, 6),
    _foundation(18, 21, 8),
    _foundation(19, 21, 8),
    _foundation(20, 21, 8),
    _foundation(21, 24, 8),
    _foundation(22, 24, 8),
    _foundation(23, 24, 8),
    _foundation(24, 27, 10),
    _foundation(25, 27, 10),
    _foundation(26, 27, 10),
    _foundation(27, 30, 10),
    _foundation(28, 30, 10),
    _foundation(29, 30, 10),
    _foundation(30, 33, 12),
    _foundation(31, 33, 12),
    _foundation(32, 33, 12),
    _foundation(33, 36, 12),
    _foundation(34, 36, 12),
    _foundation(35, 36, 12),
    _foundation(36, 39, 14),
    _foundation(37, 39, 14),
)

CONTAINER_STEPS: tuple[ContainerStep, ...] = (
    _containers(5, 3),
    _containers(6, 4),
    _containers(7, 4),
    _containers(8, 4),
    _containers(9, 5),
    _containers(10, 5),
    _containers(11, 5),
    _containers(12, 6),
    _containers(13, 6),
    _containers(14, 6),
    _containers(15, 7),
    _containers(16, 7),
    _containers(17, 7),
    _containers(18, 8),
    _containers(19, 8),
    _containers(20, 8),
    _containers(21, 9),
    _containers(22, 9),
    _containers(23, 9),
    _containers(24, 10),
    _containers(25, 10),
    _containers(26, 10),
    _containers(27, 11),
    _containers(28, 11),
    _containers(29, 11),
    _containers(30, 12),
    _containers(31, 12),
    _containers(32, 12),
    _containers(33, 13),
    _containers(34, 13),
    _containers(35, 13),
    _containers(36, 14),
    _containers(37, 14),
)
