"""Pricing data repository for looking up provincial factors and step tables."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar

from takeplace.exceptions import InvalidProvinceCode
from takeplace.models.enums import ProvinceCode

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from takeplace.data.provincial_factors import ProvincialFactors
    from takeplace.data.step_tables import ContainerStep, FoundationStep


class _Step(Protocol):
    @property
    def main_floor_area_threshold(self) -> float: ...


StepT = TypeVar("StepT", bound=_Step)


def lookup_step(table: Sequence[StepT], area: float) -> StepT:
    """Return the first step whose threshold is >= ``area``.

    Areas beyond the largest threshold resolve to the last step rather than
    extrapolating, and areas below the smallest threshold resolve to the
    first step. ``table`` must be sorted by ascending threshold.
    """
    if not table:
        msg = "Step table is empty"
        raise ValueError(msg)
    for step in table:
        if step.main_floor_area_threshold >= area:
            return step
    return table[-1]


def parse_province(code: ProvinceCode | str) -> ProvinceCode:
    """Resolve a province code, accepting any letter case.

    Raises InvalidProvinceCode for anything outside the supported set.
    """
    if isinstance(code, ProvinceCode):
        return code
    if not isinstance(code, str):
        raise InvalidProvinceCode(code)
    try:
        return ProvinceCode(code.strip().upper())
    except ValueError:
        raise InvalidProvinceCode(code) from None


class PricingDataRepository:
    """Repository for the static pricing tables.

    Wraps the provincial factors and the foundation/container step tables.
    The wrapped data is never mutated, so one repository can serve any
    number of concurrent calculations.
    """

    def __init__(
        self,
        provincial_factors: Mapping[ProvinceCode, ProvincialFactors],
        foundation_steps: Sequence[FoundationStep],
        container_steps: Sequence[ContainerStep],
    ) -> None:
        self._provincial_factors = dict(provincial_factors)
        self._foundation_steps = tuple(foundation_steps)
        self._container_steps = tuple(container_steps)

    @property
    def provinces(self) -> list[ProvinceCode]:
        return list(self._provincial_factors)

    def get_provincial_factors(
        self, province: ProvinceCode | str
    ) -> ProvincialFactors:
        """Get the cost factors for a province.

        Raises InvalidProvinceCode if the code is unknown or has no entry.
        """
        code = parse_province(province)
        factors = self._provincial_factors.get(code)
        if factors is None:
            raise InvalidProvinceCode(province)
        return factors

    def get_foundation_step(self, main_floor_area_sqft: float) -> FoundationStep:
        return lookup_step(self._foundation_steps, main_floor_area_sqft)

    def get_container_step(self, main_floor_area_sqft: float) -> ContainerStep:
        return lookup_step(self._container_steps, main_floor_area_sqft)
