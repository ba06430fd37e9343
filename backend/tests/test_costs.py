"""Tests for the per-category cost calculators."""

from __future__ import annotations

import pytest

from takeplace import costs
from takeplace.data.provincial_factors import PROVINCIAL_FACTORS
from takeplace.data.step_tables import CONTAINER_STEPS, FOUNDATION_STEPS, ContainerStep
from takeplace.models.enums import ProvinceCode

MB = PROVINCIAL_FACTORS[ProvinceCode.MB]
ON = PROVINCIAL_FACTORS[ProvinceCode.ON]
NU = PROVINCIAL_FACTORS[ProvinceCode.NU]


class TestRoundToIncrement:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (728_120, 728_000),
            (707_320, 707_000),
            (677_685.6, 678_000),
            (1_500, 2_000),
            (2_500, 3_000),  # half up, not half to even
            (499.999, 0),
            (-1_500, -1_000),
        ],
    )
    def test_nearest_thousand(self, value: float, expected: int) -> None:
        assert costs.round_to_increment(value) == expected

    def test_custom_increment(self) -> None:
        assert costs.round_to_increment(1913.6, 1) == 1914
        assert costs.round_to_increment(0.5, 1) == 1

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_raises(self, value: float) -> None:
        with pytest.raises(OverflowError):
            costs.round_to_increment(value)


class TestBaseBuild:
    def test_without_discount(self) -> None:
        main, second, discount, total = costs.calculate_base_build(1040, 1040, MB)
        assert (main, second, discount, total) == (350_480, 172_640, 0, 728_000)

    def test_discount_after_multiplier(self) -> None:
        _, _, discount, total = costs.calculate_base_build(
            1248, 576, ON, early_adopter=True
        )
        assert discount == 18_240
        # (205,000 + 420,576 + 95,616) * 1.11 = 800,523.12; - 18,240 = 782,283.12
        assert total == 782_000


class TestFoundation:
    def test_ontario(self) -> None:
        step = FOUNDATION_STEPS[7]  # 12 modules: 15 bearing, 6 bracing
        result = costs.calculate_foundation(step, ON)
        assert result.bearing_piles.subtotal == 15_000
        assert result.bracing_piles.subtotal == 4_800
        assert result.mobilization.subtotal == 3_000
        # (15,000 + 4,800) * 1.44 + 3,000
        assert result.total == pytest.approx(31_512)

    def test_mobilization_not_scaled(self) -> None:
        step = FOUNDATION_STEPS[0]
        scaled = costs.calculate_foundation(step, NU)
        piles = scaled.bearing_piles.subtotal + scaled.bracing_piles.subtotal
        assert scaled.total - piles * 1.88 == pytest.approx(3_000)


class TestDelivery:
    def test_first_container_priced_separately(self) -> None:
        result = costs.calculate_delivery(CONTAINER_STEPS[0], MB)  # 3 containers
        assert result.containers.first_container_cost == 550
        assert result.containers.additional_containers_cost == 950
        assert result.containers.subtotal == 1_500

    def test_distance(self) -> None:
        result = costs.calculate_delivery(CONTAINER_STEPS[0], PROVINCIAL_FACTORS[ProvinceCode.YT])
        assert result.distance.km == 3_500
        assert result.distance.subtotal == pytest.approx(4_550)
        assert result.total == pytest.approx(6_050)

    def test_single_container_has_no_additional_cost(self) -> None:
        step = ContainerStep(module_count=1, main_floor_area_threshold=104, container_count=1)
        result = costs.calculate_delivery(step, MB)
        assert result.containers.additional_containers_cost == 0
        assert result.containers.subtotal == 550

    def test_zero_containers_still_charges_first(self) -> None:
        step = ContainerStep(module_count=1, main_floor_area_threshold=104, container_count=0)
        result = costs.calculate_delivery(step, MB)
        assert result.containers.subtotal == 550


class TestFlatCosts:
    def test_appliances(self) -> None:
        result = costs.calculate_appliances()
        assert (result.min_cost, result.max_cost, result.average_cost) == (
            12_000,
            25_000,
            18_500,
        )

    def test_sewer_water_septic_scaled(self) -> None:
        result = costs.calculate_sewer_water_septic(NU)
        assert result.average_cost == 15_750
        assert result.total.min == pytest.approx(13_455)
        assert result.total.max == pytest.approx(51_750)
        assert result.total.average == pytest.approx(32_602.5)

    def test_permit_fees(self) -> None:
        result = costs.calculate_permit_fees(1_824, PROVINCIAL_FACTORS[ProvinceCode.BC])
        assert result.base_cost == pytest.approx(1_662)  # 1824 / 2 + 750
        assert result.total == pytest.approx(4_986)
