"""Tests for lead-capture form parameters."""

from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import pytest

from takeplace.exceptions import LeadFormConfigError
from takeplace.factory import calculate_detailed_price
from takeplace.leadform import build_lead_form_params, build_lead_form_url
from takeplace.models.breakdown import DetailedPriceBreakdown
from takeplace.models.enums import FloorAreaType


@pytest.fixture()
def breakdown() -> DetailedPriceBreakdown:
    return calculate_detailed_price("MB", 1040, 1040)


class TestBuildLeadFormParams:
    def test_configuration_fields(self, breakdown: DetailedPriceBreakdown) -> None:
        params = build_lead_form_params(breakdown)

        assert params["province"] == "MB"
        assert params["total_size"] == "2080"
        assert params["main_floor_size"] == "1040"
        assert params["second_floor_size"] == "1040"
        assert params["floor_area_type"] == "gross"
        assert params["early_adopter"] == "No"
        assert params["source"] == "calculator"

    def test_price_fields(self, breakdown: DetailedPriceBreakdown) -> None:
        params = build_lead_form_params(breakdown)

        assert params["base_price"] == "728000"
        assert params["base_price_only"] == "205000"
        assert params["price_per_sqft"] == "350"
        assert params["main_floor_cost"] == "350480"
        assert params["second_floor_cost"] == "172640"
        assert params["provincial_multiplier"] == "1.00"
        assert params["early_adopter_discount"] == "0"

    def test_additional_cost_fields(self, breakdown: DetailedPriceBreakdown) -> None:
        params = build_lead_form_params(breakdown)

        assert params["foundation_estimate"] == "18200"
        assert params["foundation_bearing_piles"] == "12"
        assert params["foundation_bracing_piles"] == "4"
        assert params["appliances_estimate_min"] == "12000"
        assert params["appliances_estimate_max"] == "25000"
        assert params["delivery_estimate"] == "2645"
        assert params["delivery_containers"] == "5"
        assert params["delivery_distance_km"] == "150"
        assert params["electrical_hookup_estimate"] == "2500"
        assert params["sewer_water_septic_min"] == "6500"
        assert params["sewer_water_septic_max"] == "25000"
        assert params["permit_fees_estimate"] == "1790"

    def test_grand_totals(self, breakdown: DetailedPriceBreakdown) -> None:
        params = build_lead_form_params(breakdown)

        assert params["grand_total_min"] == "772000"
        assert params["grand_total_max"] == "803000"
        assert params["grand_total_average"] == "787000"

    def test_early_adopter(self) -> None:
        params = build_lead_form_params(calculate_detailed_price("MB", 1040, 1040, True))
        assert params["early_adopter"] == "Yes"
        assert params["early_adopter_discount"] == "20800"
        assert params["base_price"] == "707000"

    def test_net_sizes(self, breakdown: DetailedPriceBreakdown) -> None:
        params = build_lead_form_params(breakdown, floor_area_type=FloorAreaType.NET)

        assert params["floor_area_type"] == "net"
        assert params["total_size"] == "1914"  # 2080 * 0.92 = 1913.6
        assert params["main_floor_size"] == "957"
        # Price per square foot stays on gross area
        assert params["price_per_sqft"] == "350"

    def test_zero_area_price_per_sqft(self) -> None:
        params = build_lead_form_params(calculate_detailed_price("MB", 0, 0))
        assert params["price_per_sqft"] == "0"

    def test_model_image_url_optional(self, breakdown: DetailedPriceBreakdown) -> None:
        assert "model_image_url" not in build_lead_form_params(breakdown)
        params = build_lead_form_params(
            breakdown, source="embed", model_image_url="https://img.example/m.png"
        )
        assert params["model_image_url"] == "https://img.example/m.png"
        assert params["source"] == "embed"


class TestBuildLeadFormUrl:
    def test_url(self, breakdown: DetailedPriceBreakdown) -> None:
        params = build_lead_form_params(
            breakdown, model_image_url="https://img.example/m.png?x=1"
        )
        url = build_lead_form_url(params, "abc123", "https://form.typeform.com/to/")

        parts = urlsplit(url)
        assert f"{parts.scheme}://{parts.netloc}{parts.path}" == (
            "https://form.typeform.com/to/abc123"
        )
        query = parse_qs(parts.query)
        assert query["province"] == ["MB"]
        assert query["grand_total_average"] == ["787000"]
        assert query["model_image_url"] == ["https://img.example/m.png?x=1"]
        assert parts.query.startswith("province=MB&total_size=2080")

    def test_missing_form_id(self, breakdown: DetailedPriceBreakdown) -> None:
        with pytest.raises(LeadFormConfigError, match="TYPEFORM_ID"):
            build_lead_form_url(build_lead_form_params(breakdown), "", "https://x")
