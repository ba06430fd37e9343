"""Tests for the top-level package exports."""

from __future__ import annotations

import takeplace


def test_all_exports_resolve() -> None:
    for name in takeplace.__all__:
        assert hasattr(takeplace, name), name


def test_quickstart() -> None:
    engine = takeplace.create_default_engine()
    breakdown = engine.calculate_detailed_price("MB", 1040, 1040, True)
    assert isinstance(breakdown, takeplace.DetailedPriceBreakdown)
    assert breakdown.total_price == 707_000
    assert takeplace.calculate_price("MB", 1040, 1040) == 728_000


def test_errors_share_a_base() -> None:
    assert issubclass(takeplace.InvalidProvinceCode, takeplace.PricingError)
    assert issubclass(takeplace.InvalidAreaValue, takeplace.TakePlaceError)
