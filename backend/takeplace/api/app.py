"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from takeplace.config import Settings, load_settings
from takeplace.engine import ENGINE_VERSION
from takeplace.exceptions import (
    InvalidDataUrl,
    LeadFormConfigError,
    PricingError,
    ScreenshotUploadError,
)
from takeplace.floor_area import (
    gross_to_net,
    module_count,
    rebalance_main_floor,
    split_floor_areas,
)
from takeplace.leadform import build_lead_form_params, build_lead_form_url
from takeplace.models.inputs import (  # noqa: TCH001 (FastAPI resolves at runtime)
    FloorAreaRequest,
    LeadFormRequest,
    PriceInputs,
    ScreenshotUploadRequest,
)

if TYPE_CHECKING:
    from takeplace.engine import PricingEngine
    from takeplace.storage import ScreenshotStore

logger = logging.getLogger(__name__)


def create_app(
    *,
    pricing_engine: PricingEngine | None = None,
    screenshot_store: ScreenshotStore | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    pricing_engine
        Optional pre-built engine. If not provided, one is created via
        create_default_engine on first request.
    screenshot_store
        Optional pre-built store for /api/upload-model-screenshot (e.g. a
        mock in tests). If not provided, one is created from settings on
        first upload.
    settings
        Optional settings; read from the environment when omitted.
    """
    settings = settings or load_settings()
    app = FastAPI(title="Take Place Estimator", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.pricing_engine = pricing_engine
    app.state.screenshot_store = screenshot_store
    app.state.settings = settings

    def _get_engine() -> PricingEngine:
        eng: PricingEngine | None = app.state.pricing_engine
        if eng is not None:
            return eng
        from takeplace.factory import create_default_engine

        eng = create_default_engine()
        app.state.pricing_engine = eng
        return eng

    def _get_store() -> ScreenshotStore:
        store: ScreenshotStore | None = app.state.screenshot_store
        if store is not None:
            return store
        from takeplace.storage import ScreenshotStore

        store = ScreenshotStore.from_settings(app.state.settings)
        app.state.screenshot_store = store
        return store

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # GET /api/provinces
    # ------------------------------------------------------------------

    @app.get("/api/provinces")
    def provinces() -> list[dict[str, Any]]:
        repository = _get_engine().repository
        return [
            {
                "code": code.value,
                **repository.get_provincial_factors(code).model_dump(),
            }
            for code in repository.provinces
        ]

    # ------------------------------------------------------------------
    # POST /api/price
    # ------------------------------------------------------------------

    @app.post("/api/price")
    def price(inputs: PriceInputs) -> dict[str, Any]:
        try:
            breakdown = _get_engine().price(inputs)
        except PricingError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return {
            "breakdown": breakdown.model_dump(mode="json"),
            "summary_dict": breakdown.to_summary_dict(),
        }

    # ------------------------------------------------------------------
    # POST /api/floor-areas
    # ------------------------------------------------------------------

    @app.post("/api/floor-areas")
    def floor_areas(request: FloorAreaRequest) -> dict[str, Any]:
        split = split_floor_areas(
            request.total_area_sqft, request.second_floor_area_sqft
        )
        if request.requested_main_floor_area_sqft is not None:
            split = rebalance_main_floor(
                split.total_area_sqft, request.requested_main_floor_area_sqft
            )
        return {
            "total_area_sqft": split.total_area_sqft,
            "main_floor_area_sqft": split.main_floor_area_sqft,
            "second_floor_area_sqft": split.second_floor_area_sqft,
            "module_count": module_count(split.main_floor_area_sqft),
            "net": {
                "total_area_sqft": gross_to_net(split.total_area_sqft),
                "main_floor_area_sqft": gross_to_net(split.main_floor_area_sqft),
                "second_floor_area_sqft": gross_to_net(split.second_floor_area_sqft),
            },
        }

    # ------------------------------------------------------------------
    # POST /api/lead-form
    # ------------------------------------------------------------------

    @app.post("/api/lead-form")
    def lead_form(request: LeadFormRequest) -> dict[str, Any]:
        inputs = PriceInputs(
            province=request.province,
            main_floor_area_sqft=request.main_floor_area_sqft,
            second_floor_area_sqft=request.second_floor_area_sqft,
            early_adopter=request.early_adopter,
        )
        try:
            breakdown = _get_engine().price(inputs)
        except PricingError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        params = build_lead_form_params(
            breakdown,
            floor_area_type=request.floor_area_type,
            source=request.source,
            model_image_url=request.model_image_url,
        )
        cfg: Settings = app.state.settings
        try:
            url = build_lead_form_url(params, cfg.typeform_id, cfg.typeform_base_url)
        except LeadFormConfigError as exc:
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        return {"url": url, "params": params}

    # ------------------------------------------------------------------
    # POST /api/upload-model-screenshot
    # ------------------------------------------------------------------

    @app.post("/api/upload-model-screenshot")
    def upload_model_screenshot(request: ScreenshotUploadRequest) -> dict[str, str]:
        if not request.data_url:
            raise HTTPException(status_code=400, detail="Missing dataUrl parameter")
        try:
            url = _get_store().upload(request.data_url)
        except InvalidDataUrl as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except ScreenshotUploadError as exc:
            logger.exception("Error uploading model screenshot")
            raise HTTPException(
                status_code=500, detail="Failed to upload image"
            ) from exc
        return {"url": url}

    return app
