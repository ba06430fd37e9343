"""Input models for the Take Place pricing engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from takeplace.models.enums import FloorAreaType, ProvinceCode


class PriceInputs(BaseModel):
    """A single pricing request: where the home goes and how big it is.

    Areas are gross square feet. Instances are created per calculation and
    never mutated.
    """

    model_config = ConfigDict(frozen=True)

    province: ProvinceCode
    main_floor_area_sqft: float = Field(ge=0, allow_inf_nan=False)
    second_floor_area_sqft: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    early_adopter: bool = False

    @field_validator("province", mode="before")
    @classmethod
    def province_any_case(cls, v: object) -> object:
        from takeplace.data.repository import parse_province

        return parse_province(v)  # type: ignore[arg-type]

    @property
    def total_area_sqft(self) -> float:
        return self.main_floor_area_sqft + self.second_floor_area_sqft


class LeadFormRequest(PriceInputs):
    """Pricing inputs plus the extra context sent to the lead-capture form."""

    floor_area_type: FloorAreaType = FloorAreaType.GROSS
    source: str = "calculator"
    model_image_url: str | None = None


class FloorAreaRequest(BaseModel):
    """Raw slider values to be normalized onto the module grid."""

    total_area_sqft: float = Field(ge=0, allow_inf_nan=False)
    second_floor_area_sqft: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    requested_main_floor_area_sqft: float | None = Field(
        default=None, ge=0, allow_inf_nan=False
    )


class ScreenshotUploadRequest(BaseModel):
    """Body of the model screenshot upload endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    data_url: str | None = Field(default=None, alias="dataUrl")
