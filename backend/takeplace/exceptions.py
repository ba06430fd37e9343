"""Custom exception hierarchy for the Take Place estimator."""

from __future__ import annotations


class TakePlaceError(Exception):
    """Base exception for all Take Place errors."""


class PricingError(TakePlaceError):
    """Raised when a price cannot be computed for the given inputs."""


class InvalidProvinceCode(PricingError, ValueError):  # noqa: N818
    """Raised when a province code is not one of the supported codes."""

    def __init__(self, code: object) -> None:
        self.code = code
        super().__init__(f"Unrecognized province code: {code!r}")


class InvalidAreaValue(PricingError, ValueError):  # noqa: N818
    """Raised when a floor area is not a usable number of square feet."""

    def __init__(
        self,
        field: str,
        value: object,
        reason: str = "must be a finite, non-negative number",
    ) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} {reason}, got {value!r}")


class InvalidDataUrl(TakePlaceError, ValueError):  # noqa: N818
    """Raised when a screenshot data URL cannot be decoded."""


class ScreenshotUploadError(TakePlaceError):
    """Raised when storing a screenshot in object storage fails."""


class LeadFormConfigError(TakePlaceError):
    """Raised when the lead-capture form is not configured."""
