"""Runtime configuration read from environment variables.

``.env`` files are loaded by the API module before settings are read, so
values there behave exactly like exported variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_AWS_REGION = "us-east-1"
DEFAULT_BUCKET_NAME = "take-place-model-screenshots"
DEFAULT_TYPEFORM_BASE_URL = "https://form.typeform.com/to"
DEFAULT_CORS_ORIGINS = ("http://localhost:3000",)


@dataclass(frozen=True)
class Settings:
    aws_region: str = DEFAULT_AWS_REGION
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = field(default=None, repr=False)
    aws_bucket_name: str = DEFAULT_BUCKET_NAME
    typeform_id: str = ""
    typeform_base_url: str = DEFAULT_TYPEFORM_BASE_URL
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS


def _split_origins(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return DEFAULT_CORS_ORIGINS
    return tuple(o.strip() for o in raw.split(",") if o.strip())


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    env = os.environ
    return Settings(
        aws_region=env.get("AWS_REGION") or DEFAULT_AWS_REGION,
        aws_access_key_id=env.get("AWS_ACCESS_KEY_ID") or None,
        aws_secret_access_key=env.get("AWS_SECRET_ACCESS_KEY") or None,
        aws_bucket_name=env.get("AWS_BUCKET_NAME") or DEFAULT_BUCKET_NAME,
        typeform_id=env.get("TYPEFORM_ID", ""),
        typeform_base_url=env.get("TYPEFORM_BASE_URL") or DEFAULT_TYPEFORM_BASE_URL,
        cors_origins=_split_origins(env.get("CORS_ORIGINS")),
    )
