"""Model screenshot storage in S3.

The front end captures the 3D model as a base64 data URL; this module
decodes it and stores the image in a public bucket so the lead form can
link to it.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
import time
import uuid
from typing import TYPE_CHECKING, Any

from takeplace.exceptions import InvalidDataUrl, ScreenshotUploadError

if TYPE_CHECKING:
    from takeplace.config import Settings

logger = logging.getLogger(__name__)

_MIME_RE = re.compile(r"data:([^;,]+)[;,]")
DEFAULT_CONTENT_TYPE = "image/png"


def decode_data_url(data_url: str) -> tuple[bytes, str]:
    """Split a ``data:<mime>;base64,<payload>`` URL into bytes and MIME type.

    Raises InvalidDataUrl if there is no payload or it is not valid base64.
    """
    if not data_url or "," not in data_url:
        msg = "Missing or malformed data URL"
        raise InvalidDataUrl(msg)

    header, payload = data_url.split(",", 1)
    if not payload:
        msg = "Data URL has no payload"
        raise InvalidDataUrl(msg)
    try:
        body = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        msg = "Data URL payload is not valid base64"
        raise InvalidDataUrl(msg) from exc

    match = _MIME_RE.match(header + ",")
    content_type = match.group(1) if match else DEFAULT_CONTENT_TYPE
    return body, content_type


def _extension_for(content_type: str) -> str:
    return "jpg" if content_type == "image/jpeg" else "png"


class ScreenshotStore:
    """Uploads model screenshots to an S3 bucket with public-read access."""

    def __init__(self, bucket: str, region: str, client: Any) -> None:
        self._bucket = bucket
        self._region = region
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> ScreenshotStore:
        import boto3

        client = boto3.client(
            "s3",
            region_name=settings.aws_region,
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
        )
        return cls(settings.aws_bucket_name, settings.aws_region, client)

    def public_url(self, key: str) -> str:
        return f"https://{self._bucket}.s3.{self._region}.amazonaws.com/{key}"

    def upload(self, data_url: str) -> str:
        """Store the image in ``data_url`` and return its public URL.

        Raises InvalidDataUrl for undecodable input and
        ScreenshotUploadError if S3 rejects the upload.
        """
        from botocore.exceptions import BotoCoreError, ClientError

        body, content_type = decode_data_url(data_url)
        key = (
            f"model-{uuid.uuid4().hex[:10]}-{int(time.time() * 1000)}"
            f".{_extension_for(content_type)}"
        )
        try:
            self._client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=body,
                ContentType=content_type,
                ACL="public-read",
            )
        except (BotoCoreError, ClientError) as exc:
            msg = f"Failed to upload screenshot to bucket '{self._bucket}'"
            raise ScreenshotUploadError(msg) from exc

        logger.info("Uploaded model screenshot %s (%d bytes)", key, len(body))
        return self.public_url(key)
