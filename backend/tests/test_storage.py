"""Tests for model screenshot storage — the S3 client is mocked."""

from __future__ import annotations

import base64
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from takeplace.config import Settings
from takeplace.exceptions import InvalidDataUrl, ScreenshotUploadError
from takeplace.storage import ScreenshotStore, decode_data_url

_PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image"
_PNG_URL = "data:image/png;base64," + base64.b64encode(_PNG_BYTES).decode()
_JPEG_URL = "data:image/jpeg;base64," + base64.b64encode(b"\xff\xd8jpeg").decode()


class TestDecodeDataUrl:
    def test_png(self) -> None:
        body, content_type = decode_data_url(_PNG_URL)
        assert body == _PNG_BYTES
        assert content_type == "image/png"

    def test_jpeg(self) -> None:
        body, content_type = decode_data_url(_JPEG_URL)
        assert body == b"\xff\xd8jpeg"
        assert content_type == "image/jpeg"

    def test_missing_mime_defaults_to_png(self) -> None:
        _, content_type = decode_data_url("data:;base64,AAAA")
        assert content_type == "image/png"

    @pytest.mark.parametrize(
        "data_url",
        ["", "no-comma-here", "data:image/png;base64,", "data:image/png;base64,@@@"],
    )
    def test_invalid(self, data_url: str) -> None:
        with pytest.raises(InvalidDataUrl):
            decode_data_url(data_url)


class TestScreenshotStore:
    def test_upload_png(self) -> None:
        client = MagicMock()
        store = ScreenshotStore("shots", "ca-central-1", client)

        url = store.upload(_PNG_URL)

        assert url.startswith("https://shots.s3.ca-central-1.amazonaws.com/model-")
        assert url.endswith(".png")
        client.put_object.assert_called_once()
        kwargs = client.put_object.call_args.kwargs
        assert kwargs["Bucket"] == "shots"
        assert kwargs["Body"] == _PNG_BYTES
        assert kwargs["ContentType"] == "image/png"
        assert kwargs["ACL"] == "public-read"
        assert url.endswith(kwargs["Key"])

    def test_upload_jpeg_extension(self) -> None:
        store = ScreenshotStore("shots", "us-east-1", MagicMock())
        assert store.upload(_JPEG_URL).endswith(".jpg")

    def test_keys_are_unique(self) -> None:
        store = ScreenshotStore("shots", "us-east-1", MagicMock())
        assert store.upload(_PNG_URL) != store.upload(_PNG_URL)

    def test_invalid_data_url_not_uploaded(self) -> None:
        client = MagicMock()
        store = ScreenshotStore("shots", "us-east-1", client)
        with pytest.raises(InvalidDataUrl):
            store.upload("garbage")
        client.put_object.assert_not_called()

    def test_client_error_wrapped(self) -> None:
        client = MagicMock()
        client.put_object.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject"
        )
        store = ScreenshotStore("shots", "us-east-1", client)

        with pytest.raises(ScreenshotUploadError, match="shots"):
            store.upload(_PNG_URL)

    def test_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        fake_client = MagicMock()
        boto3_client = MagicMock(return_value=fake_client)
        monkeypatch.setattr("boto3.client", boto3_client)

        store = ScreenshotStore.from_settings(
            Settings(aws_region="ca-central-1", aws_bucket_name="bucket-x")
        )

        boto3_client.assert_called_once()
        assert boto3_client.call_args.args == ("s3",)
        assert boto3_client.call_args.kwargs["region_name"] == "ca-central-1"
        assert store.public_url("k.png") == (
            "https://bucket-x.s3.ca-central-1.amazonaws.com/k.png"
        )
