"""Tests for metadata document construction and data URI encoding."""

import base64
import json

import pytest

from autorotate.models import ImageRecord
from autorotate.services.metadata import (
    DATA_URI_PREFIX,
    build_metadata,
    decode_metadata_uri,
    encode_metadata_uri,
)


def test_build_metadata_uses_image_fields() -> None:
    image = ImageRecord(position=3, reference="ipfs://image.png", attribution="@artist")
    assert build_metadata(12, image) == {
        "name": "Pooly Rotating",
        "description": "#12",
        "image": "ipfs://image.png",
        "artist": "@artist",
    }


def test_build_metadata_without_image() -> None:
    document = build_metadata(0, None)
    assert document["image"] == ""
    assert document["artist"] == ""


def test_encoded_uri_is_base64_json() -> None:
    document = build_metadata(1, None)
    uri = encode_metadata_uri(document)
    assert uri.startswith(DATA_URI_PREFIX)
    payload = base64.b64decode(uri[len(DATA_URI_PREFIX):])
    assert json.loads(payload) == document


def test_non_ascii_values_survive_encoding() -> None:
    image = ImageRecord(position=0, reference="ipfs://ünïcode.png", attribution="@アーティスト")
    assert decode_metadata_uri(encode_metadata_uri(build_metadata(0, image)))["artist"] == "@アーティスト"


@pytest.mark.parametrize(
    "uri",
    [
        "https://example.com/meta.json",
        DATA_URI_PREFIX + "not base64!",
        DATA_URI_PREFIX + base64.b64encode(b"[1, 2]").decode(),
    ],
)
def test_decode_rejects_malformed_uris(uri) -> None:
    with pytest.raises(ValueError):
        decode_metadata_uri(uri)
