"""Descriptive metadata documents for entities."""

from __future__ import annotations

import base64
import json
from typing import Any

from autorotate.core.settings import settings
from autorotate.models import ImageRecord

DATA_URI_PREFIX = "data:application/json;base64,"


def build_metadata(entity_id: int, image: ImageRecord | None) -> dict[str, Any]:
    """Return the JSON metadata document for an entity.

    ``image`` is None when no record applies, e.g. while the catalog is
    empty; ``image`` and ``artist`` are then empty strings.
    """
    return {
        "name": settings.collection_name,
        "description": f"#{entity_id}",
        "image": image.reference if image is not None else "",
        "artist": image.attribution if image is not None else "",
    }


def encode_metadata_uri(document: dict[str, Any]) -> str:
    """Encode a metadata document as a base64 JSON data URI."""
    payload = json.dumps(document, separators=(",", ":"), ensure_ascii=False)
    return DATA_URI_PREFIX + base64.b64encode(payload.encode("utf-8")).decode("ascii")


def decode_metadata_uri(uri: str) -> dict[str, Any]:
    """Inverse of :func:`encode_metadata_uri`.

    Raises:
        ValueError: If ``uri`` is not a base64 JSON data URI.
    """
    if not uri.startswith(DATA_URI_PREFIX):
        raise ValueError("not a base64 JSON data URI")
    try:
        raw = base64.b64decode(uri[len(DATA_URI_PREFIX):], validate=True)
        document = json.loads(raw.decode("utf-8"))
    except (ValueError, UnicodeDecodeError) as err:
        raise ValueError("malformed metadata URI") from err
    if not isinstance(document, dict):
        raise ValueError("metadata document must be a JSON object")
    return document
