"""
Generator — turns image prompts into PNG data URIs.

Each prompt is one request for exactly one square PNG. The first image in the
response is base64-encoded into a ``data:image/png;base64,...`` URI that a
browser or the CLI exporter can use directly.
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Tuple

from .errors import AssetGenerationError

logger = logging.getLogger(__name__)

DATA_URI_PREFIX = "data:image/png;base64,"


def to_data_uri(image_bytes: bytes) -> str:
    return DATA_URI_PREFIX + base64.b64encode(image_bytes).decode("ascii")


def from_data_uri(uri: str) -> bytes:
    """Inverse of to_data_uri. Used when exporting images to disk."""
    if not uri.startswith(DATA_URI_PREFIX):
        raise ValueError("not a PNG data URI")
    try:
        return base64.b64decode(uri[len(DATA_URI_PREFIX):], validate=True)
    except binascii.Error as exc:
        raise ValueError(f"malformed base64 payload: {exc}") from exc


async def generate_image(service, prompt: str, label: str = "image") -> str:
    """Generate one image for ``prompt`` and return it as a data URI."""
    images = await service.generate_image(prompt)
    if not images:
        raise AssetGenerationError(f"Image generation failed for {label}: no image returned.")
    logger.info("✓ %s (%d bytes)", label, len(images[0]))
    return to_data_uri(images[0])

