"""Thumbnail size parsing and generation."""

import logging
import re
from io import BytesIO
from pathlib import Path

import httpx
from PIL import Image

from azure_vision_app.config import LOCAL_THUMBNAIL_MAX_SIZE
from azure_vision_app.exceptions import (
    InvalidDimensionError,
    InvalidImageError,
    ParseError,
    UnreachableUrlError,
)
from azure_vision_app.models import SourceKind, ThumbnailRequest
from azure_vision_app.vision.client import VisionClient

logger = logging.getLogger(__name__)

_SIZE_PATTERN = re.compile(r"^\s*(\d+)\s*[xX]\s*(\d+)\s*$")

# Modes Pillow can write to PNG as-is
_PNG_MODES = {"1", "L", "LA", "I", "P", "RGB", "RGBA"}


def parse_size(text: str) -> tuple[int, int]:
    """Parse a ``WxH`` string such as ``"100x100"`` into (width, height).

    Raises:
        ParseError: the string is not two positive integers joined by 'x'.
    """
    match = _SIZE_PATTERN.match(text or "")
    if match is None:
        raise ParseError(f"Ogiltig storlek '{text}', ange t.ex. 100x100")
    width, height = int(match.group(1)), int(match.group(2))
    if width <= 0 or height <= 0:
        raise ParseError(f"Bredd och höjd måste vara större än noll: '{text}'")
    return width, height


def build_request(text: str, source_kind: SourceKind, source: str) -> ThumbnailRequest:
    """Parse a size string into a ThumbnailRequest for ``source``."""
    width, height = parse_size(text)
    return ThumbnailRequest(width=width, height=height, source_kind=source_kind, source=source)


def generate(
    client: VisionClient,
    request: ThumbnailRequest,
    output_dir: Path | None = None,
    transport: httpx.BaseTransport | None = None,
) -> Path:
    """Write the thumbnail for ``request``.

    Local files go through the service (smart cropping), URLs are downloaded
    and resized here. ``transport`` only applies to the download.
    """
    if request.source_kind is SourceKind.FILE:
        return generate_from_file(client, request, output_dir)
    return generate_from_url(request, output_dir, transport=transport)


def generate_from_file(
    client: VisionClient,
    request: ThumbnailRequest,
    output_dir: Path | None = None,
) -> Path:
    """Have the service smart-crop the local file and write the PNG it returns."""
    with open(request.source, "rb") as image_data:
        content = client.generate_thumbnail(
            request.width, request.height, image_data, smart_cropping=True
        )
    output_path = (output_dir or Path.cwd()) / request.filename
    output_path.write_bytes(content)
    logger.info("Wrote %d bytes to %s", len(content), output_path)
    return output_path


def generate_from_url(
    request: ThumbnailRequest,
    output_dir: Path | None = None,
    transport: httpx.BaseTransport | None = None,
) -> Path:
    """Download the image and resize it locally to exactly the requested size."""
    for name, value in (("bredd", request.width), ("höjd", request.height)):
        if value > LOCAL_THUMBNAIL_MAX_SIZE:
            raise InvalidDimensionError(
                f"Miniatyrbildens {name} får vara högst {LOCAL_THUMBNAIL_MAX_SIZE}, fick {value}"
            )

    try:
        with httpx.Client(follow_redirects=True, transport=transport) as http_client:
            resp = http_client.get(request.source)
            resp.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise UnreachableUrlError(f"Kunde inte hämta bilden från {request.source}: {e}") from e

    output_path = (output_dir or Path.cwd()) / request.filename
    try:
        with Image.open(BytesIO(resp.content)) as img:
            if img.mode not in _PNG_MODES:
                img = img.convert("RGBA")
            thumbnail = img.resize((request.width, request.height), Image.Resampling.LANCZOS)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise InvalidImageError(f"Bilden kunde inte läsas: {e}") from e

    thumbnail.save(output_path, format="PNG")
    logger.info("Wrote resized image to %s", output_path)
    return output_path
