"""File and URL analysis flows.

Each flow analyzes an image, prints the result, asks for a thumbnail size and
writes ``thumbnail_{w}x{h}.png``. Errors are reported and end the flow; only
AuthError is left to the caller.
"""

import logging
from collections.abc import Callable
from pathlib import Path

import httpx

from azure_vision_app.exceptions import AuthError, VisionAppError
from azure_vision_app.models import SourceKind
from azure_vision_app.reporter import Reporter
from azure_vision_app.thumbnail import build_request, generate
from azure_vision_app.vision.client import VisionClient

logger = logging.getLogger(__name__)

ANALYZING_TEXT = "Analyserar bilden, vänligen vänta..."
GENERATING_TEXT = "Genererar miniatyrbild..."
SIZE_PROMPT = "Ange storlek på miniatyrbilden (t.ex. 100x100):"


def analyze_file(
    client: VisionClient,
    image_file: str,
    reporter: Reporter,
    read_line: Callable[[], str] | None = None,
    output_dir: Path | None = None,
) -> Path | None:
    """Analyze a local image and let the service generate its thumbnail.

    Returns the thumbnail path, or None when the flow was aborted.
    """
    read_line = read_line or input
    reporter.info(ANALYZING_TEXT)
    try:
        with open(image_file, "rb") as image_data:
            analysis = client.analyze_file(image_data)
    except AuthError:
        raise
    except (VisionAppError, OSError) as e:
        logger.warning("File analysis of %s failed: %s", image_file, e)
        reporter.error(f"Ett fel inträffade vid filanalys: {e}")
        return None

    logger.debug("Analysis request id: %s", analysis.request_id)
    reporter.analysis(analysis)

    reporter.info(GENERATING_TEXT)
    reporter.info(SIZE_PROMPT)
    size = read_line()
    try:
        request = build_request(size, SourceKind.FILE, image_file)
        output_path = generate(client, request, output_dir)
    except AuthError:
        raise
    except (VisionAppError, OSError) as e:
        logger.warning("Thumbnail for %s failed: %s", image_file, e)
        reporter.error(f"Ett fel inträffade: {e}")
        return None

    reporter.success(f"Miniatyrbild sparad i {output_path.name}")
    return output_path


def analyze_url(
    client: VisionClient,
    image_url: str,
    reporter: Reporter,
    read_line: Callable[[], str] | None = None,
    output_dir: Path | None = None,
    transport: httpx.BaseTransport | None = None,
) -> Path | None:
    """Analyze an image by URL, then download and resize it locally.

    ``transport`` is used for the local download only.
    """
    read_line = read_line or input
    reporter.info(ANALYZING_TEXT)
    try:
        analysis = client.analyze_url(image_url)
    except AuthError:
        raise
    except VisionAppError as e:
        logger.warning("URL analysis of %s failed: %s", image_url, e)
        reporter.error(f"Ett fel inträffade vid URL-analys: {e}")
        return None

    logger.debug("Analysis request id: %s", analysis.request_id)
    reporter.analysis(analysis)

    reporter.info(GENERATING_TEXT)
    reporter.info(SIZE_PROMPT)
    size = read_line()
    try:
        request = build_request(size, SourceKind.URL, image_url)
        output_path = generate(client, request, output_dir, transport=transport)
    except (VisionAppError, OSError) as e:
        logger.warning("Thumbnail for %s failed: %s", image_url, e)
        reporter.error(f"Ett fel inträffade: {e}")
        return None

    reporter.success(f"Miniatyrbild sparad i {output_path.name}")
    return output_path
