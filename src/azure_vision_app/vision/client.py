"""Azure Computer Vision REST API client."""

import logging
from typing import BinaryIO

import httpx

from azure_vision_app.config import (
    ANALYSIS_FEATURES,
    API_VERSION,
    SUBSCRIPTION_KEY_HEADER,
    THUMBNAIL_MAX_SIZE,
    THUMBNAIL_MIN_SIZE,
    VisionSettings,
)
from azure_vision_app.exceptions import (
    AuthError,
    InvalidDimensionError,
    InvalidImageError,
    RemoteServiceError,
    UnreachableUrlError,
)
from azure_vision_app.models import (
    AdultContent,
    AnalysisResult,
    Brand,
    Caption,
    Category,
    DetectedObject,
    Tag,
)

logger = logging.getLogger(__name__)

# Service error codes, from either the top-level or the inner error
UNREACHABLE_URL_CODES = {"InvalidImageUrl", "FailedToDownloadImage"}
INVALID_IMAGE_CODES = {
    "InvalidImageFormat",
    "InvalidImageSize",
    "InvalidImageDimension",
    "NotSupportedImage",
}
INVALID_DIMENSION_CODES = {"InvalidThumbnailSize"}


class VisionClient:
    """Client for the analyze and generateThumbnail operations."""

    def __init__(
        self,
        settings: VisionSettings,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.endpoint = settings.endpoint.rstrip("/")
        self._http = httpx.Client(
            base_url=f"{self.endpoint}/vision/{API_VERSION}",
            headers={SUBSCRIPTION_KEY_HEADER: settings.api_key},
            transport=transport,
        )

    def __enter__(self) -> "VisionClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def analyze_file(self, stream: BinaryIO) -> AnalysisResult:
        """Analyze raw image bytes read from ``stream``."""
        resp = self._post(
            "/analyze",
            params={"visualFeatures": ",".join(ANALYSIS_FEATURES)},
            content=stream.read(),
            headers={"Content-Type": "application/octet-stream"},
        )
        return _decode_analysis(resp)

    def analyze_url(self, url: str) -> AnalysisResult:
        """Analyze an image the service downloads itself."""
        resp = self._post(
            "/analyze",
            params={"visualFeatures": ",".join(ANALYSIS_FEATURES)},
            json={"url": url},
        )
        return _decode_analysis(resp)

    def generate_thumbnail(
        self,
        width: int,
        height: int,
        stream: BinaryIO,
        smart_cropping: bool = True,
    ) -> bytes:
        """Let the service resize (and optionally crop) an image. Returns PNG bytes."""
        for name, value in (("width", width), ("height", height)):
            if not THUMBNAIL_MIN_SIZE <= value <= THUMBNAIL_MAX_SIZE:
                raise InvalidDimensionError(
                    f"Thumbnail {name} must be between {THUMBNAIL_MIN_SIZE} "
                    f"and {THUMBNAIL_MAX_SIZE}, got {value}"
                )
        resp = self._post(
            "/generateThumbnail",
            params={
                "width": str(width),
                "height": str(height),
                "smartCropping": "true" if smart_cropping else "false",
            },
            content=stream.read(),
            headers={"Content-Type": "application/octet-stream"},
        )
        return resp.content

    def _post(self, path: str, **kwargs) -> httpx.Response:
        """POST to the service and translate failures into app errors."""
        logger.debug("POST %s%s", self._http.base_url, path.lstrip("/"))
        try:
            resp = self._http.post(path, **kwargs)
        except httpx.RequestError as e:
            raise RemoteServiceError(f"Could not reach {self.endpoint}: {e}") from e
        logger.debug("%s -> %d", path, resp.status_code)
        if resp.is_error:
            raise _error_from_response(resp)
        return resp


def _decode_analysis(resp: httpx.Response) -> AnalysisResult:
    """Parse a successful analyze response, treating a malformed body as a service failure."""
    try:
        return parse_analysis(resp.json())
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        raise RemoteServiceError(
            f"Unexpected analyze response ({resp.status_code}): {e!r}"
        ) from e


def _error_from_response(resp: httpx.Response) -> Exception:
    """Map an HTTP error response onto the app error taxonomy."""
    codes, message = _parse_error_body(resp)
    detail = f"({resp.status_code}) {message}"

    if resp.status_code in (401, 403):
        return AuthError(f"Access denied {detail}. Check the API key and endpoint.")
    if codes & UNREACHABLE_URL_CODES:
        return UnreachableUrlError(f"Image URL could not be used {detail}")
    if codes & INVALID_IMAGE_CODES:
        return InvalidImageError(f"Image was rejected {detail}")
    if codes & INVALID_DIMENSION_CODES:
        return InvalidDimensionError(f"Invalid thumbnail size {detail}")
    return RemoteServiceError(f"Computer Vision API error {detail}")


def _parse_error_body(resp: httpx.Response) -> tuple[set[str], str]:
    """Extract error codes and a message from either error envelope shape.

    v3.x: ``{"error": {"code", "message", "innererror": {"code", "message"}}}``
    legacy: ``{"code", "message"}``
    """
    try:
        data = resp.json()
    except ValueError:
        return set(), resp.text[:200] or resp.reason_phrase

    if not isinstance(data, dict):
        return set(), resp.text[:200]

    error = data.get("error", data)
    if not isinstance(error, dict):
        return set(), str(error)[:200]

    codes = {error["code"]} if error.get("code") else set()
    message = error.get("message") or resp.reason_phrase
    inner = error.get("innererror")
    if isinstance(inner, dict):
        if inner.get("code"):
            codes.add(inner["code"])
        message = inner.get("message") or message
    return codes, message


def parse_analysis(data: dict) -> AnalysisResult:
    """Convert an analyze response into an AnalysisResult."""
    description = None
    captions = (data.get("description") or {}).get("captions")
    if captions:
        description = tuple(Caption(text=c["text"], confidence=c["confidence"]) for c in captions)

    tags = None
    if data.get("tags"):
        tags = tuple(Tag(name=t["name"], confidence=t["confidence"]) for t in data["tags"])

    categories = None
    if data.get("categories"):
        categories = tuple(Category(name=c["name"], score=c["score"]) for c in data["categories"])

    brands = None
    if data.get("brands"):
        brands = tuple(Brand(name=b["name"], confidence=b["confidence"]) for b in data["brands"])

    objects = None
    if data.get("objects"):
        objects = tuple(
            DetectedObject(label=o["object"], confidence=o["confidence"]) for o in data["objects"]
        )

    adult = None
    if data.get("adult") is not None:
        a = data["adult"]
        adult = AdultContent(
            is_adult=bool(a.get("isAdultContent")),
            is_racy=bool(a.get("isRacyContent")),
            is_gory=bool(a.get("isGoryContent")),
        )

    return AnalysisResult(
        description=description,
        tags=tags,
        categories=categories,
        brands=brands,
        objects=objects,
        adult=adult,
        request_id=data.get("requestId"),
    )
