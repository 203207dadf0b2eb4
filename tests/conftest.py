"""Shared test fixtures."""

import json
from io import BytesIO, StringIO

import httpx
import pytest
from PIL import Image
from rich.console import Console

from azure_vision_app.config import VisionSettings
from azure_vision_app.reporter import RichReporter
from azure_vision_app.vision.client import VisionClient

ENDPOINT = "https://example.cognitiveservices.azure.com/"


def make_image_bytes(fmt: str = "JPEG", size: tuple[int, int] = (64, 48)) -> bytes:
    """Encode a small solid-color image."""
    buf = BytesIO()
    Image.new("RGB", size, color=(200, 120, 40)).save(buf, format=fmt)
    return buf.getvalue()


def make_lines(*values: str):
    """Stand-in for input(): returns each value, then raises EOFError."""
    remaining = list(values)

    def read_line() -> str:
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read_line


def cat_analysis() -> dict:
    """Analyze response with one caption and one tag."""
    return {
        "description": {
            "tags": ["cat"],
            "captions": [{"text": "a cat", "confidence": 0.92}],
        },
        "tags": [{"name": "animal", "confidence": 0.88}],
        "requestId": "req-1",
    }


class FakeVisionService:
    """Handler for httpx.MockTransport that records requests."""

    def __init__(self, analysis: dict | None = None, thumbnail: bytes | None = None) -> None:
        self.analysis = analysis if analysis is not None else cat_analysis()
        self.thumbnail = thumbnail if thumbnail is not None else make_image_bytes("PNG", (50, 50))
        self.requests: list[httpx.Request] = []
        self.error: tuple[int, dict] | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            status, body = self.error
            return httpx.Response(status, json=body)
        if request.url.path.endswith("/analyze"):
            return httpx.Response(200, json=self.analysis)
        if request.url.path.endswith("/generateThumbnail"):
            return httpx.Response(200, content=self.thumbnail, headers={"Content-Type": "image/png"})
        return httpx.Response(404, json={"error": {"code": "NotFound", "message": "no route"}})


@pytest.fixture
def settings() -> VisionSettings:
    return VisionSettings(endpoint=ENDPOINT, api_key="test-key")


@pytest.fixture
def service() -> FakeVisionService:
    return FakeVisionService()


@pytest.fixture
def client(settings, service):
    with VisionClient(settings, transport=httpx.MockTransport(service)) as c:
        yield c


@pytest.fixture
def console() -> Console:
    """Plain-text console writing to a string buffer."""
    return Console(file=StringIO(), width=120, color_system=None)


@pytest.fixture
def reporter(console) -> RichReporter:
    return RichReporter(console)


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "cat.jpg"
    path.write_bytes(make_image_bytes())
    return path


def output_of(console: Console) -> str:
    return console.file.getvalue()


def error_body(code: str, message: str = "error", inner: str | None = None) -> dict:
    error: dict = {"code": code, "message": message}
    if inner is not None:
        error["innererror"] = {"code": inner, "message": message}
    return {"error": error}


def request_json(request: httpx.Request) -> dict:
    return json.loads(request.content)
