"""Data models for image analysis results."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Caption:
    text: str
    confidence: float


@dataclass(frozen=True)
class Tag:
    name: str
    confidence: float


@dataclass(frozen=True)
class Category:
    name: str
    score: float


@dataclass(frozen=True)
class Brand:
    name: str
    confidence: float


@dataclass(frozen=True)
class DetectedObject:
    label: str
    confidence: float


@dataclass(frozen=True)
class AdultContent:
    """Content-safety flags."""

    is_adult: bool
    is_racy: bool
    is_gory: bool


@dataclass(frozen=True)
class AnalysisResult:
    """A single analysis envelope.

    Every section is optional: ``None`` means it was not requested or nothing
    was detected.
    """

    description: tuple[Caption, ...] | None = None
    tags: tuple[Tag, ...] | None = None
    categories: tuple[Category, ...] | None = None
    brands: tuple[Brand, ...] | None = None
    objects: tuple[DetectedObject, ...] | None = None
    adult: AdultContent | None = None
    request_id: str | None = None


class SourceKind(Enum):
    FILE = "file"
    URL = "url"


@dataclass(frozen=True)
class ThumbnailRequest:
    """Requested thumbnail size and the image it is made from."""

    width: int
    height: int
    source_kind: SourceKind
    source: str

    @property
    def filename(self) -> str:
        return thumbnail_filename(self.width, self.height)


def thumbnail_filename(width: int, height: int) -> str:
    """Output file name for a thumbnail of the given size."""
    return f"thumbnail_{width}x{height}.png"
