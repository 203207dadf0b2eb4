"""Project-wide configuration."""

import json
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from azure_vision_app.exceptions import ConfigError

PROJECT_ROOT = Path(os.environ.get("AZURE_VISION_PROJECT_ROOT", Path.cwd()))

load_dotenv(PROJECT_ROOT / ".env")

SETTINGS_PATH = Path(os.environ.get("AZURE_VISION_SETTINGS", PROJECT_ROOT / "appsettings.json"))
LOG_LEVEL = os.environ.get("AZURE_VISION_LOG_LEVEL", "WARNING")

# Settings keys, .NET configuration style
ENDPOINT_KEY = "Azure:ComputerVision:Endpoint"
API_KEY_KEY = "Azure:ComputerVision:ApiKey"

# Computer Vision REST API
API_VERSION = "v3.2"
SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"
ANALYSIS_FEATURES: tuple[str, ...] = (
    "Description",
    "Tags",
    "Categories",
    "Brands",
    "Objects",
    "Adult",
)

# generateThumbnail accepts 1..1024 pixels per side
THUMBNAIL_MIN_SIZE = 1
THUMBNAIL_MAX_SIZE = 1024

# Local resizing of downloaded images
LOCAL_THUMBNAIL_MAX_SIZE = 4096


@dataclass(frozen=True)
class VisionSettings:
    """Endpoint and credentials for the Computer Vision resource."""

    endpoint: str
    api_key: str


def load_settings(path: str | Path | None = None) -> VisionSettings:
    """Read the endpoint and API key from a JSON settings file.

    Keys may be written flat (``"Azure:ComputerVision:Endpoint"``) or nested
    (``{"Azure": {"ComputerVision": {"Endpoint": ...}}}``).

    Raises:
        ConfigError: the file is missing, is not JSON, or lacks a key.
    """
    settings_path = Path(path) if path is not None else SETTINGS_PATH
    try:
        raw = json.loads(settings_path.read_text(encoding="utf-8-sig"))
    except FileNotFoundError as e:
        raise ConfigError(f"Settings file not found: {settings_path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Could not read settings file {settings_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Settings file {settings_path} must contain a JSON object")

    flat = _flatten(raw)
    endpoint = flat.get(ENDPOINT_KEY, "").strip()
    api_key = flat.get(API_KEY_KEY, "").strip()

    required = ((ENDPOINT_KEY, endpoint), (API_KEY_KEY, api_key))
    missing = [key for key, value in required if not value]
    if missing:
        raise ConfigError(f"Missing required settings in {settings_path}: {', '.join(missing)}")

    return VisionSettings(endpoint=endpoint, api_key=api_key)


def _flatten(data: dict, prefix: str = "") -> dict[str, str]:
    """Flatten nested JSON objects into colon-separated keys."""
    flat: dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}:{key}" if prefix else str(key)
        if isinstance(value, dict):
            flat.update(_flatten(value, full_key))
        elif value is not None:
            flat[full_key] = str(value)
    return flat
