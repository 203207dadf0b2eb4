"""Computer Vision service access."""

from azure_vision_app.vision.client import VisionClient, parse_analysis

__all__ = ["VisionClient", "parse_analysis"]
