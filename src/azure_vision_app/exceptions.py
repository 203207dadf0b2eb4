class VisionAppError(Exception):
    """Base class for errors reported to the user."""


class ConfigError(VisionAppError):
    """Raised when the settings file is missing or incomplete."""


class AuthError(VisionAppError):
    """Raised when the service rejects the API key."""


class RemoteServiceError(VisionAppError):
    """Raised when the vision service cannot be reached or fails."""


class UnreachableUrlError(VisionAppError):
    """Raised when an image URL cannot be downloaded."""


class InvalidImageError(VisionAppError):
    """Raised when image data is rejected or cannot be decoded."""


class InvalidDimensionError(VisionAppError):
    """Raised when thumbnail dimensions are out of bounds."""


class ParseError(VisionAppError):
    """Raised when a thumbnail size string is malformed."""
