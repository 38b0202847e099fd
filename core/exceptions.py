"""
Error types raised by the brand studio core
"""

from typing import Optional


class BrandStudioError(Exception):
    """Base class for all domain errors"""


class FetchError(BrandStudioError):
    """The brand page could not be retrieved"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(BrandStudioError):
    """The fetched HTML could not be parsed"""


class ConfigurationError(BrandStudioError):
    """A required credential or setting is missing"""


class PublishError(BrandStudioError):
    """Publishing to the social aggregator failed"""


class ThumbnailError(BrandStudioError):
    """Thumbnail image generation failed"""


class StorageError(BrandStudioError):
    """Writing an upload or a brand record failed"""
