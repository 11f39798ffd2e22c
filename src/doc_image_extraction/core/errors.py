"""Exceptions raised by the extraction engine."""


class ExtractionError(Exception):
    """Base class for extraction failures."""


class ContainerOpenError(ExtractionError):
    """The PDF or zip container cannot be opened at all."""


class ResolutionError(ExtractionError):
    """A single image object cannot be turned into a usable raster."""

    def __init__(self, key, reason):
        super().__init__(f"image {key!r}: {reason}")
        self.key = key
        self.reason = reason


class UnresolvableRasterError(ResolutionError):
    """Packed pixel buffer length matches neither RGB nor RGBA."""
