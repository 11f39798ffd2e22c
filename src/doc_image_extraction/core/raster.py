"""
ResolvedRaster class and PNG reconstruction of resolved pixel data.

A resolved image object either carries a packed pixel buffer (RGB or RGBA,
8 bits per channel) or an already encoded bitmap. Both are normalized into a
standalone PNG file.
"""

import io

import numpy as np
from PIL import Image

from .constants import (
    RGB_CHANNELS, RGBA_CHANNELS, OPAQUE_ALPHA,
    DEFAULT_IMAGE_FORMAT, PNG_COMPRESS_LEVEL
)
from .errors import UnresolvableRasterError


class ResolvedRaster:
    """
    Pixel data of a single resolved image object.

    The engine owns every byte held here: ``samples`` and ``bitmap`` are
    copied out of the container library before the raster is built.
    """

    def __init__(self, width, height, samples=None, bitmap=None, key=None):
        """
        Initialize ResolvedRaster object.

        Parameters
        ----------
        width : int
            Image width in pixels.
        height : int
            Image height in pixels.
        samples : bytes, optional
            Packed RGB or RGBA pixel buffer, row-major.
        bitmap : bytes, optional
            Pre-encoded image file (PNG, JPEG, ...).
        key : object, optional
            Image object reference the raster was resolved from.
        """
        self.width = width
        self.height = height
        self.samples = bytes(samples) if samples is not None else None
        self.bitmap = bytes(bitmap) if bitmap is not None else None
        self.key = key

    def is_usable(self):
        """
        Check if the raster exposes pixel data at all.

        Returns
        -------
        bool
            True if a packed buffer or an encoded bitmap is present.
        """
        return bool(self.samples) or bool(self.bitmap)

    def channels(self):
        """
        Infer the channel count of the packed buffer from its length.

        Returns
        -------
        int or None
            3 for RGB, 4 for RGBA, None if the length matches neither.
        """
        if self.samples is None or self.width <= 0 or self.height <= 0:
            return None
        pixels = self.width * self.height
        if len(self.samples) == pixels * RGB_CHANNELS:
            return RGB_CHANNELS
        if len(self.samples) == pixels * RGBA_CHANNELS:
            return RGBA_CHANNELS
        return None

    def __repr__(self):
        kind = 'bitmap' if self.bitmap else f"samples[{len(self.samples or b'')}]"
        return f"ResolvedRaster(key={self.key!r}, size=({self.width}x{self.height}), {kind})"


def expand_rgb_to_rgba(samples, width, height):
    """
    Append an opaque alpha channel to a packed RGB buffer.

    Parameters
    ----------
    samples : bytes
        Packed RGB buffer of ``width * height * 3`` bytes.
    width, height : int
        Image dimensions.

    Returns
    -------
    numpy.ndarray
        Array of shape (height, width, 4) and dtype uint8.
    """
    rgb = np.frombuffer(samples, dtype=np.uint8).reshape(height, width, RGB_CHANNELS)
    alpha = np.full((height, width, 1), OPAQUE_ALPHA, dtype=np.uint8)
    return np.concatenate((rgb, alpha), axis=2)


def _encode_png(img):
    buffer = io.BytesIO()
    img.save(buffer, format=DEFAULT_IMAGE_FORMAT, compress_level=PNG_COMPRESS_LEVEL)
    return buffer.getvalue()


def _encode_bitmap(bitmap):
    img = Image.open(io.BytesIO(bitmap))
    img.load()

    # PNG has no CMYK mode
    if img.mode == 'CMYK':
        img = img.convert('RGB')
    elif img.mode not in ('1', 'L', 'LA', 'P', 'RGB', 'RGBA', 'I', 'I;16'):
        img = img.convert('RGBA')

    return _encode_png(img)


def reconstruct(raster):
    """
    Encode a resolved raster as a standalone PNG file.

    Parameters
    ----------
    raster : ResolvedRaster
        Resolved pixel data.

    Returns
    -------
    bytes
        PNG encoded image.

    Raises
    ------
    UnresolvableRasterError
        If the raster has no pixel data, its bitmap cannot be decoded (or
        exceeds Pillow's pixel limit), or its packed buffer length matches
        neither RGB nor RGBA for its dimensions.
    """
    if raster.bitmap:
        try:
            return _encode_bitmap(raster.bitmap)
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            raise UnresolvableRasterError(raster.key, f"undecodable bitmap: {e}") from e

    if not raster.samples:
        raise UnresolvableRasterError(raster.key, "no pixel data")

    channels = raster.channels()
    if channels == RGB_CHANNELS:
        pixels = expand_rgb_to_rgba(raster.samples, raster.width, raster.height)
    elif channels == RGBA_CHANNELS:
        pixels = np.frombuffer(raster.samples, dtype=np.uint8).reshape(
            raster.height, raster.width, RGBA_CHANNELS)
    else:
        raise UnresolvableRasterError(
            raster.key,
            f"buffer of {len(raster.samples)} bytes does not match "
            f"{raster.width}x{raster.height} RGB or RGBA"
        )

    return _encode_png(Image.fromarray(pixels))
