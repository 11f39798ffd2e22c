import io

import numpy as np
import pytest
from PIL import Image

from doc_image_extraction.core.errors import ResolutionError, UnresolvableRasterError
from doc_image_extraction.core.raster import ResolvedRaster, expand_rgb_to_rgba, reconstruct


def decode(png):
    img = Image.open(io.BytesIO(png))
    img.load()
    return img


def test_rgb_buffer_is_expanded_with_opaque_alpha():
    width, height = 5, 3
    rgb = np.arange(width * height * 3, dtype=np.uint8).reshape(height, width, 3)

    png = reconstruct(ResolvedRaster(width, height, samples=rgb.tobytes()))

    img = decode(png)
    assert img.format == "PNG"
    assert img.mode == "RGBA"
    assert img.size == (width, height)
    pixels = np.array(img)
    assert (pixels[:, :, 3] == 255).all()
    assert (pixels[:, :, :3] == rgb).all()


def test_rgba_buffer_is_encoded_as_is():
    width, height = 4, 4
    rgba = np.random.default_rng(7).integers(0, 256, (height, width, 4), dtype=np.uint8)

    img = decode(reconstruct(ResolvedRaster(width, height, samples=rgba.tobytes())))

    assert img.mode == "RGBA"
    assert (np.array(img) == rgba).all()


def test_bitmap_is_encoded_at_native_size():
    buffer = io.BytesIO()
    Image.new("RGB", (9, 7), (1, 2, 3)).save(buffer, format="JPEG")

    img = decode(reconstruct(ResolvedRaster(0, 0, bitmap=buffer.getvalue())))

    assert img.format == "PNG"
    assert img.size == (9, 7)


def test_cmyk_bitmap_becomes_rgb():
    buffer = io.BytesIO()
    Image.new("CMYK", (6, 6), (0, 0, 0, 0)).save(buffer, format="JPEG")

    img = decode(reconstruct(ResolvedRaster(6, 6, bitmap=buffer.getvalue())))

    assert img.mode == "RGB"


@pytest.mark.parametrize("length", [0, 5, 4 * 4 * 1, 4 * 4 * 2, 4 * 4 * 5])
def test_other_buffer_lengths_are_unresolvable(length):
    raster = ResolvedRaster(4, 4, samples=bytes(length), key=12)

    with pytest.raises(UnresolvableRasterError) as excinfo:
        reconstruct(raster)

    assert isinstance(excinfo.value, ResolutionError)
    assert excinfo.value.key == 12


def test_undecodable_bitmap_is_unresolvable():
    with pytest.raises(UnresolvableRasterError):
        reconstruct(ResolvedRaster(2, 2, bitmap=b"not an image"))


def test_resolved_raster_copies_buffers():
    source = bytearray(b"\x01" * 12)
    raster = ResolvedRaster(2, 2, samples=memoryview(source))
    source[0] = 0

    assert raster.samples[0] == 1
    assert isinstance(raster.samples, bytes)


def test_channels_and_usability():
    assert ResolvedRaster(2, 2, samples=bytes(12)).channels() == 3
    assert ResolvedRaster(2, 2, samples=bytes(16)).channels() == 4
    assert ResolvedRaster(2, 2, samples=bytes(8)).channels() is None
    assert not ResolvedRaster(2, 2).is_usable()
    assert ResolvedRaster(2, 2, bitmap=b"x").is_usable()


def test_expand_rgb_to_rgba_shape():
    pixels = expand_rgb_to_rgba(bytes(range(6)), 2, 1)

    assert pixels.shape == (1, 2, 4)
    assert pixels.tolist() == [[[0, 1, 2, 255], [3, 4, 5, 255]]]


def test_bitmap_over_pixel_limit_is_unresolvable(monkeypatch):
    buffer = io.BytesIO()
    Image.new("RGB", (64, 64)).save(buffer, format="PNG")
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 1000)

    with pytest.raises(UnresolvableRasterError):
        reconstruct(ResolvedRaster(64, 64, bitmap=buffer.getvalue(), key=3))
