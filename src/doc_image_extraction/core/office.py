"""Harvest raster images stored anywhere inside an OOXML zip container."""

import io
import os
import zipfile
import zlib

from .base import ContainerExtractor
from .classifier import ContainerKind, file_extension
from .constants import RASTER_EXTENSIONS
from .errors import ContainerOpenError
from .results import ExtractedImage, ExtractionResult

# Errors of a single entry read; the rest of the archive stays usable
ENTRY_READ_ERRORS = (zipfile.BadZipFile, zlib.error, NotImplementedError, RuntimeError, EOFError)


def is_raster_entry(name):
    """Check if a zip entry name carries an allow-listed raster extension."""
    return not name.endswith('/') and file_extension(name) in RASTER_EXTENSIONS


class OfficeZipExtractor(ContainerExtractor):
    """
    Extracts images from ``.docx``, ``.pptx`` and ``.xlsx`` files.

    Every entry with a raster extension is copied as-is, whatever folder it
    lives in (``word/media/``, ``ppt/media/``, ``docProps/thumbnail.jpeg``...).

    Each image is labeled with the entry's base filename only. Its running
    index is its position in ``ExtractionResult.images``, which the archive
    builder writes as the entry name prefix (``001_image1.png``,
    ``002_image1.png`` for two ``image1.png`` in different folders).
    """

    kind = ContainerKind.OFFICE_ZIP

    async def harvest(self, data):
        try:
            archive = zipfile.ZipFile(io.BytesIO(data))
        except (zipfile.BadZipFile, zipfile.LargeZipFile, OSError, ValueError) as e:
            raise ContainerOpenError(f"cannot open office document: {e}") from e

        result = ExtractionResult()
        with archive:
            for info in archive.infolist():
                if not is_raster_entry(info.filename):
                    continue

                file_name = os.path.basename(info.filename)
                try:
                    content = archive.read(info)
                except ENTRY_READ_ERRORS as e:
                    self.notify_skip(f"Skipped unreadable entry: {info.filename}", e)
                    continue

                result.add(ExtractedImage(
                    source_label=file_name,
                    encoded_bytes=content,
                    extension=file_extension(file_name),
                ))
                self.notify(f"Found image: {file_name}")

        return result
