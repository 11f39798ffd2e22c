"""Package extracted images into a single zip archive."""

import io
import os
import re
import zipfile

from .constants import ARCHIVE_NAME_TEMPLATE, ARCHIVE_ENTRY_TEMPLATE, ARCHIVE_TIMESTAMP

_UNSAFE_CHARS = re.compile(r'[^A-Za-z0-9._-]+')


def archive_name(filename):
    """
    Name of the archive produced for a document.

    >>> archive_name('/tmp/report.final.pdf')
    'extracted_images_report.final.zip'
    """
    base_name = os.path.splitext(os.path.basename(filename))[0]
    return ARCHIVE_NAME_TEMPLATE.format(base_name=base_name)


def entry_name(sequence, image):
    """Unique archive entry name for the ``sequence``-th image (1-based)."""
    stem = os.path.splitext(image.source_label)[0]
    stem = _UNSAFE_CHARS.sub('_', stem).strip('_') or 'image'
    return ARCHIVE_ENTRY_TEMPLATE.format(sequence=sequence, stem=stem, extension=image.extension)


def build_archive(result):
    """
    Build the output zip of an extraction.

    Parameters
    ----------
    result : ExtractionResult
        Extracted images, in document order.

    Returns
    -------
    bytes
        Zip archive with one entry per image. Entries carry a fixed timestamp,
        so the same result always yields the same bytes.

    Raises
    ------
    ValueError
        If the result holds no image.
    """
    if result.count == 0:
        raise ValueError("Cannot build an archive without images")

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w', compression=zipfile.ZIP_DEFLATED) as archive:
        for sequence, image in enumerate(result.images, start=1):
            info = zipfile.ZipInfo(entry_name(sequence, image), date_time=ARCHIVE_TIMESTAMP)
            info.compress_type = zipfile.ZIP_DEFLATED
            archive.writestr(info, image.encoded_bytes)

    return buffer.getvalue()
