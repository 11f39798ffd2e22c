"""Route a document to the PDF or office extraction path by its extension."""

import enum
import os

from .constants import PDF_EXTENSIONS, OFFICE_EXTENSIONS


class ContainerKind(enum.Enum):
    PDF = 'pdf'
    OFFICE_ZIP = 'office_zip'
    UNSUPPORTED = 'unsupported'


def file_extension(filename):
    """Return the lowercased last extension of ``filename`` without the dot."""
    return os.path.splitext(filename)[1][1:].lower()


def classify(filename):
    """
    Classify a document by its filename.

    Parameters
    ----------
    filename : str
        Document name, with or without directory components.

    Returns
    -------
    ContainerKind
        PDF, OFFICE_ZIP, or UNSUPPORTED for anything else.
    """
    ext = file_extension(filename)
    if ext in PDF_EXTENSIONS:
        return ContainerKind.PDF
    if ext in OFFICE_EXTENSIONS:
        return ContainerKind.OFFICE_ZIP
    return ContainerKind.UNSUPPORTED
