"""
Main document image extraction module.

``extract_document`` classifies a document, runs the matching extractor and
turns its result into one of the outcome objects of ``results``.
"""

import asyncio
import logging

from .archive import archive_name, build_archive
from .classifier import ContainerKind, classify
from .errors import ContainerOpenError
from .office import OfficeZipExtractor
from .pdf import PdfExtractor
from .results import UnsupportedFormat, NoImagesFound, Success, Failed

logger = logging.getLogger(__name__)

EXTRACTORS = {
    ContainerKind.PDF: PdfExtractor,
    ContainerKind.OFFICE_ZIP: OfficeZipExtractor,
}


def get_extractor(kind, progress=None):
    """
    Return the extractor for a container kind.

    Returns
    -------
    ContainerExtractor or None
        None for ``ContainerKind.UNSUPPORTED``.
    """
    extractor_class = EXTRACTORS.get(kind)
    if extractor_class is None:
        return None
    return extractor_class(progress=progress)


async def extract_document(data, filename, progress=None):
    """
    Extract every image of a document into a zip archive.

    Parameters
    ----------
    data : bytes
        Raw document content.
    filename : str
        Document name; its extension selects the extraction path.
    progress : callable, optional
        Receives human readable per-item notices.

    Returns
    -------
    UnsupportedFormat, NoImagesFound, Success or Failed
    """
    extractor = get_extractor(classify(filename), progress=progress)
    if extractor is None:
        logger.info("Unsupported file format: %s", filename)
        return UnsupportedFormat(filename)

    logger.info("Processing: %s", filename)
    try:
        result = await extractor.harvest(data)
    except ContainerOpenError as e:
        logger.error("Can't complete extraction of %s: %s", filename, e)
        return Failed(str(e))
    except Exception as e:
        logger.exception("Unexpected error while extracting %s", filename)
        return Failed(str(e))

    if result.count == 0:
        logger.info("No images found in %s", filename)
        return NoImagesFound(filename)

    return Success(
        archive_bytes=build_archive(result),
        image_count=result.count,
        archive_name=archive_name(filename),
    )


def extract_document_sync(data, filename, progress=None):
    """Run ``extract_document`` to completion from synchronous code."""
    return asyncio.run(extract_document(data, filename, progress=progress))
