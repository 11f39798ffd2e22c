"""Core image extraction utilities."""

from .classifier import ContainerKind, classify
from .extractor import extract_document, extract_document_sync
from .office import OfficeZipExtractor
from .pdf import PdfExtractor
from .raster import ResolvedRaster, reconstruct
from .results import (
    ExtractedImage, ExtractionResult,
    UnsupportedFormat, NoImagesFound, Success, Failed
)

__all__ = [
    "ContainerKind",
    "classify",
    "extract_document",
    "extract_document_sync",
    "OfficeZipExtractor",
    "PdfExtractor",
    "ResolvedRaster",
    "reconstruct",
    "ExtractedImage",
    "ExtractionResult",
    "UnsupportedFormat",
    "NoImagesFound",
    "Success",
    "Failed",
]
