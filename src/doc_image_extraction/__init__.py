"""
Document Image Extraction Package

Extracts embedded raster images from PDF files and OOXML office documents
(docx, pptx, xlsx) and packages them into a single zip archive.
"""

__version__ = "1.0.0"

from .core.extractor import extract_document, extract_document_sync
from .core.pdf import PdfExtractor
from .core.office import OfficeZipExtractor

__all__ = [
    "extract_document",
    "extract_document_sync",
    "PdfExtractor",
    "OfficeZipExtractor",
]
