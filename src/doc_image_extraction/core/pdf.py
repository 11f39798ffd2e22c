"""
PDF image extraction.

Pages are processed one after another. On each page the painted image keys
are collected from the operation list, resolved one at a time and encoded as
PNG. A failing image is reported and skipped; only a document that cannot be
opened fails the whole extraction.
"""

import asyncio

from .base import ContainerExtractor
from .classifier import ContainerKind
from .constants import DEFAULT_IMAGE_EXTENSION
from .errors import ResolutionError
from .raster import reconstruct
from .resolver import open_pdf, read_page_operations, resolve
from .results import ExtractedImage, ExtractionResult
from .scanner import scan_page_operations


class PdfExtractor(ContainerExtractor):
    """Extracts the raster images painted on the pages of a PDF."""

    kind = ContainerKind.PDF

    def __init__(self, progress=None, resolver=resolve):
        """
        Parameters
        ----------
        progress : callable, optional
            Receives one human readable notice per processed item.
        resolver : coroutine function, optional
            ``resolver(page_objects, key)`` returning a ResolvedRaster or
            raising ResolutionError.
        """
        super().__init__(progress)
        self.resolver = resolver
        self.img_counter = 0

    async def harvest(self, data):
        self.img_counter = 0
        result = ExtractionResult()

        doc = open_pdf(data)
        try:
            for page_number in range(1, doc.page_count + 1):
                try:
                    page = doc.load_page(page_number - 1)
                    operations, page_objects = read_page_operations(doc, page)
                except Exception as e:
                    self.notify_skip(f"page {page_number}: skipped unreadable page", e)
                    continue
                result.extend(await self.extract_page(page_number, operations, page_objects))
                await asyncio.sleep(0)
        finally:
            doc.close()

        return result

    async def extract_page(self, page_number, operations, page_objects):
        """
        Extract the images painted by one page's operation list.

        Parameters
        ----------
        page_number : int
            1-based page number, used for labels and notices.
        operations : list
            ``(operator_code, args)`` pairs of the page.
        page_objects : object
            Object store handed to the resolver.

        Returns
        -------
        list
            ExtractedImage objects in first-occurrence order.
        """
        images = []
        for key in scan_page_operations(operations):
            try:
                raster = await self.resolver(page_objects, key)
                encoded = reconstruct(raster)
            except ResolutionError as e:
                self.notify_skip(f"page {page_number}: skipped unreadable image", e)
                continue

            self.img_counter += 1
            images.append(ExtractedImage(
                source_label=f"page{page_number}_img{len(images) + 1}",
                encoded_bytes=encoded,
                extension=DEFAULT_IMAGE_EXTENSION,
            ))
            self.notify(f"page {page_number}: extracted image {self.img_counter}")

        return images
