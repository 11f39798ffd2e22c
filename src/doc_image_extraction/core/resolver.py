"""
PDF page object store and image object resolution.

Requires: PyMuPDF >= 1.24
  - ``Page.get_image_info(hashes=True, xrefs=True)`` reports every image paint
    of a page, including inline images, in content stream order.
"""

import logging

import fitz

from .constants import (
    OPS_PAINT_IMAGE_XOBJECT, OPS_PAINT_JPEG_XOBJECT,
    OPS_PAINT_INLINE_IMAGE_XOBJECT, OPS_PAINT_IMAGE_MASK_XOBJECT,
    RGB_CHANNELS, FILTER_DCT
)
from .errors import ContainerOpenError, ResolutionError, UnresolvableRasterError
from .raster import ResolvedRaster

logger = logging.getLogger(__name__)


def open_pdf(data):
    """
    Open a PDF document from memory.

    Parameters
    ----------
    data : bytes
        Raw PDF file content.

    Returns
    -------
    fitz.Document
        Opened document. The caller closes it.

    Raises
    ------
    ContainerOpenError
        If the document cannot be parsed or is password protected.
    """
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except Exception as e:
        raise ContainerOpenError(f"cannot open PDF: {e}") from e

    if doc.needs_pass:
        doc.close()
        raise ContainerOpenError("PDF is encrypted")

    return doc


class PageObjects:
    """
    Image objects reachable from one PDF page.

    Image XObjects are addressed by xref number, inline images by the
    content digest MuPDF computes for them.
    """

    def __init__(self, doc, page):
        self.doc = doc
        self.page = page
        self._smasks = {img[0]: img[1] for img in page.get_images(full=True)}
        self._inline = {}
        self._image_blocks = None

    def register_inline(self, digest, number, bbox):
        """Remember where the page's ``dict`` extraction reports an inline image."""
        self._inline.setdefault(digest, (number, tuple(bbox)))

    def get(self, key):
        """
        Load the raster behind ``key``.

        Raises
        ------
        ResolutionError
            For unknown keys and for any failure of the underlying library.
        """
        if key in self._inline:
            loader = self._load_inline
        elif isinstance(key, int) and key > 0:
            loader = self._load_xobject
        else:
            raise ResolutionError(key, "unknown image object")

        try:
            return loader(key)
        except ResolutionError:
            raise
        except Exception as e:
            raise ResolutionError(key, str(e)) from e

    def _load_xobject(self, xref):
        pix = fitz.Pixmap(self.doc, xref)

        if pix.colorspace is None:
            raise ResolutionError(xref, "image has no colorspace")

        # Gray, CMYK, ICC and indexed images end up as RGB
        if pix.colorspace.n != RGB_CHANNELS:
            pix = fitz.Pixmap(fitz.csRGB, pix)

        smask = self._smasks.get(xref, 0)
        if smask and not pix.alpha:
            try:
                mask = fitz.Pixmap(self.doc, smask)
                # Straight alpha keeps the decoded colour values
                with_alpha = fitz.Pixmap(pix, 1)
                with_alpha.set_alpha(mask.samples, premultiply=False)
                pix = with_alpha
            except Exception as e:
                logger.debug("Soft mask %s of image %s not applied: %s", smask, xref, e)

        return ResolvedRaster(pix.width, pix.height, samples=pix.samples, key=xref)

    def _load_inline(self, digest):
        number, bbox = self._inline[digest]
        block = self._find_image_block(number, bbox)
        if block is None or not block.get("image"):
            raise ResolutionError(digest, "inline image not found on page")
        return ResolvedRaster(block["width"], block["height"], bitmap=block["image"], key=digest)

    def _find_image_block(self, number, bbox):
        if self._image_blocks is None:
            contents = self.page.get_text("dict")
            self._image_blocks = [b for b in contents["blocks"] if b["type"] == 1]

        for block in self._image_blocks:
            if block["number"] == number:
                return block

        for block in self._image_blocks:
            if all(abs(a - b) < 1.0 for a, b in zip(block["bbox"], bbox)):
                return block

        return None


def _paint_operator(doc, xref):
    filters = doc.xref_get_key(xref, "Filter")[1] or ""
    if FILTER_DCT in filters:
        return OPS_PAINT_JPEG_XOBJECT
    return OPS_PAINT_IMAGE_XOBJECT


def read_page_operations(doc, page):
    """
    Build the image operation list of a page.

    Parameters
    ----------
    doc : fitz.Document
        Open document.
    page : fitz.Page
        Page of ``doc``.

    Returns
    -------
    tuple
        ``(operations, page_objects)`` where ``operations`` is a list of
        ``(operator_code, [key])`` pairs in paint order and ``page_objects``
        is the PageObjects store the keys resolve against.
    """
    objects = PageObjects(doc, page)
    operations = []

    for info in page.get_image_info(hashes=True, xrefs=True):
        xref = info.get("xref", 0)

        if not info.get("colorspace"):
            operations.append((OPS_PAINT_IMAGE_MASK_XOBJECT, [xref or info.get("digest")]))
        elif xref:
            operations.append((_paint_operator(doc, xref), [xref]))
        else:
            digest = info["digest"]
            objects.register_inline(digest, info["number"], info["bbox"])
            operations.append((OPS_PAINT_INLINE_IMAGE_XOBJECT, [digest]))

    return operations, objects


async def resolve(page_objects, key):
    """
    Resolve an image object reference to its raster.

    Parameters
    ----------
    page_objects : PageObjects
        Object store of the page the key was painted on.
    key : object
        Image object reference.

    Returns
    -------
    ResolvedRaster
        Owned pixel data of the image.

    Raises
    ------
    ResolutionError
        If the object cannot be loaded or exposes no usable pixel data.
    """
    raster = page_objects.get(key)

    if raster is None or not raster.is_usable():
        raise ResolutionError(key, "object exposes no pixel data")

    if not raster.bitmap and raster.channels() is None:
        raise UnresolvableRasterError(
            key, f"unsupported pixel layout ({len(raster.samples)} bytes "
                 f"for {raster.width}x{raster.height})"
        )

    return raster
