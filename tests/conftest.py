import io
import zipfile

import fitz
import pytest
from PIL import Image


def make_png(width=16, height=12, color=(10, 200, 30), mode="RGB"):
    img = Image.new(mode, (width, height), color)
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def make_jpeg(width=16, height=12, color=(200, 40, 40)):
    img = Image.new("RGB", (width, height), color)
    buffer = io.BytesIO()
    img.save(buffer, format="JPEG")
    return buffer.getvalue()


def make_zip(entries, compression=zipfile.ZIP_DEFLATED):
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=compression) as archive:
        for name, content in entries:
            archive.writestr(name, content)
    return buffer.getvalue()


def make_pdf(pages):
    """
    Build a PDF where ``pages`` lists, per page, the images to paint.

    Each image is a ``(name, stream)`` pair; a name seen again on the same
    page paints the already inserted image a second time.
    """
    doc = fitz.open()
    for images in pages:
        page = doc.new_page(width=400, height=400)
        xrefs = {}
        for index, (name, stream) in enumerate(images):
            rect = fitz.Rect(10 + 60 * index, 10, 60 + 60 * index, 60)
            if name in xrefs:
                page.insert_image(rect, xref=xrefs[name])
            else:
                xrefs[name] = page.insert_image(rect, stream=stream)
    data = doc.tobytes()
    doc.close()
    return data


def read_archive(data):
    with zipfile.ZipFile(io.BytesIO(data)) as archive:
        return [(name, archive.read(name)) for name in archive.namelist()]


@pytest.fixture
def png_bytes():
    return make_png()


@pytest.fixture
def docx_bytes(png_bytes):
    return make_zip([
        ("[Content_Types].xml", b"<Types/>"),
        ("word/document.xml", b"<w:document/>"),
        ("word/media/image1.png", png_bytes),
        ("word/media/image2.bin", b"\x00\x01\x02"),
    ])


@pytest.fixture
def progress_log():
    return []


def make_content_pdf(content, xobjects=None, text=None):
    """
    Build a one-page PDF from a raw content stream.

    ``xobjects`` maps resource names to ``(dictionary, stream)`` pairs of
    image XObjects the content stream can paint with ``Do``.
    """
    doc = fitz.open()
    page = doc.new_page(width=400, height=400)
    if text:
        page.insert_text((20, 350), text)

    for name, (dictionary, stream) in (xobjects or {}).items():
        xref = doc.get_new_xref()
        doc.update_object(xref, dictionary)
        doc.update_stream(xref, stream, new=True)
        kind, value = doc.xref_get_key(page.xref, "Resources")
        if kind == "xref":
            resources = int(value.split()[0])
            doc.xref_set_key(resources, f"XObject/{name}", f"{xref} 0 R")
        else:
            doc.xref_set_key(page.xref, f"Resources/XObject/{name}", f"{xref} 0 R")

    contents = doc.get_new_xref()
    doc.update_object(contents, "<<>>")
    doc.update_stream(contents, content, new=True)
    references = [f"{xref} 0 R" for xref in page.get_contents()] + [f"{contents} 0 R"]
    doc.xref_set_key(page.xref, "Contents", "[" + " ".join(references) + "]")

    data = doc.tobytes()
    doc.close()
    return data
