import pytest

from doc_image_extraction.core.classifier import ContainerKind, classify, file_extension


@pytest.mark.parametrize("filename, kind", [
    ("report.pdf", ContainerKind.PDF),
    ("REPORT.PDF", ContainerKind.PDF),
    ("/data/in/thesis.final.pdf", ContainerKind.PDF),
    ("letter.docx", ContainerKind.OFFICE_ZIP),
    ("slides.pptx", ContainerKind.OFFICE_ZIP),
    ("budget.XLSX", ContainerKind.OFFICE_ZIP),
    ("legacy.doc", ContainerKind.UNSUPPORTED),
    ("archive.zip", ContainerKind.UNSUPPORTED),
    ("README", ContainerKind.UNSUPPORTED),
    ("pdf", ContainerKind.UNSUPPORTED),
])
def test_classify(filename, kind):
    assert classify(filename) is kind


def test_file_extension_uses_last_suffix():
    assert file_extension("a/b/photo.backup.JPEG") == "jpeg"
    assert file_extension("noext") == ""
