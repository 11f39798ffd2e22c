"""
Result types shared by every extraction path.

An extraction call produces an ``ExtractionResult`` which is turned into one of
the outcome objects below by ``extract_document``.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ExtractedImage:
    """An encoded image ready to be stored in the output archive."""

    source_label: str
    encoded_bytes: bytes
    extension: str = 'png'


@dataclass
class ExtractionResult:
    """Ordered images found in one document."""

    images: list = field(default_factory=list)

    @property
    def count(self):
        return len(self.images)

    def add(self, image):
        self.images.append(image)

    def extend(self, images):
        self.images.extend(images)


@dataclass(frozen=True)
class UnsupportedFormat:
    filename: str

    @property
    def message(self):
        return f"Unsupported file format: {self.filename}"


@dataclass(frozen=True)
class NoImagesFound:
    filename: str

    @property
    def message(self):
        return f"No images found in {self.filename}"


@dataclass(frozen=True)
class Success:
    archive_bytes: bytes
    image_count: int
    archive_name: str

    @property
    def message(self):
        return f"Successfully extracted {self.image_count} images"


@dataclass(frozen=True)
class Failed:
    reason: str

    @property
    def message(self):
        return f"Error during extraction: {self.reason}"
