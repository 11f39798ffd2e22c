"""Constants for document image extraction."""

# Raster file extensions harvested from office zip containers
RASTER_EXTENSIONS = frozenset({
    'png', 'jpg', 'jpeg', 'gif', 'bmp', 'emf', 'wmf', 'svg', 'tiff'
})

# Container extensions
PDF_EXTENSIONS = frozenset({'pdf'})
OFFICE_EXTENSIONS = frozenset({'docx', 'pptx', 'xlsx'})

# Content stream operator codes (pdf.js numbering)
OPS_PAINT_JPEG_XOBJECT = 82
OPS_PAINT_IMAGE_MASK_XOBJECT = 83
OPS_PAINT_IMAGE_XOBJECT = 85
OPS_PAINT_INLINE_IMAGE_XOBJECT = 86

IMAGE_PAINT_OPS = frozenset({
    OPS_PAINT_IMAGE_XOBJECT,
    OPS_PAINT_JPEG_XOBJECT,
    OPS_PAINT_INLINE_IMAGE_XOBJECT,
})

# Channel counts of packed pixel buffers
RGB_CHANNELS = 3
RGBA_CHANNELS = 4
OPAQUE_ALPHA = 255

# Default extraction output format
DEFAULT_IMAGE_FORMAT = 'PNG'
DEFAULT_IMAGE_EXTENSION = 'png'
PNG_COMPRESS_LEVEL = 6

# Output archive naming
ARCHIVE_NAME_TEMPLATE = 'extracted_images_{base_name}.zip'
ARCHIVE_ENTRY_TEMPLATE = '{sequence:03d}_{stem}.{extension}'
ARCHIVE_TIMESTAMP = (1980, 1, 1, 0, 0, 0)

# JPEG stream filter
FILTER_DCT = 'DCTDecode'
