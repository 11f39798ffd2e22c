"""
Service layer for document image extraction.

Provides a file-based API for integration with Docker and other services.
"""

import logging
import os

from doc_image_extraction.core import extract_document_sync
from doc_image_extraction.core.results import Success, Failed, UnsupportedFormat

logger = logging.getLogger(__name__)


class ImageExtractorService:
    """
    Service wrapper for document image extraction.

    Reads documents from disk and writes the resulting archive next to the
    other outputs.
    """

    def __init__(self, progress=None):
        """
        Initialize the service.

        Parameters
        ----------
        progress : callable, optional
            Receives the per-item notices of every extraction.
        """
        self.progress = progress

    def extract_images(self, document_path, output_folder):
        """
        Extract images from a single document.

        Parameters
        ----------
        document_path : str
            Path to the PDF or office document.
        output_folder : str
            Output folder where the archive will be saved.

        Returns
        -------
        UnsupportedFormat, NoImagesFound, Success or Failed
            Outcome of the extraction. On success the archive is written to
            ``output_folder`` under ``outcome.archive_name``.

        Raises
        ------
        IOError
            If the document is not found or the output folder is not accessible.
        """
        if not os.path.isfile(document_path):
            raise IOError(f"Document not found: {document_path}")

        if not os.path.isdir(output_folder):
            raise IOError(f"Output folder not found: {output_folder}")

        with open(document_path, 'rb') as fh:
            data = fh.read()

        outcome = extract_document_sync(data, os.path.basename(document_path), progress=self.progress)

        if isinstance(outcome, Success):
            archive_path = os.path.join(output_folder, outcome.archive_name)
            with open(archive_path, 'wb') as fh:
                fh.write(outcome.archive_bytes)
            logger.info("Wrote %d images to %s", outcome.image_count, archive_path)

        return outcome

    def extract_images_batch(self, document_list, output_folder):
        """
        Extract images from multiple documents.

        Parameters
        ----------
        document_list : list
            List of document paths.
        output_folder : str
            Output folder where the archives will be saved.

        Returns
        -------
        dict
            Dictionary mapping document paths to their outcomes. Documents
            that cannot be read map to a Failed outcome.
        """
        results = {}

        for document_path in document_list:
            try:
                results[document_path] = self.extract_images(document_path, output_folder)
            except IOError as e:
                logger.error("Error processing %s: %s", document_path, e)
                results[document_path] = Failed(str(e))

        return results

    @staticmethod
    def is_failure(outcome):
        """Check if an outcome should be reported as an error."""
        return isinstance(outcome, (Failed, UnsupportedFormat))
