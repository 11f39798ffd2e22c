"""Common behaviour of the PDF and office container extractors."""

import logging

logger = logging.getLogger(__name__)


class ContainerExtractor:
    """
    Extracts the images of one container format.

    Subclasses implement ``harvest``. Progress notices go to the module logger
    and, when given, to the ``progress`` callable.
    """

    kind = None

    def __init__(self, progress=None):
        """
        Parameters
        ----------
        progress : callable, optional
            Receives one human readable notice per processed item.
        """
        self.progress = progress

    async def harvest(self, data):
        """
        Extract every image of a container.

        Parameters
        ----------
        data : bytes
            Raw container content.

        Returns
        -------
        ExtractionResult
            Images in document order.

        Raises
        ------
        ContainerOpenError
            If the container cannot be opened.
        """
        raise NotImplementedError

    def notify(self, message):
        logger.info(message)
        if self.progress is not None:
            self.progress(message)

    def notify_skip(self, message, error=None):
        logger.warning(message)
        if error is not None:
            logger.debug("%s: %s", message, error)
        if self.progress is not None:
            self.progress(message)
