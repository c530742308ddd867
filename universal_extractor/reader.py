"""Format reader: turn a supported document into one normalized string.

Formats are dispatched through :class:`SupportedFormat`; each format has
exactly one extractor. The reader never falls back to empty text on error.
"""

import asyncio
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from .config import Config
from .exceptions import DocumentNotFoundError, UnsupportedFormatError
from .extractors import (
    DocumentExtractor,
    ExtractionOptions,
    OdtExtractor,
    PDFExtractor,
    PlainTextExtractor,
    RtfExtractor,
    WordExtractor,
)
from .formats import SupportedFormat, detect_format

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class DocumentReader:
    """Read documents of any supported format as plain text."""

    def __init__(self, config: Optional[Config] = None):
        """Initialize the reader.

        Args:
            config: Configuration object; defaults to ``Config()``
        """
        self.config = config or Config()
        self.extractors: Dict[SupportedFormat, DocumentExtractor] = {
            SupportedFormat.PLAIN_TEXT: PlainTextExtractor(),
            SupportedFormat.RICH_TEXT: RtfExtractor(),
            SupportedFormat.PDF: PDFExtractor(),
            SupportedFormat.OOXML_PACKAGE: WordExtractor(),
            SupportedFormat.OPENDOCUMENT_PACKAGE: OdtExtractor(),
        }

    def is_supported(self, path: PathLike) -> bool:
        """Return True if the file extension belongs to a readable format."""
        return detect_format(path) in self.extractors

    def _select_extractor(self, path: Path) -> DocumentExtractor:
        fmt = detect_format(path)
        extractor = self.extractors.get(fmt)
        if extractor is None:
            suffix = path.suffix.lower() or "(none)"
            raise UnsupportedFormatError(
                f"The extension \"{suffix}\" is not supported."
            )
        return extractor

    def read_as_text(self, path: PathLike) -> str:
        """Extract the text content of a document.

        Args:
            path: Path to the input document

        Returns:
            The normalized text; empty only for documents without text

        Raises:
            UnsupportedFormatError: If the extension is not recognized
            DocumentNotFoundError: If the path is not a readable file
            MalformedContainerError: If the container cannot be parsed
        """
        path = Path(path)
        extractor = self._select_extractor(path)

        if not path.is_file():
            raise DocumentNotFoundError(f"File not found: {path}")

        options = ExtractionOptions(encoding=self.config.encoding)
        text = extractor.extract_text(path, options)
        logger.info("Read %s characters from %s", len(text), path)
        return text

    async def read_as_text_async(self, path: PathLike) -> str:
        """Run :meth:`read_as_text` in a worker thread."""
        return await asyncio.to_thread(self.read_as_text, path)


_default_reader = DocumentReader()


def is_supported(path: PathLike) -> bool:
    """Module-level shortcut for :meth:`DocumentReader.is_supported`."""
    return _default_reader.is_supported(path)


def read_as_text(path: PathLike) -> str:
    """Module-level shortcut for :meth:`DocumentReader.read_as_text`."""
    return _default_reader.read_as_text(path)


async def read_as_text_async(path: PathLike) -> str:
    """Module-level shortcut for :meth:`DocumentReader.read_as_text_async`."""
    return await _default_reader.read_as_text_async(path)
