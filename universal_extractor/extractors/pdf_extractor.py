"""PDF text extractor implementation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from ..exceptions import DocumentNotFoundError, MalformedContainerError
from ..formats import SupportedFormat, detect_format
from .base import DocumentExtractor, ExtractionOptions

logger = logging.getLogger(__name__)


class PDFExtractor(DocumentExtractor):
    """Extract the visible text of every page, in page order."""

    def supports(self, path: Path) -> bool:
        return detect_format(path) is SupportedFormat.PDF

    def extract_text(self, path: Path, options: ExtractionOptions) -> str:
        """Concatenate page texts, each page terminated by a line break."""
        try:
            reader = PdfReader(str(path))
            total_pages = len(reader.pages)

            chunks: List[str] = []
            for page_num in range(total_pages):
                text = reader.pages[page_num].extract_text() or ""
                if not text.strip():
                    logger.warning("Page %s appears to be empty", page_num + 1)
                else:
                    logger.debug(
                        "Extracted page %s: %s characters", page_num + 1, len(text)
                    )
                chunks.append(text + "\n")
        except OSError as e:
            raise DocumentNotFoundError(f"Cannot read {path}: {e}") from e
        except (PdfReadError, ValueError, KeyError, TypeError) as e:
            raise MalformedContainerError(f"Failed to read PDF {path}: {e}") from e

        logger.debug("Aggregated %s pages from %s", total_pages, path)
        return "".join(chunks)
