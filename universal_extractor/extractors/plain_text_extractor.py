"""Plain text extractor (.txt, .csv, .md, .markdown, .html, .htm)."""

from __future__ import annotations

import logging
from pathlib import Path

from ..exceptions import DocumentNotFoundError
from ..formats import SupportedFormat, detect_format
from .base import DocumentExtractor, ExtractionOptions

logger = logging.getLogger(__name__)


class PlainTextExtractor(DocumentExtractor):
    """Read character data as-is; markup (HTML, Markdown) is not parsed."""

    def supports(self, path: Path) -> bool:
        return detect_format(path) is SupportedFormat.PLAIN_TEXT

    def extract_text(self, path: Path, options: ExtractionOptions) -> str:
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise DocumentNotFoundError(f"Cannot read {path}: {e}") from e

        text = raw.decode(options.encoding, errors="replace")
        logger.debug("Read %s characters from %s", len(text), path)
        return text
