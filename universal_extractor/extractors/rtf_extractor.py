"""Rich Text Format extractor."""

from __future__ import annotations

import codecs
import logging
import re
from pathlib import Path

from striprtf.striprtf import rtf_to_text

from ..exceptions import DocumentNotFoundError, MalformedContainerError
from ..formats import SupportedFormat, detect_format
from .base import DocumentExtractor, ExtractionOptions

logger = logging.getLogger(__name__)

RTF_SIGNATURE = "{\\rtf"
DEFAULT_CODEPAGE = "cp1252"

_ANSICPG = re.compile(rb"\\ansicpg(\d+)")


def _declared_codepage(raw: bytes) -> str:
    """Return the codec named by ``\\ansicpgN``, falling back to cp1252."""
    match = _ANSICPG.search(raw)
    if match:
        candidate = f"cp{int(match.group(1))}"
        try:
            codecs.lookup(candidate)
            return candidate
        except LookupError:
            logger.warning(
                "Unknown RTF code page %s, using %s", candidate, DEFAULT_CODEPAGE
            )
    return DEFAULT_CODEPAGE


class RtfExtractor(DocumentExtractor):
    """Strip RTF control words and groups, keeping visible text and breaks.

    Raw 8-bit bytes and ``\\'xx`` escapes are both decoded with the code page
    the document declares, so the configured text encoding does not apply.
    """

    def supports(self, path: Path) -> bool:
        return detect_format(path) is SupportedFormat.RICH_TEXT

    def extract_text(self, path: Path, options: ExtractionOptions) -> str:
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise DocumentNotFoundError(f"Cannot read {path}: {e}") from e

        if not raw.strip():
            return ""

        codepage = _declared_codepage(raw)
        content = raw.decode(codepage, errors="replace")

        if not content.lstrip().startswith(RTF_SIGNATURE):
            raise MalformedContainerError(f"Not a valid RTF document: {path}")

        try:
            text = rtf_to_text(content, encoding=codepage, errors="replace")
        except (ValueError, LookupError) as e:
            raise MalformedContainerError(f"Failed to read RTF {path}: {e}") from e

        logger.debug(
            "Extracted %s characters from RTF %s (%s)", len(text), path, codepage
        )
        return text
