"""OpenDocument text extractor (.odt)."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import List

from lxml import etree

from ..exceptions import DocumentNotFoundError, MalformedContainerError
from ..formats import SupportedFormat, detect_format
from .base import DocumentExtractor, ExtractionOptions

logger = logging.getLogger(__name__)

CONTENT_ENTRY = "content.xml"


class OdtExtractor(DocumentExtractor):
    """Read ``content.xml`` and emit each non-blank text node on its own line."""

    def supports(self, path: Path) -> bool:
        return detect_format(path) is SupportedFormat.OPENDOCUMENT_PACKAGE

    def _read_content(self, path: Path) -> bytes:
        try:
            with zipfile.ZipFile(path) as archive:
                return archive.read(CONTENT_ENTRY)
        except KeyError as e:
            raise MalformedContainerError(
                f"{CONTENT_ENTRY} not found inside ODT archive: {path}"
            ) from e
        except zipfile.BadZipFile as e:
            raise MalformedContainerError(f"Failed to open ODT {path}: {e}") from e
        except OSError as e:
            raise DocumentNotFoundError(f"Cannot read {path}: {e}") from e

    def extract_text(self, path: Path, options: ExtractionOptions) -> str:
        content = self._read_content(path)

        parser = etree.XMLParser(resolve_entities=False, no_network=True)
        try:
            root = etree.fromstring(content, parser=parser)
        except etree.XMLSyntaxError as e:
            raise MalformedContainerError(
                f"{CONTENT_ENTRY} in {path} is not valid XML: {e}"
            ) from e

        lines: List[str] = []
        for value in root.itertext():
            if value.strip():
                lines.append(value.strip() + "\n")

        logger.debug("Extracted %s text nodes from %s", len(lines), path)
        return "".join(lines)
