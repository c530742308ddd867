"""Word processing package extractor (.docx, .docm, .dotx, .dotm)."""

from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import List

from docx.opc.exceptions import PackageNotFoundError
from docx.opc.package import OpcPackage
from docx.oxml import parse_xml
from docx.oxml.ns import qn
from lxml import etree

from ..exceptions import DocumentNotFoundError, MalformedContainerError
from ..formats import SupportedFormat, detect_format
from .base import DocumentExtractor, ExtractionOptions

logger = logging.getLogger(__name__)


class WordExtractor(DocumentExtractor):
    """Extract text runs from OOXML word processing packages.

    The package is opened through python-docx's OPC layer rather than
    ``docx.Document`` so that macro-enabled documents and templates, whose
    main part carries a different content type, are read the same way.
    Every ``w:t`` element below ``w:body`` contributes one line.
    """

    def supports(self, path: Path) -> bool:
        return detect_format(path) is SupportedFormat.OOXML_PACKAGE

    def _load_main_document(self, path: Path) -> etree._Element:
        try:
            package = OpcPackage.open(str(path))
        except PackageNotFoundError as e:
            if not path.is_file():
                raise DocumentNotFoundError(f"Cannot read {path}: {e}") from e
            raise MalformedContainerError(
                f"Not a word processing package: {path}"
            ) from e
        except (zipfile.BadZipFile, etree.XMLSyntaxError, KeyError) as e:
            raise MalformedContainerError(f"Failed to open {path}: {e}") from e

        try:
            main_part = package.main_document_part
        except KeyError as e:
            raise MalformedContainerError(
                f"Main document part not found inside {path}"
            ) from e

        try:
            return parse_xml(main_part.blob)
        except etree.XMLSyntaxError as e:
            raise MalformedContainerError(
                f"Main document part of {path} is not valid XML: {e}"
            ) from e

    def extract_text(self, path: Path, options: ExtractionOptions) -> str:
        document = self._load_main_document(path)
        body = document.find(qn("w:body"))
        if body is None:
            logger.debug("No document body in %s", path)
            return ""

        texts: List[str] = [node.text or "" for node in body.iter(qn("w:t"))]
        logger.debug("Extracted %s text runs from %s", len(texts), path)
        return "\n".join(texts)
