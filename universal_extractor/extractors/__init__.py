"""Extractor interfaces and implementations for different document types."""

from .base import DocumentExtractor, ExtractionOptions
from .docx_extractor import WordExtractor
from .odt_extractor import OdtExtractor
from .pdf_extractor import PDFExtractor
from .plain_text_extractor import PlainTextExtractor
from .rtf_extractor import RtfExtractor

__all__ = [
    "DocumentExtractor",
    "ExtractionOptions",
    "OdtExtractor",
    "PDFExtractor",
    "PlainTextExtractor",
    "RtfExtractor",
    "WordExtractor",
]
