"""Universal Extractor package.

Reads documents of several container formats as plain text and extracts
structured tokens (e-mail addresses, phone numbers, hashes, ...) from them.
"""

__version__ = "0.1.0"

# Re-export the public API for convenience
from .definitions import DEFINITIONS, ExtractionDefinition, get_definition
from .engine import extract, extract_async, extract_from_file, list_definitions
from .exceptions import (
    DocumentNotFoundError,
    MalformedContainerError,
    PatternCompilationError,
    UniversalExtractorError,
    UnsupportedFormatError,
)
from .formats import SUPPORTED_EXTENSIONS, SupportedFormat, detect_format
from .reader import DocumentReader, is_supported, read_as_text, read_as_text_async

__all__ = [
    "__version__",
    "DEFINITIONS",
    "SUPPORTED_EXTENSIONS",
    "DocumentNotFoundError",
    "DocumentReader",
    "ExtractionDefinition",
    "MalformedContainerError",
    "PatternCompilationError",
    "SupportedFormat",
    "UniversalExtractorError",
    "UnsupportedFormatError",
    "detect_format",
    "extract",
    "extract_async",
    "extract_from_file",
    "get_definition",
    "is_supported",
    "list_definitions",
    "read_as_text",
    "read_as_text_async",
]
