"""Base interfaces for document text extractors."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class ExtractionOptions:
    """Options to control text extraction.

    Attributes:
        encoding: Codec used for formats stored as raw character data
            (plain text, CSV, HTML, Markdown). RTF uses the code page it
            declares instead.
    """

    encoding: str = "utf-8-sig"


class DocumentExtractor(Protocol):
    """Protocol for document extractors.

    Implementations should be stateless and reusable.
    """

    def supports(self, path: Path) -> bool:
        """Return True if this extractor can handle the given file/path."""
        ...

    def extract_text(self, path: Path, options: ExtractionOptions) -> str:
        """Extract the textual content of the whole document as one string.

        An empty string is only returned for a document without text;
        unreadable containers raise instead.
        """
        ...
