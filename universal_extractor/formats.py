"""Document format detection based on the file extension."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Dict, FrozenSet, Union

logger = logging.getLogger(__name__)


class SupportedFormat(str, Enum):
    """Container formats the reader knows how to turn into text."""

    PLAIN_TEXT = "plain_text"
    RICH_TEXT = "rich_text"
    PDF = "pdf"
    OOXML_PACKAGE = "ooxml_package"
    OPENDOCUMENT_PACKAGE = "opendocument_package"
    UNSUPPORTED = "unsupported"


EXTENSION_MAP: Dict[str, SupportedFormat] = {
    ".txt": SupportedFormat.PLAIN_TEXT,
    ".csv": SupportedFormat.PLAIN_TEXT,
    ".md": SupportedFormat.PLAIN_TEXT,
    ".markdown": SupportedFormat.PLAIN_TEXT,
    ".html": SupportedFormat.PLAIN_TEXT,
    ".htm": SupportedFormat.PLAIN_TEXT,
    ".rtf": SupportedFormat.RICH_TEXT,
    ".pdf": SupportedFormat.PDF,
    ".docx": SupportedFormat.OOXML_PACKAGE,
    ".docm": SupportedFormat.OOXML_PACKAGE,
    ".dotx": SupportedFormat.OOXML_PACKAGE,
    ".dotm": SupportedFormat.OOXML_PACKAGE,
    ".odt": SupportedFormat.OPENDOCUMENT_PACKAGE,
}

SUPPORTED_EXTENSIONS: FrozenSet[str] = frozenset(EXTENSION_MAP)


def detect_format(path: Union[str, Path]) -> SupportedFormat:
    """Return the format for ``path`` from its (case-insensitive) suffix.

    The extension is everything from the last dot of the file name, so a
    bare ".txt" counts as a text file. Names without a dot, or ending in
    one, and unknown extensions are ``SupportedFormat.UNSUPPORTED``.
    """
    name = Path(path).name
    suffix = ""
    if "." in name and not name.endswith("."):
        suffix = name[name.rindex(".") :].lower()
    detected = EXTENSION_MAP.get(suffix, SupportedFormat.UNSUPPORTED)
    logger.debug("Detected format %s for %s", detected.value, path)
    return detected
