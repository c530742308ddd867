"""Catalog of named patterns used to pull tokens out of document text.

The catalog is built once at import time and never mutated. Each pattern is
compiled when its definition is constructed, so every caller shares the same
compiled regex and no lazy initialisation happens under concurrent use.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Tuple

from .exceptions import DefinitionNotFoundError, PatternCompilationError

DEFAULT_FLAGS = re.IGNORECASE | re.MULTILINE


@dataclass(frozen=True)
class ExtractionDefinition:
    """An immutable named pattern.

    Attributes:
        name: Display label, also used to build output filenames.
        pattern: Regular expression source.
        flags: ``re`` flags; case-insensitive and multiline by default.
        description: Optional human readable description.
        regex: The compiled pattern (derived, not passed in).
    """

    name: str
    pattern: str
    flags: int = DEFAULT_FLAGS
    description: str = ""
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re.compile(self.pattern, self.flags)
        except re.error as e:
            raise PatternCompilationError(
                f"Invalid pattern for '{self.name}': {e}"
            ) from e
        object.__setattr__(self, "regex", compiled)

    @property
    def slug(self) -> str:
        """Name with spaces replaced by underscores."""
        return self.name.replace(" ", "_")

    def find_matches(self, text: str) -> List[str]:
        """Return every match in ``text``, trimmed, in order of appearance.

        Whole matches are used even when the pattern has capture groups.
        """
        if not text or not text.strip():
            return []

        results: List[str] = []
        for match in self.regex.finditer(text):
            value = match.group(0)
            if value.strip():
                results.append(value.strip())
        return results

    def __str__(self) -> str:
        return self.name


DEFINITIONS: Tuple[ExtractionDefinition, ...] = (
    ExtractionDefinition(
        "E-mail address",
        r"\b[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}\b",
        description="Addresses of the form local-part@domain.tld",
    ),
    ExtractionDefinition(
        "Phone number",
        r"\b(?:\+?\d{1,3}[\s.-]?)?(?:\(?\d{2,4}\)?[\s.-]?){2,4}\d{2,4}\b",
        re.MULTILINE,
        description="Digit groups with optional country code and separators",
    ),
    ExtractionDefinition(
        "Social network handles",
        r"(?<!\S)@[A-Za-z0-9._]{3,32}\b",
        re.MULTILINE,
        description="@handles that start a word",
    ),
    ExtractionDefinition(
        "Dates",
        r"\b(?:\d{4}-\d{2}-\d{2}|\d{2}[\/.-]\d{2}[\/.-]\d{4})\b",
        description="ISO dates (YYYY-MM-DD) and DD/MM/YYYY style dates",
    ),
    ExtractionDefinition(
        "Credit card number",
        r"\b(?:\d[ -]?){13,16}\b",
        re.MULTILINE,
        description="Runs of 13 to 16 digits, optionally space or dash separated",
    ),
    ExtractionDefinition(
        "IBAN",
        r"\b[A-Z]{2}\d{2}[A-Z0-9]{8,30}\b",
        description="International bank account numbers",
    ),
    ExtractionDefinition(
        "BIC/SWIFT",
        r"\b[A-Z]{4}[A-Z]{2}[A-Z0-9]{2}([A-Z0-9]{3})?\b",
        description="Bank identifier codes with 8 or 11 characters",
    ),
    ExtractionDefinition(
        "IPv4 addresses",
        r"\b(?:(?:25[0-5]|2[0-4]\d|[01]?\d\d?)\.){3}"
        r"(?:25[0-5]|2[0-4]\d|[01]?\d\d?)\b",
        re.MULTILINE,
        description="Dotted-quad addresses with octets from 0 to 255",
    ),
    ExtractionDefinition(
        "IPv6",
        r"\b(?:[A-F0-9]{1,4}:){7}[A-F0-9]{1,4}\b"
        r"|\b(?:[A-F0-9]{1,4}:){1,7}:"
        r"|\b:(?:[A-F0-9]{1,4}:){1,7}[A-F0-9]{1,4}\b",
        description="Full and '::' compressed IPv6 addresses",
    ),
    ExtractionDefinition(
        "MD5",
        r"\b[A-F0-9]{32}\b",
        description="32 character hexadecimal digests",
    ),
    ExtractionDefinition(
        "SHA1",
        r"\b[A-F0-9]{40}\b",
        description="40 character hexadecimal digests",
    ),
    ExtractionDefinition(
        "SHA256",
        r"\b[A-F0-9]{64}\b",
        description="64 character hexadecimal digests",
    ),
)


def get_definition(name: str) -> ExtractionDefinition:
    """Look up a catalog entry by display name or slug, ignoring case."""
    wanted = name.strip().lower()
    for definition in DEFINITIONS:
        if wanted in (definition.name.lower(), definition.slug.lower()):
            return definition
    raise DefinitionNotFoundError(f"Unknown extraction definition: '{name}'")
