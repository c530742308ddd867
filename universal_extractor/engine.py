"""Pattern extraction engine.

Runs one catalog definition over normalized document text and returns a
canonical result: matches trimmed, deduplicated and sorted without regard to
case. Two texts holding the same tokens (ignoring case and position) give
identical results.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Set, Tuple, Union

from .definitions import DEFINITIONS, ExtractionDefinition
from .reader import DocumentReader

logger = logging.getLogger(__name__)


def list_definitions() -> Tuple[ExtractionDefinition, ...]:
    """Return the fixed catalog in declaration order."""
    return DEFINITIONS


def ignore_case_key(value: str) -> str:
    """Sort/compare key that upper-cases one character at a time.

    Characters whose upper case form is longer than one character (such as
    the German sharp s) are kept unchanged.
    """
    return "".join(
        upper if len(upper) == 1 else char
        for char, upper in ((char, char.upper()) for char in value)
    )


def dedupe_and_sort(values: Iterable[str]) -> List[str]:
    """Sort case-insensitively, then drop case-insensitive duplicates.

    The sort is stable, so of several case variants the one seen first wins.
    """
    seen: Set[str] = set()
    result: List[str] = []
    for value in sorted(values, key=ignore_case_key):
        key = ignore_case_key(value)
        if key in seen:
            continue
        seen.add(key)
        result.append(value)
    return result


def extract(definition: ExtractionDefinition, text: str) -> List[str]:
    """Apply ``definition`` to ``text`` and return the canonical result."""
    if not text or not text.strip():
        return []

    matches = definition.find_matches(text)
    result = dedupe_and_sort(matches)
    logger.debug(
        "%s: %s matches, %s unique", definition.name, len(matches), len(result)
    )
    return result


async def extract_async(definition: ExtractionDefinition, text: str) -> List[str]:
    """Run :func:`extract` in a worker thread."""
    return await asyncio.to_thread(extract, definition, text)


def extract_from_file(
    path: Union[str, Path],
    definition: ExtractionDefinition,
    reader: Optional[DocumentReader] = None,
) -> List[str]:
    """Read ``path`` as text and extract ``definition`` from it."""
    reader = reader or DocumentReader()
    return extract(definition, reader.read_as_text(path))
