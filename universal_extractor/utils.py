"""Utility functions for Universal Extractor."""

import logging
import os
import re
from pathlib import Path
from typing import List, Union

from .definitions import ExtractionDefinition

logger = logging.getLogger(__name__)

_INVALID_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


def setup_logging(verbose: bool = False) -> None:
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format=("%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
    )


def format_result(result: List[str]) -> str:
    """Serialize an extraction result: one token per line, platform newlines."""
    return os.linesep.join(result)


def suggest_output_filename(
    source_path: Union[str, Path], definition: ExtractionDefinition
) -> str:
    """Build ``{source stem}_{definition name with underscores}.txt``.

    Characters that cannot appear in a file name (path separators included)
    become underscores too, so "BIC/SWIFT" gives ``..._BIC_SWIFT.txt``.
    """
    name = f"{Path(source_path).stem}_{definition.slug}.txt"
    return _INVALID_FILENAME_CHARS.sub("_", name)


def save_result(result: List[str], output_path: Union[str, Path]) -> Path:
    """Write an extraction result as UTF-8 text.

    Args:
        result: Tokens to write
        output_path: Destination file; parent directories are created

    Returns:
        The path written to
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # newline="" keeps os.linesep exactly as joined
    with open(output_path, "w", encoding="utf-8", newline="") as f:
        f.write(format_result(result))

    logger.debug("Wrote %s entries to %s", len(result), output_path)
    return output_path
