"""Configuration module for Universal Extractor."""

import codecs
import os
from dataclasses import dataclass

from .exceptions import ConfigurationError

ENV_PREFIX = "UNIVERSAL_EXTRACTOR_"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Config:
    """Configuration class for document reading and extraction."""

    encoding: str = "utf-8-sig"  # BOM is stripped when present
    output_dir: str = "."
    verbose: bool = False

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigurationError(
                f"Unknown text encoding: '{self.encoding}'"
            ) from e

    @classmethod
    def from_env(cls) -> "Config":
        """Build a configuration from UNIVERSAL_EXTRACTOR_* variables."""
        defaults = cls()
        verbose = os.getenv(f"{ENV_PREFIX}VERBOSE")
        return cls(
            encoding=os.getenv(f"{ENV_PREFIX}ENCODING", defaults.encoding).strip(),
            output_dir=os.getenv(f"{ENV_PREFIX}OUTPUT_DIR", defaults.output_dir),
            verbose=(
                verbose.strip().lower() in _TRUTHY
                if verbose is not None
                else defaults.verbose
            ),
        )

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "encoding": self.encoding,
            "output_dir": self.output_dir,
            "verbose": self.verbose,
        }
