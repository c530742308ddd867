"""Custom exceptions for Universal Extractor."""


class UniversalExtractorError(Exception):
    """Base exception for Universal Extractor."""

    pass


class UnsupportedFormatError(UniversalExtractorError):
    """Exception raised when a file type cannot be read."""

    pass


class DocumentNotFoundError(UniversalExtractorError):
    """Exception raised when a path does not resolve to a readable file."""

    pass


class MalformedContainerError(UniversalExtractorError):
    """Exception raised when an archive, XML part or PDF cannot be parsed."""

    pass


class PatternCompilationError(UniversalExtractorError):
    """Exception raised when an extraction pattern is not a valid regex."""

    pass


class DefinitionNotFoundError(UniversalExtractorError):
    """Exception raised when no extraction definition has the given name."""

    pass


class ConfigurationError(UniversalExtractorError):
    """Exception raised when configuration is invalid."""

    pass
