"""Tests for extension based format detection."""

from pathlib import Path

import pytest

from universal_extractor.formats import (
    EXTENSION_MAP,
    SUPPORTED_EXTENSIONS,
    SupportedFormat,
    detect_format,
)


@pytest.mark.parametrize(
    "name,expected",
    [
        ("notes.txt", SupportedFormat.PLAIN_TEXT),
        ("table.csv", SupportedFormat.PLAIN_TEXT),
        ("README.md", SupportedFormat.PLAIN_TEXT),
        ("page.HTM", SupportedFormat.PLAIN_TEXT),
        ("letter.rtf", SupportedFormat.RICH_TEXT),
        ("scan.PDF", SupportedFormat.PDF),
        ("report.docx", SupportedFormat.OOXML_PACKAGE),
        ("macro.docm", SupportedFormat.OOXML_PACKAGE),
        ("template.Dotx", SupportedFormat.OOXML_PACKAGE),
        ("template.dotm", SupportedFormat.OOXML_PACKAGE),
        ("writer.odt", SupportedFormat.OPENDOCUMENT_PACKAGE),
    ],
)
def test_detect_format(name: str, expected: SupportedFormat):
    assert detect_format(name) is expected
    assert detect_format(Path("/some/dir") / name) is expected


@pytest.mark.parametrize(
    "name,expected",
    [
        (".txt", SupportedFormat.PLAIN_TEXT),
        ("/home/user/.md", SupportedFormat.PLAIN_TEXT),
        (".hidden.PDF", SupportedFormat.PDF),
    ],
)
def test_detect_format_dot_file_names(name: str, expected: SupportedFormat):
    assert detect_format(name) is expected


@pytest.mark.parametrize(
    "name",
    [
        "setup.exe",
        "legacy.doc",
        "sheet.xlsx",
        "noextension",
        "",
        "archive.odt.zip",
        "trailing.",
        ".txt.",
        ".exe",
    ],
)
def test_detect_format_unsupported(name: str):
    assert detect_format(name) is SupportedFormat.UNSUPPORTED


def test_supported_extensions_constant():
    assert SUPPORTED_EXTENSIONS == {
        ".pdf",
        ".docx",
        ".docm",
        ".dotx",
        ".dotm",
        ".txt",
        ".csv",
        ".odt",
        ".rtf",
        ".html",
        ".htm",
        ".md",
        ".markdown",
    }
    assert SupportedFormat.UNSUPPORTED not in EXTENSION_MAP.values()
