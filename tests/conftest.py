"""Fixture documents built on the fly for extractor and CLI tests."""

import zipfile
from pathlib import Path
from typing import Callable, List, Optional

import pytest

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="rels" '
    'ContentType="application/vnd.openxmlformats-package.relationships+xml"/>'
    '<Default Extension="xml" ContentType="application/xml"/>'
    '<Override PartName="/word/document.xml" ContentType="{content_type}"/>'
    "</Types>"
)

PACKAGE_RELS = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">'
    '<Relationship Id="rId1" Target="word/document.xml" Type="http://schemas.'
    'openxmlformats.org/officeDocument/2006/relationships/officeDocument"/>'
    "</Relationships>"
)

MACRO_DOCUMENT_TYPE = "application/vnd.ms-word.document.macroEnabled.main+xml"


def make_pdf(path: Path, pages: List[str]) -> Path:
    """Write a minimal PDF with one line of Helvetica text per page."""
    count = len(pages)
    kids = " ".join(f"{4 + 2 * i} 0 R" for i in range(count))
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {count} >>".encode("ascii"),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for i, text in enumerate(pages):
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                "/Resources << /Font << /F1 3 0 R >> >> "
                f"/Contents {5 + 2 * i} 0 R >>"
            ).encode("ascii")
        )
        stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
        objects.append(
            b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (
        len(objects) + 1,
        xref_offset,
    )
    path.write_bytes(bytes(out))
    return path


def make_word_package(
    path: Path,
    runs: Optional[List[str]],
    content_type: str = MACRO_DOCUMENT_TYPE,
    include_rels: bool = True,
) -> Path:
    """Write a bare OPC package with a single-paragraph main document.

    ``runs=None`` writes a document element without a body.
    """
    if runs is None:
        body = ""
    else:
        body = "<w:body><w:p>%s</w:p></w:body>" % "".join(
            f"<w:r><w:t>{run}</w:t></w:r>" for run in runs
        )
    document = f'<w:document xmlns:w="{W_NS}">{body}</w:document>'

    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr(
            "[Content_Types].xml", CONTENT_TYPES.format(content_type=content_type)
        )
        if include_rels:
            archive.writestr("_rels/.rels", PACKAGE_RELS)
        archive.writestr("word/document.xml", document)
    return path


def make_odt(path: Path, content_xml: Optional[str]) -> Path:
    """Write an ODT archive; ``content_xml=None`` leaves content.xml out."""
    with zipfile.ZipFile(path, "w") as archive:
        archive.writestr("mimetype", "application/vnd.oasis.opendocument.text")
        if content_xml is not None:
            archive.writestr("content.xml", content_xml)
    return path


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _factory(pages: List[str], name: str = "doc.pdf") -> Path:
        return make_pdf(tmp_path / name, pages)

    return _factory


@pytest.fixture()
def word_package_factory(tmp_path: Path) -> Callable[..., Path]:
    def _factory(runs: Optional[List[str]], name: str = "doc.docm", **kwargs) -> Path:
        return make_word_package(tmp_path / name, runs, **kwargs)

    return _factory


@pytest.fixture()
def odt_factory(tmp_path: Path) -> Callable[..., Path]:
    def _factory(content_xml: Optional[str], name: str = "doc.odt") -> Path:
        return make_odt(tmp_path / name, content_xml)

    return _factory


@pytest.fixture()
def docx_file(tmp_path: Path) -> Path:
    """A real .docx written by python-docx."""
    from docx import Document

    document = Document()
    document.add_paragraph("Contact: docx@example.com")
    paragraph = document.add_paragraph("alpha")
    paragraph.add_run("beta")
    path = tmp_path / "report.docx"
    document.save(str(path))
    return path
