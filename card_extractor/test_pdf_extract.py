"""
Tests for PDF text extraction, with pdfplumber replaced by fakes.
"""

import pytest

from . import pdf_extract
from .pdf_extract import (
    DocumentOpenError,
    ExtractionError,
    SourceReadError,
    extract_document_text,
    extract_pages,
    open_source,
)


class FakePage:
    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error

    def extract_text(self):
        if self.error:
            raise self.error
        return self.text


class FakePdf:
    def __init__(self, pages):
        self.pages = pages
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False


@pytest.fixture
def fake_pdf(monkeypatch):
    def install(pages):
        pdf = FakePdf(pages)
        monkeypatch.setattr(pdf_extract.pdfplumber, "open", lambda path: pdf)
        return pdf

    return install


def test_pages_concatenated_without_separator(fake_pdf):
    fake_pdf([FakePage("Mr. A\nAcme\n"), FakePage(None), FakePage("1\nMs. B")])

    assert extract_pages("cards.pdf") == ["Mr. A\nAcme\n", "", "1\nMs. B"]
    assert extract_document_text("cards.pdf") == "Mr. A\nAcme\n1\nMs. B"


def test_document_closed_after_extraction(fake_pdf):
    pdf = fake_pdf([FakePage("x")])
    extract_pages("cards.pdf")
    assert pdf.closed


def test_page_failure_reports_page_number(fake_pdf):
    pdf = fake_pdf([FakePage("ok"), FakePage(error=RuntimeError("bad stream"))])

    with pytest.raises(ExtractionError) as exc_info:
        extract_document_text("cards.pdf")

    assert exc_info.value.page_number == 2
    assert str(exc_info.value) == "Unable to extract content from page #2: bad stream"
    assert pdf.closed


def test_open_failure(monkeypatch):
    def broken_open(path):
        raise ValueError("not a PDF")

    monkeypatch.setattr(pdf_extract.pdfplumber, "open", broken_open)

    with pytest.raises(DocumentOpenError, match="Error opening the document: not a PDF"):
        extract_pages("cards.pdf")


def test_open_source_existing_file(tmp_path):
    source = tmp_path / "cards.pdf"
    source.write_bytes(b"%PDF-1.4")
    assert open_source(str(source)) == source


def test_open_source_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_source(tmp_path / "nope.pdf")

    with pytest.raises(FileNotFoundError):
        open_source(tmp_path / "no_dir" / "nope.pdf")


def test_open_source_directory_is_fatal(tmp_path):
    with pytest.raises(SourceReadError, match="Error reading the file"):
        open_source(tmp_path)


class BrokenPageTreePdf(FakePdf):
    """pdfplumber fails while building the page list."""

    def __init__(self):
        self.closed = False

    @property
    def pages(self):
        raise ValueError("float() argument must be a string or a real number, not 'PSLiteral'")


def test_unreadable_page_tree(monkeypatch):
    pdf = BrokenPageTreePdf()
    monkeypatch.setattr(pdf_extract.pdfplumber, "open", lambda path: pdf)

    with pytest.raises(DocumentOpenError, match="Error opening the document: float"):
        extract_document_text("cards.pdf")

    assert pdf.closed
