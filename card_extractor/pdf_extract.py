"""
PDF text extraction with pdfplumber.

Pages are read in order and their text is concatenated as-is, so the line
stream seen by the classifier is exactly what the extraction engine produced.
"""

import logging
from pathlib import Path
from typing import List, Union

import pdfplumber

from .logging_setup import log_progress
from .models import CardExtractorError


logger = logging.getLogger(__name__)


class SourceReadError(CardExtractorError):
    """The input file exists but could not be read."""

    def __init__(self, path: Union[str, Path], cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Error reading the file: {cause}")


class DocumentOpenError(CardExtractorError):
    """The input file is not a PDF pdfplumber can open."""

    def __init__(self, path: Union[str, Path], cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Error opening the document: {cause}")


class ExtractionError(CardExtractorError):
    """Text could not be extracted from one page."""

    def __init__(self, page_number: int, cause: Exception):
        self.page_number = page_number
        self.cause = cause
        super().__init__(f"Unable to extract content from page #{page_number}: {cause}")


def open_source(pdf_path: Union[str, Path]) -> Path:
    """
    Check that the input file can be opened for reading.

    Args:
        pdf_path: Path to PDF file

    Returns:
        The path as a Path object

    Raises:
        FileNotFoundError: if nothing exists at the path (callers re-prompt)
        SourceReadError: for any other read failure
    """
    path = Path(pdf_path)

    try:
        with open(path, 'rb'):
            pass
    except (FileNotFoundError, NotADirectoryError) as e:
        raise FileNotFoundError(f"PDF not found: {pdf_path}") from e
    except OSError as e:
        raise SourceReadError(pdf_path, e) from e

    return path


def extract_pages(pdf_path: Union[str, Path]) -> List[str]:
    """
    Extract the text of every page.

    Args:
        pdf_path: Path to PDF file

    Returns:
        One string per page in page order; pages without text give ""

    Raises:
        DocumentOpenError: if the document or its page tree cannot be read
        ExtractionError: if a page fails, with its 1-based page number
    """
    try:
        pdf = pdfplumber.open(pdf_path)
    except Exception as e:
        raise DocumentOpenError(pdf_path, e) from e

    pages = []

    with pdf:
        # pdfplumber parses the page tree on first access
        try:
            document_pages = list(pdf.pages)
        except Exception as e:
            raise DocumentOpenError(pdf_path, e) from e

        total = len(document_pages)
        for page_number, page in enumerate(document_pages, start=1):
            try:
                text = page.extract_text()
            except Exception as e:
                raise ExtractionError(page_number, e) from e

            pages.append(text or "")
            log_progress(logger, page_number, total, context="Parsed")

    return pages


def extract_document_text(pdf_path: Union[str, Path]) -> str:
    """
    Extract the full document text.

    Page texts are joined with no separator.

    Args:
        pdf_path: Path to PDF file

    Returns:
        Concatenated text of all pages
    """
    return "".join(extract_pages(pdf_path))
