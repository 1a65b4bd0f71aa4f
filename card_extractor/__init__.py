"""
Convert contact cards in a PDF to CSV.
Splits extracted text lines into Name/Company/Title/Phone/Mobile/Email/Address records.
"""

from .models import Field, Record, PageNumberMarker, LabeledLine, PlainText
from .classifier import classify, classify_lines
from .segmenter import RecordSegmenter, segment
from .writer import OutputFormat, render_csv, write_output
from .pdf_extract import extract_document_text
from .pipeline import PipelineConfig, convert, run

__version__ = "1.0.0"

__all__ = [
    "Field",
    "Record",
    "PageNumberMarker",
    "LabeledLine",
    "PlainText",
    "classify",
    "classify_lines",
    "RecordSegmenter",
    "segment",
    "OutputFormat",
    "render_csv",
    "write_output",
    "extract_document_text",
    "PipelineConfig",
    "convert",
    "run",
]
