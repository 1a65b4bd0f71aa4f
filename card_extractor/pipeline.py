"""
Conversion pipeline: extract -> segment -> format -> write.

Everything a run needs is passed in through PipelineConfig; nothing is kept
between runs.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from .classifier import classify_lines, split_lines
from .models import Record
from .pdf_extract import extract_document_text
from .segmenter import segment
from .writer import OutputFormat, render_csv, render_text, write_output


logger = logging.getLogger(__name__)


@dataclass
class PipelineConfig:
    """Settings for one conversion run."""
    input_path: Union[str, Path]
    output_format: OutputFormat
    output_dir: Union[str, Path]
    output_name: str

    def __post_init__(self):
        self.output_format = OutputFormat(self.output_format)


@dataclass
class ConversionResult:
    """Rendered output and the records behind it (empty for txt output)."""
    content: str
    output_format: OutputFormat
    records: List[Record] = field(default_factory=list)


@dataclass
class PipelineResult:
    output_path: Path
    conversion: ConversionResult


def records_from_text(text: str) -> List[Record]:
    """Classify and segment extracted document text."""
    return segment(classify_lines(split_lines(text)))


def convert(text: str, output_format: Union[OutputFormat, str]) -> ConversionResult:
    """
    Convert extracted document text to the requested format.

    Args:
        text: Full document text, pages concatenated
        output_format: csv or txt

    Returns:
        ConversionResult with rendered content
    """
    output_format = OutputFormat(output_format)

    if output_format is OutputFormat.TXT:
        return ConversionResult(content=render_text(text), output_format=output_format)

    records = records_from_text(text)
    return ConversionResult(
        content=render_csv(records),
        output_format=output_format,
        records=records
    )


def record_stats(records: List[Record]) -> Dict[str, Any]:
    """Summary counts for a list of records."""
    total = len(records)
    return {
        "Records": total,
        "With Names": sum(1 for r in records if r.has_name),
        "With Emails": sum(1 for r in records if r.has_email),
        "With Phones": sum(1 for r in records if r.has_phone),
        "Complete Records": sum(1 for r in records if r.is_complete),
    }


def run(
    config: PipelineConfig,
    extractor: Optional[Callable[[Union[str, Path]], str]] = None
) -> PipelineResult:
    """
    Run a full conversion.

    Args:
        config: Run settings
        extractor: Callable returning the document text for a path,
            defaults to pdfplumber extraction

    Returns:
        PipelineResult with the written path and conversion details

    Raises:
        CardExtractorError: subclasses from extraction or writing
    """
    extractor = extractor or extract_document_text

    logger.info(f"Parsing the page content of {config.input_path}...")
    text = extractor(config.input_path)

    logger.info("Generating the output file...")
    conversion = convert(text, config.output_format)

    if conversion.output_format is OutputFormat.CSV:
        logger.info(f"Segmented {len(conversion.records)} records")

    path = write_output(
        conversion.content,
        config.output_dir,
        config.output_name,
        config.output_format
    )
    logger.info(f"{config.output_format.value.upper()} output saved: {path}")

    return PipelineResult(output_path=path, conversion=conversion)
