"""
Output rendering (CSV and plain text) and file writing.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Union

from .models import CardExtractorError, Field, Record


logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """Supported output file types; the value doubles as file extension."""
    CSV = "csv"
    TXT = "txt"


class OutputWriteError(CardExtractorError):
    """The output file could not be written."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Unable to generate output file: {cause}")


def quote(value: str) -> str:
    # Embedded double quotes are not escaped
    return f'"{value}"'


def render_csv(records: Iterable[Record]) -> str:
    """
    Render records as CSV text.

    The header row is left unquoted, every data value is wrapped in double
    quotes (empty values become ""). Rows are joined with a bare newline and
    there is no trailing newline.

    Args:
        records: Closed records

    Returns:
        CSV document text
    """
    rows: List[str] = [','.join(Field.header())]
    for record in records:
        rows.append(','.join(quote(value) for value in record.values()))
    return '\n'.join(rows)


def render_text(text: str) -> str:
    """Plain text output is the extracted text, unchanged."""
    return text


def output_path(directory: Union[str, Path], name: str, fmt: Union[OutputFormat, str]) -> Path:
    """Build {directory}/{name}.{extension}."""
    return Path(directory) / f"{name}.{OutputFormat(fmt).value}"


def write_output(
    content: str,
    directory: Union[str, Path],
    name: str,
    fmt: Union[OutputFormat, str]
) -> Path:
    """
    Write rendered content to disk, replacing any existing file.

    The directory must already exist.

    Args:
        content: Rendered output
        directory: Output directory
        name: File base name without extension
        fmt: Output format, selects the extension

    Returns:
        Path to output file

    Raises:
        OutputWriteError: if the file cannot be written
    """
    path = output_path(directory, name, fmt)

    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(content)
    except OSError as e:
        raise OutputWriteError(path, e) from e

    logger.debug(f"Wrote {len(content)} characters to {path}")
    return path
