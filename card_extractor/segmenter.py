"""
Record segmentation over classified lines.

Cards come out of the PDF as a flat run of lines laid out as: name line,
company line, address lines, then labeled contact fields. A new name line
is the only record boundary available in that text.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .models import ClassifiedLine, Field, LabeledLine, PageNumberMarker, PlainText, Record


logger = logging.getLogger(__name__)


@dataclass
class OpenRecord:
    """Record under construction."""
    values: Dict[Field, str] = field(default_factory=dict)
    address_parts: List[str] = field(default_factory=list)

    def set(self, target: Field, value: str) -> None:
        if target is Field.ADDRESS:
            self.address_parts = [value]
        else:
            self.values[target] = value

    def start_address(self, text: str) -> None:
        self.address_parts = [text]

    def extend_address(self, text: str) -> None:
        self.address_parts.append(text)

    def close(self) -> Record:
        """Freeze into a Record, joining address fragments with single spaces."""
        address = ' '.join(part for part in self.address_parts if part)
        kwargs = {f.attr: value for f, value in self.values.items()}
        return Record(address=address, **kwargs)


class RecordSegmenter:
    """
    State machine that splits classified lines into contact records.

    Feed lines in order with feed(), then call finish() to flush the last
    record. Content never causes an error; unexpected layouts just produce
    records with missing or misplaced fields.
    """

    def __init__(self):
        self.current: Optional[OpenRecord] = None
        self.inside_address = False
        self.records: List[Record] = []

    @property
    def has_open_record(self) -> bool:
        return self.current is not None

    def feed(self, line: ClassifiedLine) -> None:
        """Consume one classified line."""
        if isinstance(line, PageNumberMarker):
            return

        if isinstance(line, LabeledLine):
            self._on_label(line)
        elif isinstance(line, PlainText):
            self._on_text(line.text)

    def _on_label(self, line: LabeledLine) -> None:
        if line.field is Field.NAME:
            self._flush()
            self.current = OpenRecord()
        elif self.current is None:
            logger.debug(f"Ignoring {line.field.value} before first record: {line.value!r}")
            return

        self.current.set(line.field, line.value)
        self.inside_address = False

    def _on_text(self, text: str) -> None:
        if self.current is None:
            return

        if self.inside_address:
            self.current.extend_address(text)
        elif not self.current.values.get(Field.COMPANY):
            self.current.set(Field.COMPANY, text)
        else:
            self.current.start_address(text)
            self.inside_address = True

    def _flush(self) -> None:
        if self.current is not None:
            self.records.append(self.current.close())
        self.current = None
        self.inside_address = False

    def finish(self) -> List[Record]:
        """Close any open record and return all records in order."""
        self._flush()
        return list(self.records)


def segment(lines: Iterable[ClassifiedLine]) -> List[Record]:
    """
    Split classified lines into contact records.

    Args:
        lines: Classified lines in extraction order

    Returns:
        Closed records in the order they were opened
    """
    segmenter = RecordSegmenter()
    for line in lines:
        segmenter.feed(line)
    return segmenter.finish()
