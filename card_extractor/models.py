"""
Data models for contact card extraction.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple, Union


class CardExtractorError(Exception):
    """Base class for errors that end a conversion run."""


class Field(Enum):
    """Output column of a contact record, in CSV order."""
    NAME = "Name"
    COMPANY = "Company"
    TITLE = "Title"
    PHONE = "Phone"
    MOBILE = "Mobile"
    EMAIL = "Email"
    ADDRESS = "Address"

    @property
    def attr(self) -> str:
        """Attribute name of this field on Record."""
        return self.name.lower()

    @classmethod
    def header(cls) -> Tuple[str, ...]:
        """CSV header labels in column order."""
        return tuple(f.value for f in cls)


@dataclass(frozen=True)
class Record:
    """A closed contact record. Every field defaults to an empty string."""
    name: str = ""
    company: str = ""
    title: str = ""
    phone: str = ""
    mobile: str = ""
    email: str = ""
    address: str = ""

    def get(self, field: Field) -> str:
        return getattr(self, field.attr)

    def values(self) -> Tuple[str, ...]:
        """Field values in column order."""
        return tuple(self.get(f) for f in Field)

    def to_dict(self) -> Dict[str, str]:
        """Convert to a dictionary keyed by header label."""
        return {f.value: self.get(f) for f in Field}

    @property
    def is_complete(self) -> bool:
        """Check if record has a name, an email and some phone number."""
        return bool(self.name and self.email and (self.phone or self.mobile))

    @property
    def has_name(self) -> bool:
        return bool(self.name)

    @property
    def has_email(self) -> bool:
        return bool(self.email)

    @property
    def has_phone(self) -> bool:
        return bool(self.phone or self.mobile)


@dataclass(frozen=True)
class PageNumberMarker:
    """A page footer number left behind by text extraction."""


@dataclass(frozen=True)
class LabeledLine:
    """A line recognized by its keyword prefix."""
    field: Field
    value: str


@dataclass(frozen=True)
class PlainText:
    """A line without a recognized prefix."""
    text: str


ClassifiedLine = Union[PageNumberMarker, LabeledLine, PlainText]
