"""
Line classification for extracted card text.

Every line is either a page footer number, a line that starts with one of
the known keywords, or plain text.
"""

import re
from typing import Dict, Iterable, Iterator, List

from .models import ClassifiedLine, Field, LabeledLine, PageNumberMarker, PlainText


# Keyword prefix -> target field. Lookup follows insertion order.
KEYWORDS: Dict[str, Field] = {
    'Mr.': Field.NAME,
    'Ms.': Field.NAME,
    'Mrs.': Field.NAME,
    'Dr.': Field.NAME,
    'Title:': Field.TITLE,
    'Phone:': Field.PHONE,
    'Mobile:': Field.MOBILE,
    'Email:': Field.EMAIL,
}

PAGE_NUMBER_PATTERN = re.compile(r'[0-9]{1,4}')


def is_page_number(line: str) -> bool:
    """Check if a trimmed line is nothing but a 1-4 digit page number."""
    return PAGE_NUMBER_PATTERN.fullmatch(line) is not None


def match_keyword(line: str):
    """
    Find the first keyword the line starts with.

    Args:
        line: Trimmed text line

    Returns:
        Matching keyword or None
    """
    for keyword in KEYWORDS:
        if line.startswith(keyword):
            return keyword
    return None


def labeled_value(line: str) -> str:
    """
    Value carried by a labeled line.

    Text after the first colon, trimmed. Lines without a colon (honorifics
    such as "Mr.") keep the whole line.
    """
    if ':' in line:
        return line.split(':', 1)[1].strip()
    return line


def classify(line: str) -> ClassifiedLine:
    """
    Classify a single line of extracted text.

    Args:
        line: Text line, normally already trimmed by the caller

    Returns:
        PageNumberMarker, LabeledLine or PlainText
    """
    line = line.strip()

    if is_page_number(line):
        return PageNumberMarker()

    keyword = match_keyword(line)
    if keyword is not None:
        return LabeledLine(field=KEYWORDS[keyword], value=labeled_value(line))

    return PlainText(text=line)


def split_lines(text: str) -> List[str]:
    """Split document text into lines on newline characters only."""
    return text.split('\n')


def classify_lines(lines: Iterable[str]) -> Iterator[ClassifiedLine]:
    """Trim and classify each line in order."""
    for line in lines:
        yield classify(line.strip())
