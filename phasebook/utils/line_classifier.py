"""
Line classifier for lesson markdown.

Tags each raw line as exactly one of:
- Heading(level, text): one to six '#' followed by a space
- Bullet(text): starts with "- " or "* "
- Blank: empty or whitespace-only
- Text(text): anything else

Lines are compared after trimming surrounding whitespace, so indented
bullets and CRLF endings classify the same as clean ones.
"""

import re
from dataclasses import dataclass
from typing import Iterator, Union

HEADING_PATTERN = re.compile(r"^(#{1,6}) (.*)$")
BULLET_PATTERN = re.compile(r"^[-*] (.*)$")


@dataclass(frozen=True)
class Heading:
    level: int
    text: str


@dataclass(frozen=True)
class Bullet:
    text: str


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Blank:
    pass


Line = Union[Heading, Bullet, Text, Blank]


def classify_line(raw: str) -> Line:
    """Classify one line. Never fails."""
    line = raw.strip()
    if not line:
        return Blank()

    match = HEADING_PATTERN.match(line)
    if match:
        return Heading(level=len(match.group(1)), text=match.group(2).strip())

    match = BULLET_PATTERN.match(line)
    if match:
        return Bullet(text=match.group(1).strip())

    return Text(text=line)


def classify_document(content: str) -> Iterator[Line]:
    """Classify every line of a document, in order."""
    for raw in content.splitlines():
        yield classify_line(raw)
