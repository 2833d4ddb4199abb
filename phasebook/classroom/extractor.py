"""
Section extractor - fold classified lines into module metadata.

One left-to-right pass over the classified lines of a document collects:
- title: first level-1 heading (filename stem if none)
- description: first run of text lines after the title, before any level-2 heading
- learning objectives / prerequisites: bullets under those level-2 headings
- sections: every level-2 heading
- topics: labels of "**Label**: rest" bullets (the sections if none)
- projects: bullets and "**Project...**" lines mentioning a project

Missing structure never raises; each field falls back independently.
"""

import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from phasebook.schemas.config import DEFAULT_MODULE_DESCRIPTION
from phasebook.utils.line_classifier import (
    Bullet,
    Heading,
    Line,
    Text,
    classify_document,
)
from phasebook.utils.slug_codec import strip_extension

OBJECTIVES_HEADING = "Learning Objectives"
PREREQUISITES_HEADING = "Prerequisites"

DESCRIPTION_LIMIT = 200
WORDS_PER_MINUTE = 200

TOPIC_PATTERN = re.compile(r"^\*\*(.+?)\*\*:")
PROJECT_LABEL_PATTERN = re.compile(r"^\*\*Project.*?\*\*:?\s*")


class ParserState(str, Enum):
    IDLE = "idle"
    COLLECTING_OBJECTIVES = "collecting_objectives"
    COLLECTING_PREREQUISITES = "collecting_prerequisites"


def next_state(state: ParserState, heading: Heading) -> ParserState:
    """State after a heading. Only level-2 headings move the parser."""
    if heading.level != 2:
        return state
    if heading.text == OBJECTIVES_HEADING:
        return ParserState.COLLECTING_OBJECTIVES
    if heading.text == PREREQUISITES_HEADING:
        return ParserState.COLLECTING_PREREQUISITES
    return ParserState.IDLE


@dataclass(frozen=True)
class ExtractedSections:
    title: str
    description: str
    learning_objectives: list[str] = field(default_factory=list)
    prerequisites: list[str] = field(default_factory=list)
    sections: list[str] = field(default_factory=list)
    topics: list[str] = field(default_factory=list)
    projects: list[str] = field(default_factory=list)


class SectionFolder:
    """Accumulator for one document's fold."""

    def __init__(self):
        self.state = ParserState.IDLE
        self.title = ""
        self.objectives: list[str] = []
        self.prerequisites: list[str] = []
        self.sections: list[str] = []
        self.topics: list[str] = []
        self.projects: list[str] = []
        self._description_lines: list[str] = []
        self._description_closed = False
        self._seen_section = False

    def feed(self, line: Line) -> None:
        if isinstance(line, Heading):
            self._on_heading(line)
            return

        if isinstance(line, Text):
            if not self._seen_section and not self._description_closed:
                self._description_lines.append(line.text)
            if line.text.startswith("**Project"):
                self._add_project(line.text)
            return

        # Bullets and blank lines end the description run
        self._close_description()

        if isinstance(line, Bullet):
            self._on_bullet(line)

    def _on_heading(self, heading: Heading) -> None:
        if heading.level == 1 and not self.title:
            self.title = heading.text
            # description is read after the title only
            self._description_lines = []
            self._description_closed = False
            return

        self._close_description()
        if heading.level == 2:
            self._seen_section = True
            self.sections.append(heading.text)
        self.state = next_state(self.state, heading)

    def _on_bullet(self, bullet: Bullet) -> None:
        if self.state == ParserState.COLLECTING_OBJECTIVES:
            self.objectives.append(bullet.text)
        elif self.state == ParserState.COLLECTING_PREREQUISITES:
            self.prerequisites.append(bullet.text)

        match = TOPIC_PATTERN.match(bullet.text)
        if match:
            self.topics.append(match.group(1))

        if "project" in bullet.text.lower():
            self._add_project(bullet.text)

    def _add_project(self, text: str) -> None:
        cleaned = PROJECT_LABEL_PATTERN.sub("", text).strip()
        if cleaned:
            self.projects.append(cleaned)

    def _close_description(self) -> None:
        if self._description_lines:
            self._description_closed = True

    def description(self) -> str:
        lines = self._description_lines
        if not lines:
            return ""
        if len(lines) > 1:
            return lines[0]
        if len(lines[0]) > DESCRIPTION_LIMIT:
            return lines[0][:DESCRIPTION_LIMIT] + "..."
        return lines[0]

    def result(self, fallback_title: str, fallback_description: str) -> ExtractedSections:
        return ExtractedSections(
            title=self.title or fallback_title,
            description=self.description() or fallback_description,
            learning_objectives=list(self.objectives),
            prerequisites=list(self.prerequisites),
            sections=list(self.sections),
            topics=list(self.topics) if self.topics else list(self.sections),
            projects=list(self.projects),
        )


def extract_sections(
    lines: Iterable[Line],
    filename: str,
    fallback_description: str = DEFAULT_MODULE_DESCRIPTION,
) -> ExtractedSections:
    """
    Fold classified lines into module metadata.

    Args:
        lines: Classified lines of one document
        filename: Source filename, its stem is the title fallback
        fallback_description: Used when no description run exists

    Returns:
        ExtractedSections
    """
    folder = SectionFolder()
    for line in lines:
        folder.feed(line)
    return folder.result(strip_extension(filename), fallback_description)


def estimate_duration(content: str) -> str:
    """Rough completion time: reading at 200 wpm plus half again for practice."""
    word_count = len(content.split())
    reading_minutes = math.ceil(word_count / WORDS_PER_MINUTE)
    practice_time = math.ceil(reading_minutes * 1.5)
    return f"{max(1, practice_time)}-{practice_time + 1} hours"


def parse_module_text(
    content: str,
    filename: str,
    fallback_description: str = DEFAULT_MODULE_DESCRIPTION,
) -> tuple[ExtractedSections, str]:
    """Classify and extract one document. Returns (sections, duration)."""
    sections = extract_sections(classify_document(content), filename, fallback_description)
    return sections, estimate_duration(content)
