"""
Slug codec for module documents.

Maps a document filename to the URL-safe slug used as its module ID, and a
slug back to a filename that can be fetched.

Examples:
    Module-0.1-Development-Environment-Setup.md -> module-0-1-development-environment-setup
    module-6-1-modern-build-tools -> Module-6.1-Modern-Build-Tools.md

decode(encode(filename)) only restores the original casing for words that
are single capitalized words or listed in the capitalization exceptions;
encode(decode(slug)) == slug always holds.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from phasebook.schemas import CurriculumConfig

# An extension starts with a letter, so "Module-0.1-Intro" keeps its ".1"
EXTENSION_PATTERN = re.compile(r"\.[A-Za-z][A-Za-z0-9]*$")


def strip_extension(filename: str) -> str:
    return EXTENSION_PATTERN.sub("", filename)


def capitalize_word(word: str, exceptions: Mapping[str, str]) -> str:
    """
    Render one lowercase title word.

    Words in the exception table come back verbatim (HTML, TypeScript, ...);
    everything else gets its first letter uppercased, unless lowercasing the
    uppercase form would not give the letter back (e.g. "ß" -> "SS").
    """
    if word in exceptions:
        return exceptions[word]
    first = word[:1]
    upper = first.upper()
    if upper.lower() != first:
        return word
    return upper + word[1:]


@dataclass(frozen=True)
class SlugCodec:
    """Reversible filename <-> slug mapping."""
    exceptions: Mapping[str, str] = field(default_factory=dict)
    overview_id: str = "core-syntax-overview"
    overview_document: str = "Core-Syntax-Overview.md"
    prefix: str = "module-"

    def __post_init__(self):
        object.__setattr__(self, "exceptions", MappingProxyType(dict(self.exceptions)))

    @classmethod
    def from_config(cls, config: CurriculumConfig) -> "SlugCodec":
        return cls(
            exceptions=config.capitalization_exceptions,
            overview_id=config.overview_id,
            overview_document=config.overview_document,
            prefix=config.module_prefix,
        )

    def encode(self, filename: str) -> str:
        """Filename -> slug: drop the extension, lowercase, periods become hyphens."""
        return strip_extension(filename).lower().replace(".", "-")

    def decode(self, slug: str) -> str:
        """
        Slug -> filename.

        The overview slug maps straight to the overview document. Module
        slugs rebuild "Module-<major>.<minor>-<Title-Words>.md"; anything
        else falls back to "<slug>.md".
        """
        if slug == self.overview_id:
            return self.overview_document

        if not slug.startswith(self.prefix):
            return f"{slug}.md"

        parts = slug[len(self.prefix):].split("-")
        if len(parts) < 2 or not (parts[0].isdigit() and parts[1].isdigit()):
            return f"{slug}.md"

        module_number = f"{parts[0]}.{parts[1]}"
        title_words = [capitalize_word(word, self.exceptions) for word in parts[2:]]
        stem = self.prefix[:1].upper() + self.prefix[1:] + module_number
        if title_words:
            stem += "-" + "-".join(title_words)
        return f"{stem}.md"


def encode_filename(filename: str, config: CurriculumConfig | None = None) -> str:
    """Encode with the codec built from config (defaults if None)."""
    return SlugCodec.from_config(config or CurriculumConfig()).encode(filename)


def decode_slug(slug: str, config: CurriculumConfig | None = None) -> str:
    """Decode with the codec built from config (defaults if None)."""
    return SlugCodec.from_config(config or CurriculumConfig()).decode(slug)
