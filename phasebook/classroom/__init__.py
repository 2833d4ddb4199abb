"""
Phasebook Classroom - Build-time scan and runtime content access.

This module provides:
- walk_curriculum: Enumerate module documents per canonical phase
- extract_sections / parse_module_text: Parse one lesson document
- infer_difficulty: Difficulty tier from a phase path
- build_curriculum: Assemble the CurriculumTree
- fetch_module_content: Load raw markdown for a module view
- CurriculumNavigator: Lookups and within-phase sequencing
- publish_documents: Copy documents into a static directory
"""

from .walker import (
    DocumentRef,
    walk_curriculum,
    list_module_documents,
)

from .extractor import (
    ParserState,
    ExtractedSections,
    SectionFolder,
    next_state,
    extract_sections,
    estimate_duration,
    parse_module_text,
)

from .difficulty import (
    infer_difficulty,
    infer_difficulty_for,
    phase_number,
)

from .assembler import (
    assemble_curriculum,
    build_curriculum,
    summarize_curriculum,
    phase_title,
    readme_overview,
)

from .content import (
    DocumentNotFoundError,
    ModuleContent,
    resolve_document_path,
    load_module_text,
    fetch_module_content,
)

from .navigator import CurriculumNavigator

from .publisher import publish_documents

__all__ = [
    # Walker
    "DocumentRef",
    "walk_curriculum",
    "list_module_documents",
    # Extractor
    "ParserState",
    "ExtractedSections",
    "SectionFolder",
    "next_state",
    "extract_sections",
    "estimate_duration",
    "parse_module_text",
    # Difficulty
    "infer_difficulty",
    "infer_difficulty_for",
    "phase_number",
    # Assembler
    "assemble_curriculum",
    "build_curriculum",
    "summarize_curriculum",
    "phase_title",
    "readme_overview",
    # Content
    "DocumentNotFoundError",
    "ModuleContent",
    "resolve_document_path",
    "load_module_text",
    "fetch_module_content",
    # Navigator
    "CurriculumNavigator",
    # Publisher
    "publish_documents",
]
