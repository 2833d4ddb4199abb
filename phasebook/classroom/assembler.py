"""
Curriculum assembler - build the CurriculumTree from a content root.

Walks the canonical phase folders, parses every module document, and
groups the modules under their phases in canonical order. A declared phase
with no folder or no documents still appears, with an empty module list.
"""

import logging
import re
from collections import defaultdict
from pathlib import Path
from typing import Optional

from phasebook.schemas import CurriculumConfig, CurriculumTree, Module, Phase
from phasebook.utils.line_classifier import Bullet, Heading, Text, classify_document
from phasebook.utils.slug_codec import SlugCodec

from .difficulty import infer_difficulty_for
from .extractor import parse_module_text
from .walker import DocumentRef, walk_curriculum

logger = logging.getLogger(__name__)

PHASE_PREFIX_PATTERN = re.compile(r"^Phase-\d+-")
PHASE_TITLE_PATTERN = re.compile(r"Phase (\d+)")
OVERVIEW_HEADING = "Overview"


# -----------------------------------------------------------------------------
# Phase metadata
# -----------------------------------------------------------------------------


def phase_title(directory: str) -> str:
    """Phase-0-Absolute-Beginnings -> Phase 0: Absolute Beginnings"""
    return PHASE_TITLE_PATTERN.sub(r"Phase \1:", directory.replace("-", " "), count=1)


def phase_fallback_description(directory: str) -> str:
    topic = PHASE_PREFIX_PATTERN.sub("", directory).replace("-", " ").lower()
    return f"Advanced curriculum phase covering {topic}"


def readme_overview(content: str) -> Optional[str]:
    """
    First line under the "## Overview" heading, if any.

    Subheadings inside the section are skipped; the section ends at the
    next level-1 or level-2 heading. A bullet yields its item text.
    """
    in_overview = False
    for line in classify_document(content):
        if isinstance(line, Heading):
            if not in_overview:
                in_overview = line.level == 2 and line.text == OVERVIEW_HEADING
            elif line.level <= 2:
                return None
        elif in_overview and isinstance(line, (Bullet, Text)):
            return line.text
    return None


def phase_description(phase_path: Path, config: CurriculumConfig) -> str:
    """Overview line from the phase README, else the generic sentence."""
    readme_path = phase_path / config.readme_document
    if readme_path.is_file():
        try:
            overview = readme_overview(readme_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {readme_path}: {e}")
            overview = None
        if overview:
            return overview
    return phase_fallback_description(phase_path.name)


# -----------------------------------------------------------------------------
# Modules
# -----------------------------------------------------------------------------


def build_module(
    root: Path,
    ref: DocumentRef,
    codec: SlugCodec,
    config: CurriculumConfig,
) -> Optional[Module]:
    """Parse one document into a Module; None if it cannot be read."""
    path = ref.path(root)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error parsing {path}: {e}")
        return None

    sections, duration = parse_module_text(
        content, ref.filename, config.default_module_description
    )
    return Module(
        id=codec.encode(ref.filename),
        title=sections.title,
        description=sections.description,
        learning_objectives=sections.learning_objectives,
        prerequisites=sections.prerequisites,
        sections=sections.sections,
        topics=sections.topics,
        projects=sections.projects,
        duration=duration,
        difficulty=infer_difficulty_for(ref.phase_directory, config),
    )


def assemble_curriculum(
    root: str | Path,
    refs: list[DocumentRef],
    config: CurriculumConfig | None = None,
) -> CurriculumTree:
    """
    Group walked documents into phases, in canonical order.

    Args:
        root: Content root the refs are relative to
        refs: Output of walk_curriculum (any order)
        config: Scan configuration (defaults if None)

    Returns:
        CurriculumTree with one Phase per declared phase folder
    """
    config = config or CurriculumConfig()
    root = Path(root)
    codec = SlugCodec.from_config(config)

    by_phase: dict[str, list[DocumentRef]] = defaultdict(list)
    for ref in refs:
        by_phase[ref.phase_directory].append(ref)

    phases = []
    for position, directory in enumerate(config.phase_directories):
        modules: list[Module] = []
        seen_ids: set[str] = set()
        for ref in by_phase.get(directory, []):
            module = build_module(root, ref, codec, config)
            if module is None:
                continue
            if module.id in seen_ids:
                logger.warning(f"Duplicate module id {module.id} in {directory}, skipping {ref.filename}")
                continue
            seen_ids.add(module.id)
            modules.append(module)

        phases.append(Phase(
            id=config.phase_id(position),
            title=phase_title(directory),
            description=phase_description(root / directory, config),
            color_token=config.phase_color(position),
            modules=modules,
        ))

    return CurriculumTree(
        title=config.title,
        description=config.description,
        phases=phases,
    )


def build_curriculum(root: str | Path, config: CurriculumConfig | None = None) -> CurriculumTree:
    """Scan a content root and build the curriculum tree."""
    config = config or CurriculumConfig()
    return assemble_curriculum(root, walk_curriculum(root, config), config)


def summarize_curriculum(tree: CurriculumTree) -> list[dict]:
    """Per-phase module counts and titles for logging."""
    return [
        {
            "phase": phase.title,
            "modules": len(phase.modules),
            "module_list": [module.title for module in phase.modules],
        }
        for phase in tree.phases
    ]
