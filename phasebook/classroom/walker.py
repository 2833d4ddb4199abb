"""
Directory walker - enumerate module documents per phase folder.

Visits the canonical phase folders in declared order (not filesystem
order), lists the files that look like module documents, and pairs each
with its phase folder. Absent folders are skipped.
"""

import logging
from pathlib import Path
from typing import NamedTuple

from phasebook.schemas import CurriculumConfig

logger = logging.getLogger(__name__)


class DocumentRef(NamedTuple):
    """One module document found on disk."""
    phase_directory: str
    filename: str

    def path(self, root: Path) -> Path:
        return Path(root) / self.phase_directory / self.filename


def list_module_documents(phase_path: Path, config: CurriculumConfig) -> list[str]:
    """Module document filenames in one phase folder, sorted lexically."""
    names = {
        entry.name
        for entry in phase_path.iterdir()
        if entry.is_file() and config.is_module_document(entry.name)
    }
    return sorted(names)


def walk_curriculum(root: str | Path, config: CurriculumConfig | None = None) -> list[DocumentRef]:
    """
    Enumerate (phase folder, document filename) pairs.

    Args:
        root: Directory holding one subdirectory per phase
        config: Scan configuration (defaults if None)

    Returns:
        Pairs in canonical phase order, lexical file order within a phase
    """
    config = config or CurriculumConfig()
    root = Path(root)
    refs: list[DocumentRef] = []
    seen: set[tuple[str, str]] = set()

    for directory in config.phase_directories:
        phase_path = root / directory
        if not phase_path.is_dir():
            logger.info(f"Skipping {directory} - directory not found")
            continue

        filenames = list_module_documents(phase_path, config)
        logger.info(f"Processing {directory}: found {len(filenames)} modules")
        for filename in filenames:
            key = (directory, filename)
            if key in seen:
                continue
            seen.add(key)
            refs.append(DocumentRef(directory, filename))

    return refs
