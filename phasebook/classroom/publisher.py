"""Copy phase markdown into a static directory the viewer fetches from."""

import logging
import shutil
from pathlib import Path

from phasebook.schemas import CurriculumConfig

logger = logging.getLogger(__name__)


def publish_documents(
    root: str | Path,
    dest: str | Path,
    config: CurriculumConfig | None = None,
) -> list[Path]:
    """
    Copy every .md file of each existing phase folder to dest/<phase folder>/.

    Args:
        root: Content root holding the phase folders
        dest: Static directory (created if missing)
        config: Scan configuration (defaults if None)

    Returns:
        Destination paths of the copied files
    """
    config = config or CurriculumConfig()
    root, dest = Path(root), Path(dest)
    dest.mkdir(parents=True, exist_ok=True)

    copied: list[Path] = []
    for directory in config.phase_directories:
        source_path = root / directory
        if not source_path.is_dir():
            logger.info(f"Skipping {directory} - directory not found")
            continue

        dest_path = dest / directory
        dest_path.mkdir(parents=True, exist_ok=True)
        logger.info(f"Copying {directory}...")
        for source_file in sorted(source_path.glob("*.md")):
            if not source_file.is_file():
                continue
            target = dest_path / source_file.name
            shutil.copyfile(source_file, target)
            logger.info(f"  - {source_file.name}")
            copied.append(target)

    return copied
