#!/usr/bin/env python3
"""
01_generate_curriculum.py - Scan the phase folders and report the curriculum.

Builds the CurriculumTree the viewer consumes and logs a per-phase summary,
so broken documents or missing folders show up before a build.

Configuration comes from the environment (or .env):
  CURRICULUM_ROOT    directory holding the Phase-* folders (default: project parent)
  CURRICULUM_CONFIG  optional YAML config (default: built-in tables)

Usage:
  python scripts/01_generate_curriculum.py
  CURRICULUM_ROOT=../curriculum python scripts/01_generate_curriculum.py
"""

import logging
import os
import sys
from pathlib import Path

# Project root for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv
load_dotenv(PROJECT_ROOT / ".env")

from phasebook.classroom import build_curriculum, summarize_curriculum
from phasebook.schemas import CurriculumConfig
from phasebook.utils import load_config_file

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def load_settings() -> tuple[Path, CurriculumConfig]:
    """Content root and config from the environment."""
    root = Path(os.getenv("CURRICULUM_ROOT", str(PROJECT_ROOT.parent)))
    config_path = os.getenv("CURRICULUM_CONFIG")
    config = load_config_file(Path(config_path)) if config_path else CurriculumConfig()
    return root, config


def main():
    root, config = load_settings()

    logger.info(f"Generating curriculum data from markdown files in {root}...")
    tree = build_curriculum(root, config)

    logger.info("")
    logger.info("=" * 50)
    logger.info("CURRICULUM SUMMARY")
    logger.info("=" * 50)
    for phase in summarize_curriculum(tree):
        logger.info(f"{phase['phase']} ({phase['modules']} modules):")
        for title in phase["module_list"]:
            logger.info(f"  - {title}")

    logger.info("")
    logger.info(f"Total phases: {len(tree.phases)}")
    logger.info(f"Total modules: {tree.module_count}")
    empty = [phase.title for phase in tree.phases if not phase.modules]
    if empty:
        logger.warning(f"Phases without modules: {len(empty)}")
        for title in empty:
            logger.warning(f"  - {title}")


if __name__ == "__main__":
    main()
