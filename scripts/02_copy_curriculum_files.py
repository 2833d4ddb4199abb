#!/usr/bin/env python3
"""
02_copy_curriculum_files.py - Publish phase markdown for on-demand fetching.

Copies the markdown of every canonical phase folder into the static
directory the viewer fetches module content from.

Configuration comes from the environment (or .env):
  CURRICULUM_ROOT        directory holding the Phase-* folders (default: project parent)
  CURRICULUM_PUBLIC_DIR  destination (default: public/curriculum)
  CURRICULUM_CONFIG      optional YAML config (default: built-in tables)

Usage:
  python scripts/02_copy_curriculum_files.py
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

from phasebook.classroom import publish_documents
from phasebook.schemas import CurriculumConfig
from phasebook.utils import load_config_file

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

DEFAULT_PUBLIC_DIR = PROJECT_ROOT / "public" / "curriculum"


def main():
    root = Path(os.getenv("CURRICULUM_ROOT", str(PROJECT_ROOT.parent)))
    dest = Path(os.getenv("CURRICULUM_PUBLIC_DIR", str(DEFAULT_PUBLIC_DIR)))
    config_path = os.getenv("CURRICULUM_CONFIG")
    config = load_config_file(Path(config_path)) if config_path else CurriculumConfig()

    logger.info(f"Copying curriculum files from {root} to {dest}...")
    copied = publish_documents(root, dest, config)
    logger.info(f"Copied {len(copied)} files")


if __name__ == "__main__":
    main()
