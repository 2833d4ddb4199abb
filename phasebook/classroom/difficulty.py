"""Difficulty inference from a document's phase location."""

import re
from pathlib import PurePath
from typing import Iterable, Optional

from phasebook.schemas import CurriculumConfig, Difficulty, DifficultyBand
from phasebook.schemas.config import DEFAULT_DIFFICULTY_BANDS

PHASE_NUMBER_PATTERN = re.compile(r"Phase-(\d+)")


def phase_number(path: str | PurePath) -> Optional[int]:
    """First "Phase-<n>" number in the path, or None."""
    match = PHASE_NUMBER_PATTERN.search(str(path))
    if not match:
        return None
    return int(match.group(1))


def infer_difficulty(
    path: str | PurePath,
    bands: Iterable[DifficultyBand] = DEFAULT_DIFFICULTY_BANDS,
    default: Difficulty = Difficulty.ADVANCED,
) -> Difficulty:
    """
    Difficulty tier for a document path.

    Only the path is considered. The first band containing the phase number
    wins; paths without a phase number, or outside every band, get the default.
    """
    number = phase_number(path)
    if number is None:
        return default
    for band in bands:
        if band.contains(number):
            return band.difficulty
    return default


def infer_difficulty_for(path: str | PurePath, config: CurriculumConfig) -> Difficulty:
    return infer_difficulty(path, config.difficulty_bands, config.default_difficulty)
