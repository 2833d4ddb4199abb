"""
Phasebook Schemas - Pydantic models for the curriculum viewer.

This module exports all schema classes for:
- Curriculum: difficulty tiers, modules, phases, the curriculum tree
- Config: scan configuration and its default tables
"""

# Curriculum schemas
from .curriculum import (
    Difficulty,
    Module,
    Phase,
    CurriculumTree,
)

# Config schemas
from .config import (
    CurriculumConfig,
    DifficultyBand,
    DEFAULT_PHASE_DIRECTORIES,
    DEFAULT_PHASE_COLORS,
    DEFAULT_CAPITALIZATION_EXCEPTIONS,
    DEFAULT_DIFFICULTY_BANDS,
)

__all__ = [
    # Curriculum
    'Difficulty',
    'Module',
    'Phase',
    'CurriculumTree',
    # Config
    'CurriculumConfig',
    'DifficultyBand',
    'DEFAULT_PHASE_DIRECTORIES',
    'DEFAULT_PHASE_COLORS',
    'DEFAULT_CAPITALIZATION_EXCEPTIONS',
    'DEFAULT_DIFFICULTY_BANDS',
]
