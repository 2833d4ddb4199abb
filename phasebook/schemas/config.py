"""
Configuration schema for Phasebook.

Everything a scan depends on besides the filesystem lives here:
- Canonical phase folder order and the color palette
- Capitalization exceptions used when decoding module slugs
- The designated overview document and its literal slug
- Difficulty bands keyed by phase number

A CurriculumConfig is frozen and passed explicitly to the walker, codec,
assembler and content boundary.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator, model_validator

from .curriculum import Difficulty

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

DEFAULT_TITLE = "Comprehensive Coding Curriculum - Property Analysis Platform"
DEFAULT_DESCRIPTION = (
    "A sophisticated curriculum designed around enterprise-level web development, "
    "GIS technologies, 3D visualisation, database systems, and cloud deployment."
)

DEFAULT_PHASE_DIRECTORIES = (
    "Phase-0-Absolute-Beginnings",
    "Phase-1-Foundation-Technologies",
    "Phase-2-React-Development-Mastery",
    "Phase-3-Geographic-Information-Systems",
    "Phase-4-3D-Visualisation-and-Graphics",
    "Phase-5-Database-Systems-and-Backend",
    "Phase-6-Build-Tools-and-Development-Workflow",
    "Phase-7-Cloud-Deployment-and-DevOps",
    "Phase-8-Advanced-Integration-Patterns",
)

DEFAULT_PHASE_COLORS = (
    "from-green-400 to-green-600",
    "from-blue-400 to-blue-600",
    "from-purple-400 to-purple-600",
    "from-teal-400 to-teal-600",
    "from-orange-400 to-orange-600",
    "from-red-400 to-red-600",
    "from-indigo-400 to-indigo-600",
    "from-pink-400 to-pink-600",
    "from-yellow-400 to-yellow-600",
)

# Title words that plain capitalization would get wrong
DEFAULT_CAPITALIZATION_EXCEPTIONS = {
    "typescript": "TypeScript",
    "javascript": "JavaScript",
    "html": "HTML",
    "css": "CSS",
    "api": "API",
    "ui": "UI",
    "gis": "GIS",
    "ci": "CI",
    "cd": "CD",
    "devops": "DevOps",
    "nodejs": "NodeJS",
    "npm": "NPM",
}

DEFAULT_MODULE_PATTERN = r"^Module-\d+\.\d+-.+\.md$"
DEFAULT_MODULE_DESCRIPTION = "Comprehensive module covering essential development concepts."


class DifficultyBand(BaseModel):
    """Inclusive range of phase numbers mapped to one difficulty tier."""
    model_config = ConfigDict(frozen=True)

    first_phase: int = Field(..., ge=0)
    last_phase: int = Field(..., ge=0)
    difficulty: Difficulty

    @model_validator(mode="after")
    def range_ordered(self):
        if self.last_phase < self.first_phase:
            raise ValueError("Invalid band: last_phase must be >= first_phase")
        return self

    def contains(self, phase_number: int) -> bool:
        return self.first_phase <= phase_number <= self.last_phase


DEFAULT_DIFFICULTY_BANDS = (
    DifficultyBand(first_phase=0, last_phase=1, difficulty=Difficulty.BEGINNER),
    DifficultyBand(first_phase=2, last_phase=5, difficulty=Difficulty.INTERMEDIATE),
)


# -----------------------------------------------------------------------------
# Config model
# -----------------------------------------------------------------------------


class CurriculumConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = DEFAULT_TITLE
    description: str = DEFAULT_DESCRIPTION
    phase_directories: tuple[str, ...] = DEFAULT_PHASE_DIRECTORIES
    phase_colors: tuple[str, ...] = DEFAULT_PHASE_COLORS
    capitalization_exceptions: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_CAPITALIZATION_EXCEPTIONS)
    )
    overview_document: str = "Core-Syntax-Overview.md"
    overview_id: str = "core-syntax-overview"
    module_prefix: str = "module-"
    module_pattern: str = DEFAULT_MODULE_PATTERN
    readme_document: str = "README.md"
    difficulty_bands: tuple[DifficultyBand, ...] = DEFAULT_DIFFICULTY_BANDS
    default_difficulty: Difficulty = Difficulty.ADVANCED
    default_module_description: str = DEFAULT_MODULE_DESCRIPTION

    _module_regex: re.Pattern = PrivateAttr()

    def model_post_init(self, __context) -> None:
        self._module_regex = re.compile(self.module_pattern)

    @field_validator("phase_colors")
    @classmethod
    def palette_not_empty(cls, v):
        if not v:
            raise ValueError("phase_colors must contain at least one color token")
        return v

    @field_validator("capitalization_exceptions")
    @classmethod
    def exceptions_round_trip(cls, v):
        # decode renders the value, encode lowercases it: both must agree
        normalized = {}
        for token, rendering in v.items():
            if rendering.lower() != token.lower():
                raise ValueError(
                    f"Capitalization exception '{token}' -> '{rendering}' "
                    "must differ only in case"
                )
            normalized[token.lower()] = rendering
        return normalized

    @field_validator("module_pattern")
    @classmethod
    def pattern_compiles(cls, v):
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid module_pattern: {e}") from e
        return v

    @property
    def module_regex(self) -> re.Pattern:
        return self._module_regex

    def phase_id(self, position: int) -> str:
        return f"phase-{position}"

    def phase_directory(self, phase_id: str) -> str | None:
        """Map a phase slug (phase-<n>) back to its canonical folder name."""
        for position, directory in enumerate(self.phase_directories):
            if self.phase_id(position) == phase_id:
                return directory
        return None

    def phase_color(self, position: int) -> str:
        return self.phase_colors[position % len(self.phase_colors)]

    def is_module_document(self, filename: str) -> bool:
        return filename == self.overview_document or bool(self.module_regex.match(filename))
