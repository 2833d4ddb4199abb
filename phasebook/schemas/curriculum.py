"""
Curriculum schemas for Phasebook.

Defines Pydantic models for the scanned curriculum tree:
- Difficulty tiers inferred from a document's phase
- Modules (one parsed lesson document)
- Phases (canonically ordered groups of modules)
- The curriculum tree handed to the viewer

Models are frozen: a scan builds the tree once and a rescan builds a new one.
Field aliases give the camelCase shape the viewer consumes
(``tree.model_dump(by_alias=True)``).
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Difficulty(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


# -----------------------------------------------------------------------------
# Module / Phase / Tree
# -----------------------------------------------------------------------------


class Module(BaseModel):
    """One lesson document parsed into navigable metadata."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str                  # slug from the source filename
    title: str
    description: str
    learning_objectives: list[str] = Field(default=[], alias="learningObjectives")
    prerequisites: list[str] = []
    sections: list[str] = []     # level-2 headings in document order
    topics: list[str] = []       # bold-label bullets, else the sections
    projects: list[str] = []
    duration: str = "1-2 hours"
    difficulty: Difficulty


class Phase(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str                  # phase-<position in canonical order>
    title: str
    description: str
    color_token: str = Field(..., alias="color")
    modules: list[Module] = []

    def get_module(self, module_id: str) -> Optional[Module]:
        """Get a module of this phase by ID."""
        for module in self.modules:
            if module.id == module_id:
                return module
        return None


class CurriculumTree(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    phases: list[Phase] = []

    def get_phase(self, phase_id: str) -> Optional[Phase]:
        """Get a phase by ID."""
        for phase in self.phases:
            if phase.id == phase_id:
                return phase
        return None

    @property
    def module_count(self) -> int:
        return sum(len(phase.modules) for phase in self.phases)
