"""
Navigator - lookups and sequencing over a scanned curriculum.

Provides:
- Phase and module lookup by slug
- Next/previous module within a phase
- Module position within its phase
"""

from typing import Optional

from phasebook.schemas import CurriculumTree, Module, Phase


class CurriculumNavigator:
    """
    Navigate a CurriculumTree by phase and module slugs.

    The tree is immutable, so the module order is indexed once.
    """

    def __init__(self, tree: CurriculumTree):
        """
        Initialize navigator.

        Args:
            tree: Scanned curriculum tree
        """
        self.tree = tree
        self._module_order: dict[str, list[str]] = {
            phase.id: [module.id for module in phase.modules]
            for phase in tree.phases
        }

    @property
    def total_modules(self) -> int:
        """Total number of modules across all phases."""
        return sum(len(ids) for ids in self._module_order.values())

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get_phase(self, phase_id: str) -> Optional[Phase]:
        return self.tree.get_phase(phase_id)

    def get_module(self, phase_id: str, module_id: str) -> Optional[Module]:
        """Get a module by phase and module ID; None if either is unknown."""
        phase = self.get_phase(phase_id)
        if not phase:
            return None
        return phase.get_module(module_id)

    # -------------------------------------------------------------------------
    # Sequencing
    # -------------------------------------------------------------------------

    def _index(self, phase_id: str, module_id: str) -> Optional[int]:
        order = self._module_order.get(phase_id, [])
        if module_id not in order:
            return None
        return order.index(module_id)

    def get_next_module_id(self, phase_id: str, module_id: str) -> Optional[str]:
        """Get the ID of the next module in the same phase."""
        idx = self._index(phase_id, module_id)
        order = self._module_order.get(phase_id, [])
        if idx is None or idx + 1 >= len(order):
            return None
        return order[idx + 1]

    def get_previous_module_id(self, phase_id: str, module_id: str) -> Optional[str]:
        """Get the ID of the previous module in the same phase."""
        idx = self._index(phase_id, module_id)
        if idx is None or idx <= 0:
            return None
        return self._module_order[phase_id][idx - 1]

    def get_module_position(self, phase_id: str, module_id: str) -> tuple[int, int]:
        """
        Get module position in its phase as (current, total).

        Returns (0, total) if module not found.
        """
        total = len(self._module_order.get(phase_id, []))
        idx = self._index(phase_id, module_id)
        if idx is None:
            return (0, total)
        return (idx + 1, total)
