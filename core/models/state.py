"""
Layer State Model.

Exports:
    LayerState: Interaction state owned by exactly one overlay
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass
class LayerState:
    """
    Interaction state of one rendered overlay.

    Owned by a single overlay and mutated only by the behavior engine and
    the transition functions in core.logic.transitions. Never share one
    instance between overlays.

    filtered_out holds geometries removed from the sibling group by a
    filter behavior. They are restored (not recreated) on reset, so
    membership uses identity.
    """

    is_clicked: bool = False
    is_double_clicked: bool = False
    locked_on_id: Optional[Any] = None
    filtered_out: List[Any] = field(default_factory=list)

    @property
    def is_locked(self) -> bool:
        return self.locked_on_id is not None

    @property
    def is_filtered(self) -> bool:
        return bool(self.filtered_out)

    def add_filtered(self, geometry: Any) -> None:
        """Track a removed geometry once."""
        if not any(g is geometry for g in self.filtered_out):
            self.filtered_out.append(geometry)

    def drain_filtered(self) -> List[Any]:
        """Return every filtered geometry and clear the collection."""
        drained = self.filtered_out
        self.filtered_out = []
        return drained
