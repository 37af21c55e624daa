"""
Cell agent representation.

An agent carries:
- Position in 3D space (moved by the surrounding mechanics engine)
- Diameter (grown by the surrounding engine, read by behaviors)
- Differentiation type and divisibility flag
- The behavior module bound to its type
"""

import dataclasses
import math
from dataclasses import dataclass
from typing import Optional, Union

from .behavior import BehaviorModule, behavior_for
from .errors import InconsistentState, InvalidArgument
from .lineage import CellType, as_cell_type, type_label

Position = tuple[float, float, float]


@dataclass
class CellAgent:
    """
    A single simulated epidermal cell.

    ``behavior`` defaults to the module registered for ``cell_type``. Use
    ``set_cell_type`` to change the type so both fields move together.

    Attributes:
        position: (x, y, z) coordinates
        diameter: Cell diameter, non-negative
        cell_type: Lineage stage
        can_divide: False once the cell has left the division cycle
        behavior: Behavior module run once per step
        uid: Identifier assigned by the population on commit
        parent_uid: uid of the mother, None for seeded cells
    """

    position: Position
    diameter: float
    cell_type: CellType = CellType.STEM
    can_divide: bool = True
    behavior: Optional[BehaviorModule] = None
    uid: Optional[int] = None
    parent_uid: Optional[int] = None

    def __post_init__(self) -> None:
        if len(self.position) != 3:
            raise InvalidArgument(f"position must have 3 coordinates, got {self.position!r}")
        self.position = tuple(float(c) for c in self.position)

        if not math.isfinite(self.diameter) or self.diameter < 0:
            raise InvalidArgument(f"diameter must be finite and >= 0, got {self.diameter}")
        self.diameter = float(self.diameter)

        self.cell_type = as_cell_type(self.cell_type)
        if self.behavior is None:
            self.behavior = behavior_for(self.cell_type)

    # Accessors mirroring the engine-facing surface

    def get_can_divide(self) -> bool:
        return self.can_divide

    def set_can_divide(self, value: bool) -> None:
        self.can_divide = bool(value)

    def get_cell_type(self) -> int:
        return int(self.cell_type)

    def set_cell_type(self, cell_type: Union[int, str, CellType]) -> None:
        """
        Set the differentiation type and rebind the matching behavior.

        Args:
            cell_type: New type (CellType, code 1-3, or label)

        Raises:
            InvalidArgument: If the type is unknown or would move the cell
                back along the lineage
        """
        new_type = as_cell_type(cell_type)
        if new_type < self.cell_type:
            raise InvalidArgument(
                f"cell type cannot regress from {type_label(self.cell_type)} to {new_type.label}"
            )
        self.cell_type = new_type
        self.behavior = behavior_for(new_type)

    def check_consistency(self) -> None:
        """Raise InconsistentState if the behavior does not match the type."""
        if self.behavior is None or self.behavior.cell_type != self.cell_type:
            raise InconsistentState(
                f"cell {self.uid} has type {type_label(self.cell_type)} "
                f"but behavior {self.behavior!r}"
            )

    def copy_for_division(self) -> "CellAgent":
        """Uncommitted copy of this cell, parented to it."""
        return dataclasses.replace(self, uid=None, parent_uid=self.uid)

    def run(self, context) -> None:
        """Run the attached behavior for one step."""
        self.behavior.run(self, context)

    def snapshot(self) -> dict:
        """Return lightweight snapshot dictionary for serialization."""
        return {
            "uid": self.uid,
            "parent_uid": self.parent_uid,
            "x": self.position[0],
            "y": self.position[1],
            "z": self.position[2],
            "diameter": self.diameter,
            "cell_type": int(self.cell_type),
            "can_divide": self.can_divide,
        }
