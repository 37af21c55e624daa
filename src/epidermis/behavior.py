"""
Behavior modules driving the epidermal lineage.

One module per differentiation type. Each is re-evaluated once per step for
every live agent; the state lives on the agent (cell_type, can_divide), never
in the module, so a single instance of each variant is shared by all agents.

Division rules, on the mother's diameter at decision time (first match wins):

    Stem:               d < 5  -> Stem daughter
                        d < 8  -> TransitAmplifying daughter
                        else   -> stop dividing
    TransitAmplifying:  d < 8  -> TransitAmplifying daughter
                        d < 10 -> Differentiated daughter
                        else   -> stop dividing
    Differentiated:     never divides; d > 10 re-asserts Differentiated
"""

from typing import TYPE_CHECKING

from .division import divide
from .errors import InconsistentState
from .lineage import CellType, as_cell_type, type_label

if TYPE_CHECKING:
    from .agent import CellAgent
    from .simulation import Simulation


class BehaviorModule:
    """
    Base class for per-type behavior.

    Subclasses set ``cell_type`` and implement ``_step``.
    """

    cell_type: CellType

    def run(self, cell: "CellAgent", context: "Simulation") -> None:
        """
        Execute one simulation step for a cell.

        Args:
            cell: Agent this module is attached to
            context: Simulation providing config and population

        Raises:
            InconsistentState: If the cell's type does not match this module
        """
        if cell.cell_type != self.cell_type:
            raise InconsistentState(
                f"{type(self).__name__} attached to cell {cell.uid} "
                f"of type {type_label(cell.cell_type)}"
            )
        self._step(cell, context)

    def _step(self, cell: "CellAgent", context: "Simulation") -> None:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class _DividingBehavior(BehaviorModule):
    """Shared decision shape for the two proliferating stages."""

    # Daughter type for the self-renewal and commitment bands
    renewal_type: CellType
    commitment_type: CellType

    def thresholds(self, context: "Simulation") -> tuple[float, float]:
        raise NotImplementedError

    def _step(self, cell: "CellAgent", context: "Simulation") -> None:
        if not cell.can_divide:
            return

        renewal_limit, commitment_limit = self.thresholds(context)

        if cell.diameter < renewal_limit:
            daughter = divide(cell, context.population)
            daughter.set_cell_type(self.renewal_type)
            daughter.can_divide = True
        elif cell.diameter < commitment_limit:
            daughter = divide(cell, context.population)
            daughter.set_cell_type(self.commitment_type)
            daughter.can_divide = True
        else:
            cell.can_divide = False


class StemCell(_DividingBehavior):
    """Stem cells self-renew while small, then commit to transit-amplifying."""

    cell_type = CellType.STEM
    renewal_type = CellType.STEM
    commitment_type = CellType.TRANSIT_AMPLIFYING

    def thresholds(self, context: "Simulation") -> tuple[float, float]:
        config = context.config
        return config.stem_renewal_diameter, config.stem_commitment_diameter


class TransitAmplifying(_DividingBehavior):
    """TA cells self-renew while small, then produce differentiated cells."""

    cell_type = CellType.TRANSIT_AMPLIFYING
    renewal_type = CellType.TRANSIT_AMPLIFYING
    commitment_type = CellType.DIFFERENTIATED

    def thresholds(self, context: "Simulation") -> tuple[float, float]:
        config = context.config
        return config.ta_renewal_diameter, config.ta_commitment_diameter


class DifferentiatedCell(BehaviorModule):
    """Terminal stage: no division."""

    cell_type = CellType.DIFFERENTIATED

    def _step(self, cell: "CellAgent", context: "Simulation") -> None:
        if cell.diameter > context.config.differentiation_diameter:
            cell.set_cell_type(CellType.DIFFERENTIATED)


BEHAVIORS: dict[CellType, BehaviorModule] = {
    CellType.STEM: StemCell(),
    CellType.TRANSIT_AMPLIFYING: TransitAmplifying(),
    CellType.DIFFERENTIATED: DifferentiatedCell(),
}


def behavior_for(cell_type) -> BehaviorModule:
    """Return the behavior module registered for a differentiation type."""
    return BEHAVIORS[as_cell_type(cell_type)]
