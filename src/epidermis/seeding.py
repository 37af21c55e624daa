"""
Bulk creation of an initial cell population.

Cells are placed at random on the x and y axes only; z starts at 0 and the
mechanics engine moves cells to their resting height afterwards. All cells
are staged and committed as one batch.
"""

import math
from typing import TYPE_CHECKING, Callable

from .agent import CellAgent, Position
from .errors import InconsistentState, InvalidArgument
from .lineage import CellType

if TYPE_CHECKING:
    from .simulation import Simulation

CellBuilder = Callable[[Position], CellAgent]


def create_cells(
    context: "Simulation",
    min_bound: float,
    max_bound: float,
    num_cells: int,
    cell_builder: CellBuilder,
) -> list[CellAgent]:
    """
    Seed cells uniformly over a square region of the z = 0 plane.

    Either every cell is committed or none is: if the builder fails, the
    staged batch is discarded and the error propagates.

    Args:
        context: Simulation providing the population and random source
        min_bound: Lower bound for x and y
        max_bound: Upper bound for x and y
        num_cells: Number of cells to create
        cell_builder: Function mapping a position to a fully set-up cell

    Returns:
        The committed cells, in creation order

    Raises:
        InvalidArgument: On negative counts, inverted or non-finite bounds,
            or a builder that does not return a CellAgent
        InconsistentState: If other agents are already staged for commit
    """
    if isinstance(num_cells, bool) or not isinstance(num_cells, int):
        raise InvalidArgument(f"num_cells must be an integer, got {num_cells!r}")
    if num_cells < 0:
        raise InvalidArgument(f"num_cells must be >= 0, got {num_cells}")
    if not (math.isfinite(min_bound) and math.isfinite(max_bound)):
        raise InvalidArgument(f"bounds must be finite, got [{min_bound}, {max_bound}]")
    if min_bound > max_bound:
        raise InvalidArgument(f"min_bound must be <= max_bound, got {min_bound} > {max_bound}")

    population = context.population
    if population.pending_count:
        raise InconsistentState(
            f"cannot seed while {population.pending_count} agents are staged for commit"
        )
    population.reserve(num_cells)

    if num_cells == 0:
        population.commit()
        return []

    xs = context.random.uniform(min_bound, max_bound, size=num_cells)
    ys = context.random.uniform(min_bound, max_bound, size=num_cells)

    created = []
    try:
        for x, y in zip(xs, ys):
            cell = cell_builder((x, y, 0.0))
            if not isinstance(cell, CellAgent):
                raise InvalidArgument(
                    f"cell_builder must return a CellAgent, got {type(cell).__name__}"
                )
            population.append(cell)
            created.append(cell)
    except Exception:
        population.discard()
        raise

    population.commit()
    return created


def make_cell_builder(
    diameter: float = 2.0,
    cell_type: CellType = CellType.STEM,
) -> CellBuilder:
    """Builder for cells of one type and a fixed diameter."""

    def build(position: Position) -> CellAgent:
        return CellAgent(position=position, diameter=diameter, cell_type=cell_type)

    return build
