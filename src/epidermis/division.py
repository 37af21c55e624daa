"""
Division event shared by all behavior modules.

The protocol only spawns and registers the daughter. Deciding whether a
division is legal and which type the daughter takes belongs to the caller.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .agent import CellAgent
    from .population import Population


def divide(mother: "CellAgent", population: "Population") -> "CellAgent":
    """
    Spawn a daughter from a mother cell.

    The daughter is a copy of the mother's placement and state, including
    ``can_divide``; the calling behavior overwrites type and flag afterwards.
    It is appended to the population's pending buffer and only becomes
    visible once the population commits.

    Args:
        mother: Dividing cell
        population: Container that will own the daughter

    Returns:
        The new daughter cell
    """
    daughter = mother.copy_for_division()
    population.append(daughter)
    return daughter
