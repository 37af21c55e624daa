"""
Epidermis - agent-based simulation of epidermal tissue renewal.

Stem, transit-amplifying and differentiated cells divide and change type
according to size-dependent rules.
"""

__version__ = "0.1.0"

from .agent import CellAgent
from .behavior import (
    BEHAVIORS,
    BehaviorModule,
    DifferentiatedCell,
    StemCell,
    TransitAmplifying,
    behavior_for,
)
from .config import Config
from .division import divide
from .errors import EpidermisError, InconsistentState, InvalidArgument
from .lineage import CellType
from .population import Population
from .rng import Random
from .seeding import create_cells, make_cell_builder
from .simulation import Simulation

__all__ = [
    "BEHAVIORS",
    "BehaviorModule",
    "CellAgent",
    "CellType",
    "Config",
    "DifferentiatedCell",
    "EpidermisError",
    "InconsistentState",
    "InvalidArgument",
    "Population",
    "Random",
    "Simulation",
    "StemCell",
    "TransitAmplifying",
    "behavior_for",
    "create_cells",
    "divide",
    "make_cell_builder",
    "__version__",
]
