"""
Pytest configuration and fixtures for epidermis tests.
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from epidermis.agent import CellAgent
from epidermis.config import Config
from epidermis.lineage import CellType
from epidermis.simulation import Simulation


@pytest.fixture
def default_config() -> Config:
    """Default configuration for tests."""
    return Config()


@pytest.fixture
def small_config() -> Config:
    """Small population for fast tests."""
    return Config(num_cells=10)


@pytest.fixture
def empty_sim() -> Simulation:
    """Simulation with no seeded cells, used as behavior context."""
    return Simulation(Config(num_cells=0), seed=42)


@pytest.fixture
def default_sim(default_config: Config) -> Simulation:
    """Simulation seeded with the default 200 stem cells."""
    return Simulation(default_config, seed=42)


@pytest.fixture
def make_cell(empty_sim: Simulation):
    """Factory adding one committed cell to empty_sim."""

    def make(
        diameter: float,
        cell_type: CellType = CellType.STEM,
        can_divide: bool = True,
        position=(10.0, 20.0, 0.0),
    ) -> CellAgent:
        cell = CellAgent(
            position=position,
            diameter=diameter,
            cell_type=cell_type,
            can_divide=can_divide,
        )
        empty_sim.population.append(cell)
        empty_sim.population.commit()
        return cell

    return make
