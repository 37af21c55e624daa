"""
Main simulation loop for the epidermis model.

The Simulation object is the explicit context handed to every behavior:
it owns the configuration, the population and the random source.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional

from tqdm import tqdm

from .agent import CellAgent
from .config import Config
from .population import Population
from .rng import Random
from .seeding import create_cells, make_cell_builder

GrowthFunction = Callable[[CellAgent, "Simulation"], None]


def linear_growth(cell: CellAgent, context: "Simulation") -> None:
    """Grow a cell's diameter by the configured rate."""
    if context.config.growth_rate:
        cell.diameter += context.config.growth_rate


class Simulation:
    """
    Epidermis simulation manager.

    Handles population evolution and provides hooks for visualization/analysis.

    Attributes:
        config: Simulation configuration
        population: Container of all cell agents
        random: Seeded random source
        step_count: Number of steps executed
        growth: Function applied to every cell after each step
    """

    def __init__(
        self,
        config: Config,
        seed: Optional[int] = None,
        seed_population: bool = True,
        growth: Optional[GrowthFunction] = None,
    ):
        """
        Initialize simulation.

        Args:
            config: Simulation configuration
            seed: Random seed for reproducibility
            seed_population: If True, create config.num_cells initial cells
            growth: Per-step growth hook (defaults to linear_growth)
        """
        self.config = config
        self.step_count = 0
        self.random = Random(seed)
        self.seed = self.random.seed
        self.population = Population()
        self.growth = growth if growth is not None else linear_growth

        if seed_population:
            self.seed_cells()

    def seed_cells(self) -> list[CellAgent]:
        """Create the initial population described by the configuration."""
        builder = make_cell_builder(
            diameter=self.config.initial_diameter,
            cell_type=self.config.seed_cell_type,
        )
        return create_cells(
            self,
            self.config.min_bound,
            self.config.max_bound,
            self.config.num_cells,
            builder,
        )

    def step(self) -> int:
        """
        Advance simulation by one timestep.

        Update order:
            1. Snapshot the committed population
            2. Check every cell's behavior matches its type
            3. Run each cell's behavior once (daughters are only staged)
            4. Commit all daughters at once
            5. Apply growth

        Returns:
            Number of daughters produced
        """
        cells = self.population.agents

        # 2. Fail before any cell is touched
        for cell in cells:
            cell.check_consistency()

        # 3. Behaviors
        try:
            if self.config.workers > 1 and len(cells) > 1:
                with ThreadPoolExecutor(max_workers=self.config.workers) as pool:
                    # list() re-raises the first worker exception
                    list(pool.map(lambda c: c.run(self), cells))
            else:
                for cell in cells:
                    cell.run(self)
        except Exception:
            self.population.discard()
            raise

        # 4. Merge
        born = self.population.commit()

        # 5. Growth
        for cell in self.population:
            self.growth(cell, self)

        self.step_count += 1
        return born

    def run(
        self,
        steps: int,
        callback: Optional[Callable[["Simulation"], None]] = None,
        callback_interval: int = 1,
        show_progress: bool = True,
    ) -> None:
        """
        Run simulation for multiple steps.

        Args:
            steps: Number of steps to run
            callback: Optional function called periodically
            callback_interval: How often to call callback
            show_progress: Whether to show progress bar
        """
        iterator = range(steps)
        if show_progress:
            iterator = tqdm(iterator, desc="Simulating")

        for i in iterator:
            self.step()

            if callback is not None and (i + 1) % callback_interval == 0:
                callback(self)

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Reset simulation to its initial population.

        Args:
            seed: New random seed (uses original if not provided)
        """
        self.random.reset(seed)
        self.seed = self.random.seed
        self.population = Population()
        self.step_count = 0
        self.seed_cells()

    def get_state_dict(self) -> dict:
        """Get serializable state dictionary."""
        return {
            "step_count": self.step_count,
            "seed": self.seed,
            "config": self.config.to_dict(),
            "cells": [cell.snapshot() for cell in self.population],
        }
