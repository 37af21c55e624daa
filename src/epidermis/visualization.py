"""
Visualization utilities for the epidermis model.

Renders the population as a top-down scatter plot, one colour per type.
"""

from pathlib import Path
from typing import Optional

import numpy as np
import matplotlib.pyplot as plt

from .lineage import CellType
from .population import Population

TYPE_COLORS = {
    CellType.STEM: "#d62728",
    CellType.TRANSIT_AMPLIFYING: "#ff7f0e",
    CellType.DIFFERENTIATED: "#1f77b4",
}


def population_to_arrays(population: Population) -> dict[str, np.ndarray]:
    """
    Convert a population to column arrays.

    Args:
        population: Cell population

    Returns:
        Dictionary with positions [N, 3], diameters [N], types [N], can_divide [N]
    """
    cells = population.agents
    return {
        "positions": np.array([c.position for c in cells], dtype=np.float64).reshape(-1, 3),
        "diameters": np.array([c.diameter for c in cells], dtype=np.float64),
        "types": np.array([int(c.cell_type) for c in cells], dtype=np.int64),
        "can_divide": np.array([c.can_divide for c in cells], dtype=bool),
    }


def plot_population(
    population: Population,
    ax: Optional[plt.Axes] = None,
    bounds: Optional[tuple[float, float]] = None,
    title: Optional[str] = None,
) -> plt.Axes:
    """
    Scatter plot of cells in the x-y plane.

    Marker area follows diameter; cells that stopped dividing are drawn hollow.

    Args:
        population: Cell population
        ax: Axes to draw on (a new figure is created if None)
        bounds: Optional (min, max) axis limits
        title: Optional plot title

    Returns:
        The axes drawn on
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    arrays = population_to_arrays(population)
    positions = arrays["positions"]

    for cell_type, color in TYPE_COLORS.items():
        mask = arrays["types"] == int(cell_type)
        if not np.any(mask):
            continue
        sizes = 4.0 * arrays["diameters"][mask] ** 2
        active = arrays["can_divide"][mask]
        xy = positions[mask]
        ax.scatter(xy[active, 0], xy[active, 1], s=sizes[active], c=color, label=cell_type.label)
        ax.scatter(
            xy[~active, 0], xy[~active, 1], s=sizes[~active],
            facecolors="none", edgecolors=color,
        )

    if bounds is not None:
        ax.set_xlim(*bounds)
        ax.set_ylim(*bounds)
    ax.set_aspect("equal")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    if title:
        ax.set_title(title)
    if len(population):
        ax.legend(loc="upper right", fontsize=8)

    return ax


def save_population_image(
    population: Population,
    output_dir: str,
    prefix: str = "frame",
    step: int = 0,
    bounds: Optional[tuple[float, float]] = None,
) -> Path:
    """
    Save a population scatter plot as a PNG.

    Args:
        population: Cell population
        output_dir: Output directory
        prefix: Filename prefix
        step: Step number for filename
        bounds: Optional (min, max) axis limits

    Returns:
        Path of the written image
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(6, 6))
    plot_population(population, ax=ax, bounds=bounds, title=f"Step {step}")
    path = output_path / f"{prefix}_{step:06d}.png"
    fig.savefig(path)
    plt.close(fig)

    return path
