"""
Metrics and analysis utilities for the epidermis model.

Provides quantitative summaries of the population.
"""

import numpy as np

from .lineage import CellType
from .population import Population


def cell_type_counts(population: Population) -> dict[str, int]:
    """
    Count cells of each differentiation type.

    Args:
        population: Cell population

    Returns:
        Dictionary keyed by type label
    """
    return {cell_type.label: count for cell_type, count in population.count_by_type().items()}


def cell_type_fractions(population: Population) -> dict[str, float]:
    """
    Fraction of the population in each differentiation type.

    Args:
        population: Cell population

    Returns:
        Dictionary keyed by type label; all zero for an empty population
    """
    counts = cell_type_counts(population)
    total = sum(counts.values())
    if total == 0:
        return {label: 0.0 for label in counts}
    return {label: count / total for label, count in counts.items()}


def division_statistics(population: Population) -> dict[str, int]:
    """Cells still in the division cycle, per proliferating type."""
    dividing = {CellType.STEM: 0, CellType.TRANSIT_AMPLIFYING: 0}
    for cell in population:
        if cell.can_divide and cell.cell_type in dividing:
            dividing[cell.cell_type] += 1
    return {
        "can_divide": sum(1 for cell in population if cell.can_divide),
        "dividing_stem": dividing[CellType.STEM],
        "dividing_transit_amplifying": dividing[CellType.TRANSIT_AMPLIFYING],
        "daughters": sum(1 for cell in population if cell.parent_uid is not None),
    }


def diameter_statistics(population: Population) -> dict[str, float]:
    """
    Diameter distribution of the population.

    Args:
        population: Cell population

    Returns:
        Dictionary with mean, std, min and max diameter
    """
    diameters = np.array([cell.diameter for cell in population], dtype=np.float64)
    if diameters.size == 0:
        return {"mean": 0.0, "std": 0.0, "min": 0.0, "max": 0.0}
    return {
        "mean": float(np.mean(diameters)),
        "std": float(np.std(diameters)),
        "min": float(np.min(diameters)),
        "max": float(np.max(diameters)),
    }


def spatial_extent(population: Population) -> dict[str, list[float]]:
    """Bounding box of cell positions as min/max per axis."""
    positions = np.array([cell.position for cell in population], dtype=np.float64)
    if positions.size == 0:
        return {"min": [0.0, 0.0, 0.0], "max": [0.0, 0.0, 0.0]}
    return {
        "min": positions.min(axis=0).tolist(),
        "max": positions.max(axis=0).tolist(),
    }


def compute_all_metrics(population: Population) -> dict:
    """
    Compute all available metrics.

    Args:
        population: Cell population

    Returns:
        Comprehensive dictionary of all metrics
    """
    return {
        "total_cells": len(population),
        "types": {
            "counts": cell_type_counts(population),
            "fractions": cell_type_fractions(population),
        },
        "division": division_statistics(population),
        "diameter": diameter_statistics(population),
        "extent": spatial_extent(population),
    }


def print_metrics_summary(metrics: dict) -> None:
    """
    Print formatted metrics summary.

    Args:
        metrics: Output from compute_all_metrics
    """
    print("\n=== Epidermis Metrics Summary ===\n")

    print(f"Cells: {metrics['total_cells']}")

    print("\nTypes:")
    for label, count in metrics['types']['counts'].items():
        fraction = metrics['types']['fractions'][label]
        print(f"  {label}: {count} ({fraction:.1%})")

    print("\nDivision:")
    division = metrics['division']
    print(f"  Can divide: {division['can_divide']}")
    print(f"  Daughters: {division['daughters']}")

    print("\nDiameter:")
    diameter = metrics['diameter']
    print(f"  mean={diameter['mean']:.3f}, std={diameter['std']:.3f}")
    print(f"  range=[{diameter['min']:.3f}, {diameter['max']:.3f}]")

    print()
