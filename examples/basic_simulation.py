#!/usr/bin/env python3
"""
Basic epidermis simulation example.

This script demonstrates:
1. Creating a simulation with custom parameters
2. Running the simulation with cell growth
3. Following the stem -> TA -> differentiated progression
4. Saving a picture of the final population
"""

from epidermis import Config, CellType
from epidermis.simulation import Simulation
from epidermis.metrics import compute_all_metrics, print_metrics_summary, cell_type_counts
from epidermis.visualization import save_population_image


def main():
    print("=" * 60)
    print("Epidermis - Epidermal Tissue Renewal")
    print("Basic Simulation Example")
    print("=" * 60)
    print()

    # Create configuration
    config = Config(
        min_bound=0.0,
        max_bound=250.0,
        num_cells=2,           # Each seed cell ends up as 176 cells
        initial_diameter=2.0,
        growth_rate=1.0,       # Diameter gained per step
    )

    print("Configuration:")
    print(f"  Bounds: [{config.min_bound}, {config.max_bound}]")
    print(f"  Initial cells: {config.num_cells}")
    print(f"  Growth rate: {config.growth_rate}")
    print()

    sim = Simulation(config, seed=42)

    print("Running simulation for 12 steps...")

    def progress_callback(s: Simulation):
        counts = cell_type_counts(s.population)
        print(f"  Step {s.step_count}: {counts}")

    sim.run(
        steps=12,
        callback=progress_callback,
        callback_interval=3,
        show_progress=True,
    )
    print()

    metrics = compute_all_metrics(sim.population)
    print_metrics_summary(metrics)

    differentiated = len(sim.population.get_by_type(CellType.DIFFERENTIATED))
    if differentiated > 0:
        print(f"✓ Differentiated cells formed: {differentiated}")
    else:
        print("✗ No differentiated cells yet (try more steps or faster growth)")

    path = save_population_image(
        sim.population, "output", "population", sim.step_count,
        bounds=(config.min_bound, config.max_bound),
    )
    print(f"Saved {path}")
    print()


if __name__ == "__main__":
    main()
