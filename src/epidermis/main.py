"""
Command-line interface for the epidermis simulation.

Usage:
    python -m epidermis.main --help
    python -m epidermis.main --steps 1
    python -m epidermis.main --num-cells 2 --steps 12 --growth-rate 1.0 --print-metrics
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import Config
from .errors import EpidermisError
from .metrics import compute_all_metrics, print_metrics_summary
from .simulation import Simulation
from .visualization import save_population_image


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with all options."""
    parser = argparse.ArgumentParser(
        description="Epidermis - agent-based epidermal renewal simulation",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # Basic options
    parser.add_argument(
        "--steps", type=int, default=1,
        help="Number of simulation steps"
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Random seed for reproducibility"
    )
    parser.add_argument(
        "--no-progress", action="store_true",
        help="Hide the progress bar"
    )

    # Output options
    parser.add_argument(
        "--save-frames", type=str, default=None,
        help="Directory to save population images"
    )
    parser.add_argument(
        "--save-interval", type=int, default=1,
        help="Save frame every N steps"
    )
    parser.add_argument(
        "--print-metrics", action="store_true",
        help="Print all metrics at end"
    )
    parser.add_argument(
        "--save-metrics", type=str, default=None,
        help="Save metrics to JSON file"
    )
    parser.add_argument(
        "--save-state", type=str, default=None,
        help="Save final cell table to JSON file"
    )

    # Config parameter overrides
    parser.add_argument("--min-bound", type=float, default=None, dest="min_bound")
    parser.add_argument("--max-bound", type=float, default=None, dest="max_bound")
    parser.add_argument("--num-cells", type=int, default=None, dest="num_cells")
    parser.add_argument("--initial-diameter", type=float, default=None, dest="initial_diameter")
    parser.add_argument(
        "--initial-cell-type", type=int, default=None, choices=[1, 2, 3],
        dest="initial_cell_type"
    )
    parser.add_argument("--stem-renewal-diameter", type=float, default=None, dest="stem_renewal_diameter")
    parser.add_argument("--stem-commitment-diameter", type=float, default=None, dest="stem_commitment_diameter")
    parser.add_argument("--ta-renewal-diameter", type=float, default=None, dest="ta_renewal_diameter")
    parser.add_argument("--ta-commitment-diameter", type=float, default=None, dest="ta_commitment_diameter")
    parser.add_argument("--differentiation-diameter", type=float, default=None, dest="differentiation_diameter")
    parser.add_argument("--growth-rate", type=float, default=None, dest="growth_rate")
    parser.add_argument("--workers", type=int, default=None)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_args(args)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    print("Epidermis Simulation")
    print(f"  Bounds: [{config.min_bound}, {config.max_bound}]")
    print(f"  Cells: {config.num_cells}")
    print(f"  Steps: {args.steps}")
    print()

    # Create simulation
    sim = Simulation(config, seed=args.seed)
    print(f"Random seed {sim.seed}")
    print(f"Stem cells created: {len(sim.population)}")
    print()

    # Frame saving callback
    frame_callback = None
    if args.save_frames:
        output_dir = Path(args.save_frames)
        bounds = (config.min_bound, config.max_bound)
        save_population_image(sim.population, str(output_dir), "frame", 0, bounds=bounds)

        def frame_callback(s: Simulation) -> None:
            save_population_image(s.population, str(output_dir), "frame", s.step_count, bounds=bounds)
            print(f"  Saved frame at step {s.step_count}")

    # Run simulation
    print("Running simulation...")
    try:
        sim.run(
            args.steps,
            callback=frame_callback,
            callback_interval=args.save_interval,
            show_progress=not args.no_progress,
        )
    except EpidermisError as e:
        print(f"Simulation error: {e}", file=sys.stderr)
        return 1

    print()

    if args.print_metrics or args.save_metrics:
        metrics = compute_all_metrics(sim.population)

        if args.print_metrics:
            print_metrics_summary(metrics)

        if args.save_metrics:
            with open(args.save_metrics, "w") as f:
                json.dump(metrics, f, indent=2)
            print(f"Metrics saved to {args.save_metrics}")

    if args.save_state:
        with open(args.save_state, "w") as f:
            json.dump(sim.get_state_dict(), f, indent=2)
        print(f"State saved to {args.save_state}")

    print("Simulation completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
