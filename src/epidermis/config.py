"""
Configuration dataclass for epidermis simulation parameters.

Defaults reproduce the reference epidermis model: a 0-250 bounded space
seeded with 200 stem cells of diameter 2.
"""

from dataclasses import dataclass, asdict
from typing import Any
import math

from .errors import InvalidArgument
from .lineage import CellType, as_cell_type


@dataclass
class Config:
    """
    Complete configuration for an epidermis simulation.

    Attributes:
        min_bound: Lower bound of the simulation space on every axis
        max_bound: Upper bound of the simulation space on every axis

        # Initial population
        num_cells: Number of seeded cells
        initial_diameter: Diameter of seeded cells
        initial_cell_type: Type code of seeded cells (1=stem, 2=TA, 3=differentiated)

        # Division thresholds (on the mother's diameter)
        stem_renewal_diameter: Stem cells below this size divide into stem cells
        stem_commitment_diameter: Stem cells below this size divide into TA cells
        ta_renewal_diameter: TA cells below this size divide into TA cells
        ta_commitment_diameter: TA cells below this size divide into differentiated cells
        differentiation_diameter: Differentiated cells above this size re-assert their type

        # Driver
        growth_rate: Diameter added to every cell after each step
        workers: Threads used to run behaviors within a step
    """

    # Space
    min_bound: float = 0.0
    max_bound: float = 250.0

    # Initial population
    num_cells: int = 200
    initial_diameter: float = 2.0
    initial_cell_type: int = 1

    # Division thresholds
    stem_renewal_diameter: float = 5.0
    stem_commitment_diameter: float = 8.0
    ta_renewal_diameter: float = 8.0
    ta_commitment_diameter: float = 10.0
    differentiation_diameter: float = 10.0

    # Driver
    growth_rate: float = 0.0
    workers: int = 1

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        self._validate()

    def _validate(self) -> None:
        """Check that all parameters are in valid ranges."""
        if not (math.isfinite(self.min_bound) and math.isfinite(self.max_bound)):
            raise InvalidArgument(
                f"min_bound and max_bound must be finite, got {self.min_bound}, {self.max_bound}"
            )

        if self.min_bound > self.max_bound:
            raise InvalidArgument(
                f"min_bound must be <= max_bound, got {self.min_bound} > {self.max_bound}"
            )

        if self.num_cells < 0:
            raise InvalidArgument(f"num_cells must be >= 0, got {self.num_cells}")

        if self.initial_diameter < 0:
            raise InvalidArgument(f"initial_diameter must be >= 0, got {self.initial_diameter}")

        as_cell_type(self.initial_cell_type)

        for name in (
            "stem_renewal_diameter",
            "stem_commitment_diameter",
            "ta_renewal_diameter",
            "ta_commitment_diameter",
            "differentiation_diameter",
        ):
            if getattr(self, name) <= 0:
                raise InvalidArgument(f"{name} must be > 0, got {getattr(self, name)}")

        if self.stem_renewal_diameter > self.stem_commitment_diameter:
            raise InvalidArgument(
                "stem_renewal_diameter must be <= stem_commitment_diameter, got "
                f"{self.stem_renewal_diameter} > {self.stem_commitment_diameter}"
            )

        if self.ta_renewal_diameter > self.ta_commitment_diameter:
            raise InvalidArgument(
                "ta_renewal_diameter must be <= ta_commitment_diameter, got "
                f"{self.ta_renewal_diameter} > {self.ta_commitment_diameter}"
            )

        if self.growth_rate < 0:
            raise InvalidArgument(f"growth_rate must be >= 0, got {self.growth_rate}")

        if self.workers < 1:
            raise InvalidArgument(f"workers must be >= 1, got {self.workers}")

    @property
    def seed_cell_type(self) -> CellType:
        """Initial cell type as a CellType."""
        return as_cell_type(self.initial_cell_type)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Config":
        """Create config from dictionary."""
        return cls(**d)

    @classmethod
    def from_args(cls, args: Any) -> "Config":
        """Create config from argparse namespace."""
        # Extract only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        config_dict = {k: v for k, v in vars(args).items() if k in known_fields and v is not None}
        return cls(**config_dict)

    def __repr__(self) -> str:
        return (
            f"Config(\n"
            f"  bounds=[{self.min_bound}, {self.max_bound}],\n"
            f"  num_cells={self.num_cells}, initial_diameter={self.initial_diameter}, "
            f"initial_cell_type={self.initial_cell_type},\n"
            f"  stem=({self.stem_renewal_diameter}, {self.stem_commitment_diameter}), "
            f"ta=({self.ta_renewal_diameter}, {self.ta_commitment_diameter}), "
            f"differentiated={self.differentiation_diameter},\n"
            f"  growth_rate={self.growth_rate}, workers={self.workers}\n"
            f")"
        )
