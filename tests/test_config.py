"""
Tests for epidermis configuration.
"""

import argparse

import pytest

from epidermis.config import Config
from epidermis.errors import InvalidArgument
from epidermis.lineage import CellType


class TestConfig:
    """Tests for Config dataclass."""

    def test_defaults(self):
        """Config initializes with the reference model defaults."""
        config = Config()

        assert config.min_bound == 0.0
        assert config.max_bound == 250.0
        assert config.num_cells == 200
        assert config.initial_diameter == 2.0
        assert config.initial_cell_type == 1
        assert config.stem_renewal_diameter == 5.0
        assert config.stem_commitment_diameter == 8.0
        assert config.ta_renewal_diameter == 8.0
        assert config.ta_commitment_diameter == 10.0
        assert config.differentiation_diameter == 10.0
        assert config.growth_rate == 0.0
        assert config.workers == 1

    def test_custom_values(self):
        """Config accepts custom values."""
        config = Config(min_bound=-10.0, max_bound=10.0, num_cells=5)

        assert config.min_bound == -10.0
        assert config.max_bound == 10.0
        assert config.num_cells == 5

    def test_seed_cell_type(self):
        """Initial type code maps to CellType."""
        assert Config().seed_cell_type is CellType.STEM
        assert Config(initial_cell_type=2).seed_cell_type is CellType.TRANSIT_AMPLIFYING

    def test_inverted_bounds(self):
        """Config rejects min_bound > max_bound."""
        with pytest.raises(InvalidArgument, match="min_bound"):
            Config(min_bound=10.0, max_bound=0.0)

    def test_equal_bounds_allowed(self):
        """A degenerate region is valid."""
        config = Config(min_bound=3.0, max_bound=3.0)
        assert config.min_bound == config.max_bound

    def test_non_finite_bounds(self):
        """Config rejects infinite bounds."""
        with pytest.raises(InvalidArgument, match="finite"):
            Config(max_bound=float("inf"))

    def test_negative_num_cells(self):
        """Config rejects negative cell counts."""
        with pytest.raises(InvalidArgument, match="num_cells"):
            Config(num_cells=-1)

    def test_negative_diameter(self):
        """Config rejects negative initial diameter."""
        with pytest.raises(InvalidArgument, match="initial_diameter"):
            Config(initial_diameter=-1.0)

    def test_unknown_cell_type(self):
        """Config rejects unknown type codes."""
        with pytest.raises(InvalidArgument):
            Config(initial_cell_type=4)

    def test_unordered_thresholds(self):
        """Renewal threshold may not exceed commitment threshold."""
        with pytest.raises(InvalidArgument, match="stem_renewal_diameter"):
            Config(stem_renewal_diameter=9.0)
        with pytest.raises(InvalidArgument, match="ta_renewal_diameter"):
            Config(ta_renewal_diameter=11.0)

    def test_non_positive_threshold(self):
        """Thresholds must be positive."""
        with pytest.raises(InvalidArgument, match="differentiation_diameter"):
            Config(differentiation_diameter=0.0)

    def test_invalid_workers(self):
        """Config rejects zero workers."""
        with pytest.raises(InvalidArgument, match="workers"):
            Config(workers=0)

    def test_invalid_argument_is_value_error(self):
        """Validation errors are ValueErrors."""
        with pytest.raises(ValueError):
            Config(growth_rate=-1.0)

    def test_serialization_roundtrip(self):
        """Config serializes and deserializes correctly."""
        config = Config(max_bound=100.0, num_cells=12, growth_rate=0.5)

        restored = Config.from_dict(config.to_dict())

        assert restored == config

    def test_from_args(self):
        """Unknown and None argparse values are ignored."""
        args = argparse.Namespace(steps=3, num_cells=7, growth_rate=None)

        config = Config.from_args(args)

        assert config.num_cells == 7
        assert config.growth_rate == 0.0
