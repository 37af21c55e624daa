"""
Tests for population metrics and visualization.
"""

import json

import pytest

from epidermis.agent import CellAgent
from epidermis.lineage import CellType
from epidermis.metrics import (
    cell_type_counts,
    cell_type_fractions,
    compute_all_metrics,
    diameter_statistics,
    division_statistics,
    print_metrics_summary,
    spatial_extent,
)
from epidermis.population import Population
from epidermis.visualization import plot_population, population_to_arrays, save_population_image


@pytest.fixture
def mixed_population() -> Population:
    """Two stem cells, one TA cell and one differentiated cell."""
    population = Population()
    population.append(CellAgent(position=(0, 0, 0), diameter=2.0))
    population.append(CellAgent(position=(10, 5, 0), diameter=4.0, can_divide=False))
    population.append(CellAgent(position=(3, 8, 1), diameter=6.0, cell_type=CellType.TRANSIT_AMPLIFYING))
    population.append(CellAgent(position=(1, 1, 2), diameter=12.0, cell_type=CellType.DIFFERENTIATED,
                                parent_uid=2))
    population.commit()
    return population


class TestMetrics:
    """Tests for metric functions."""

    def test_counts(self, mixed_population):
        assert cell_type_counts(mixed_population) == {
            "stem": 2,
            "transit_amplifying": 1,
            "differentiated": 1,
        }

    def test_fractions(self, mixed_population):
        fractions = cell_type_fractions(mixed_population)
        assert fractions["stem"] == pytest.approx(0.5)
        assert sum(fractions.values()) == pytest.approx(1.0)

    def test_empty_population(self):
        """Metrics of an empty population are all zero."""
        population = Population()

        assert all(v == 0.0 for v in cell_type_fractions(population).values())
        assert diameter_statistics(population)["mean"] == 0.0
        assert spatial_extent(population)["max"] == [0.0, 0.0, 0.0]

    def test_division_statistics(self, mixed_population):
        stats = division_statistics(mixed_population)

        assert stats["can_divide"] == 3
        assert stats["dividing_stem"] == 1
        assert stats["dividing_transit_amplifying"] == 1
        assert stats["daughters"] == 1

    def test_diameter_statistics(self, mixed_population):
        stats = diameter_statistics(mixed_population)

        assert stats["mean"] == pytest.approx(6.0)
        assert stats["min"] == 2.0
        assert stats["max"] == 12.0

    def test_spatial_extent(self, mixed_population):
        extent = spatial_extent(mixed_population)

        assert extent["min"] == [0.0, 0.0, 0.0]
        assert extent["max"] == [10.0, 8.0, 2.0]

    def test_all_metrics_json_serializable(self, mixed_population):
        metrics = compute_all_metrics(mixed_population)

        assert metrics["total_cells"] == 4
        json.dumps(metrics)

    def test_print_summary(self, mixed_population, capsys):
        print_metrics_summary(compute_all_metrics(mixed_population))

        out = capsys.readouterr().out
        assert "Cells: 4" in out
        assert "stem: 2" in out


class TestVisualization:
    """Tests for plotting helpers."""

    def test_population_to_arrays(self, mixed_population):
        arrays = population_to_arrays(mixed_population)

        assert arrays["positions"].shape == (4, 3)
        assert arrays["types"].tolist() == [1, 1, 2, 3]
        assert arrays["can_divide"].tolist() == [True, False, True, True]

    def test_empty_arrays(self):
        arrays = population_to_arrays(Population())
        assert arrays["positions"].shape == (0, 3)

    def test_plot_population(self, mixed_population):
        ax = plot_population(mixed_population, bounds=(0.0, 20.0), title="test")
        assert ax.get_xlim() == (0.0, 20.0)
        assert ax.get_title() == "test"

    def test_save_population_image(self, mixed_population, tmp_path):
        path = save_population_image(mixed_population, str(tmp_path), step=3)

        assert path.name == "frame_000003.png"
        assert path.exists()
