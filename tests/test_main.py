"""
Tests for the command-line interface.
"""

import json

from epidermis.main import create_parser, main


class TestMain:
    """Tests for the CLI entry point."""

    def test_parser_defaults(self):
        args = create_parser().parse_args([])

        assert args.steps == 1
        assert args.num_cells is None

    def test_default_run(self, capsys):
        """The default run seeds 200 stem cells and runs one step."""
        assert main(["--no-progress"]) == 0

        out = capsys.readouterr().out
        assert "Stem cells created: 200" in out
        assert "Simulation completed successfully!" in out

    def test_configuration_error(self, capsys):
        """Invalid bounds exit with status 1."""
        assert main(["--min-bound", "10", "--max-bound", "0", "--no-progress"]) == 1

        assert "Configuration error" in capsys.readouterr().err

    def test_save_outputs(self, tmp_path):
        metrics_path = tmp_path / "metrics.json"
        state_path = tmp_path / "state.json"

        code = main([
            "--num-cells", "3",
            "--steps", "2",
            "--seed", "5",
            "--no-progress",
            "--save-metrics", str(metrics_path),
            "--save-state", str(state_path),
        ])

        assert code == 0
        metrics = json.loads(metrics_path.read_text())
        assert metrics["total_cells"] == 12
        state = json.loads(state_path.read_text())
        assert state["step_count"] == 2
        assert len(state["cells"]) == 12

    def test_save_frames(self, tmp_path):
        frames = tmp_path / "frames"

        assert main(["--num-cells", "2", "--steps", "2", "--no-progress",
                     "--save-frames", str(frames)]) == 0

        assert sorted(p.name for p in frames.iterdir()) == [
            "frame_000000.png",
            "frame_000001.png",
            "frame_000002.png",
        ]
