"""Tests for the command-line entry point."""

import pytest
import yaml

import main
from main import EXIT_INVALID, EXIT_NEGATIVE_CYCLE, EXIT_OK


@pytest.fixture
def negative_cycle_config(tmp_path):
    """YAML config for a graph with a reachable negative cycle."""
    config_path = tmp_path / "cycle.yaml"
    config_path.write_text(
        yaml.dump(
            {
                "graph": {
                    "vertices": ["s", "a", "b"],
                    "edges": [
                        {"source": "s", "target": "a", "weight": 1},
                        {"source": "a", "target": "b", "weight": -2},
                        {"source": "b", "target": "a", "weight": 1},
                    ],
                },
                "solver": {"source": "s"},
            },
        ),
    )
    return config_path


class TestParseArgs:
    """Test argument parsing."""

    def test_requires_graph_source(self):
        """Test that --config or --sample is required."""
        with pytest.raises(SystemExit):
            main.parse_args([])

    def test_config_and_sample_are_exclusive(self):
        """Test that --config and --sample cannot be combined."""
        with pytest.raises(SystemExit):
            main.parse_args(["--config", "a.yaml", "--sample", "dag"])

    def test_overrides(self):
        """Test parsing of solver overrides."""
        args = main.parse_args(["--sample", "dag", "-s", "s", "-a", "bellman_ford", "--trace"])

        assert args.sample == "dag"
        assert args.source == "s"
        assert args.algorithm == "bellman_ford"
        assert args.trace is True


@pytest.mark.integration
class TestMain:
    """End-to-end CLI runs."""

    def test_directed_sample(self, capsys):
        """Test the directed sample with Bellman-Ford."""
        assert main.main(["--sample", "directed"]) == EXIT_OK

        out = capsys.readouterr().out
        assert "  z  |  -2  |  t  " in out
        assert "Overall result: True." in out

    def test_dag_sample(self, capsys):
        """Test the DAG sample with the topological solver."""
        assert main.main(["--sample", "dag", "--verify-acyclic"]) == EXIT_OK

        out = capsys.readouterr().out
        assert "Topological order: r s t x y z" in out
        assert "  x  |  10  |  t  " in out

    def test_dag_sample_with_bellman_ford(self, capsys):
        """Test overriding the algorithm gives the same distances."""
        assert main.main(["--sample", "dag", "--algorithm", "bellman_ford"]) == EXIT_OK

        assert "  x  |  10  |  t  " in capsys.readouterr().out

    def test_trace_and_edges(self, capsys):
        """Test the relaxation trace and edge table output."""
        assert main.main(["--sample", "directed", "--trace", "--show-edges"]) == EXIT_OK

        out = capsys.readouterr().out
        assert out.startswith("  E  |  W  ")
        assert "s -> t\n" in out

    def test_path_to(self, capsys):
        """Test printing a reconstructed path."""
        assert main.main(["--sample", "directed", "--path-to", "z"]) == EXIT_OK

        assert "Path to z: s -> y -> x -> t -> z" in capsys.readouterr().out

    def test_negative_cycle_exit_code(self, negative_cycle_config, capsys):
        """Test that a negative cycle exits with its own code."""
        assert main.main(["--config", str(negative_cycle_config)]) == EXIT_NEGATIVE_CYCLE

        assert "Overall result: False." in capsys.readouterr().out

    def test_dag_solver_rejects_cycle(self, negative_cycle_config, capsys):
        """Test that a cyclic graph fails the acyclic check."""
        code = main.main(
            ["--config", str(negative_cycle_config), "--algorithm", "dag", "--verify-acyclic"],
        )

        assert code == EXIT_INVALID
        assert "not acyclic" in capsys.readouterr().err

    def test_unknown_source(self, capsys):
        """Test that an unknown source is reported as invalid input."""
        assert main.main(["--sample", "directed", "--source", "q"]) == EXIT_INVALID

        assert "[q] not found" in capsys.readouterr().err

    def test_missing_config(self, tmp_path, capsys):
        """Test that a missing configuration file is reported."""
        assert main.main(["--config", str(tmp_path / "missing.yaml")]) == EXIT_INVALID

        assert "Configuration file not found" in capsys.readouterr().err
