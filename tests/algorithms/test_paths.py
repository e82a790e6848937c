"""Unit tests for path reconstruction."""

import logging

import pytest

from shortest_paths.algorithms.bellman_ford import run_bellman_ford
from shortest_paths.algorithms.dag_shortest_path import run_dag_shortest_path
from shortest_paths.algorithms.paths import path_weight, shortest_path
from shortest_paths.graph import VertexNotFoundError, WeightedGraph


class TestShortestPath:
    """Test shortest_path."""

    def test_directed_sample_path(self, directed_graph):
        """Test the path to z in the directed sample."""
        run_bellman_ford(directed_graph, "s")

        path = shortest_path(directed_graph, "z")

        assert [v.id for v in path] == ["s", "y", "x", "t", "z"]
        assert path_weight(directed_graph, path) == directed_graph.get_vertex("z").distance

    def test_dag_path(self, dag):
        """Test the path to y in the DAG sample."""
        run_dag_shortest_path(dag, "r")

        path = shortest_path(dag, dag.get_vertex("y"))

        assert [v.id for v in path] == ["r", "t", "y"]
        assert path_weight(dag, path) == 7

    def test_path_to_source(self, directed_graph):
        """Test that the path to the source is the source alone."""
        run_bellman_ford(directed_graph, "s")

        assert [v.id for v in shortest_path(directed_graph, "s")] == ["s"]

    def test_unreachable_target(self):
        """Test that an unreachable target has no path."""
        graph = WeightedGraph.from_edges(["s", "t"], [("t", "s", 1)])
        run_bellman_ford(graph, "s")

        assert shortest_path(graph, "t") == []

    def test_unknown_target(self, directed_graph):
        """Test that an unknown target raises."""
        with pytest.raises(VertexNotFoundError):
            shortest_path(directed_graph, "missing")

    def test_predecessor_loop(self, caplog):
        """Test that a looping predecessor chain yields no path and a warning."""
        caplog.set_level(logging.WARNING)
        graph = WeightedGraph.from_edges(["a", "b"], [("a", "b", 1), ("b", "a", -2)])
        a, b = graph.get_vertex("a"), graph.get_vertex("b")
        a.distance, a.predecessor_id = -1.0, "b"
        b.distance, b.predecessor_id = 0.0, "a"

        assert shortest_path(graph, "a") == []
        assert any("predecessor_cycle_detected" in r.getMessage() for r in caplog.records)


class TestPathWeight:
    """Test path_weight."""

    def test_empty_and_single(self, directed_graph):
        """Test degenerate paths weigh nothing."""
        assert path_weight(directed_graph, []) == 0
        assert path_weight(directed_graph, [directed_graph.get_vertex("s")]) == 0

    def test_missing_hop(self, directed_graph):
        """Test that a non-adjacent pair raises ValueError."""
        s, z = directed_graph.get_vertex("s"), directed_graph.get_vertex("z")

        with pytest.raises(ValueError, match="No edge"):
            path_weight(directed_graph, [s, z])
