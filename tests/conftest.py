"""Shared fixtures for the test suite."""

import pytest

from shortest_paths.graph import WeightedGraph
from shortest_paths.log_config import clear_run_context, configure_logging
from shortest_paths.samples import sample_config


@pytest.fixture(autouse=True)
def structured_logging():
    """Route structlog through stdlib logging so caplog sees every event."""
    configure_logging(level="DEBUG", json_logs=True)
    clear_run_context()
    yield
    clear_run_context()


@pytest.fixture
def directed_graph() -> WeightedGraph:
    """The cyclic sample graph with a negative edge (solved from ``s``)."""
    return sample_config("directed").graph.build()


@pytest.fixture
def dag() -> WeightedGraph:
    """The acyclic sample graph (solved from ``r``)."""
    return sample_config("dag").graph.build()


@pytest.fixture
def negative_cycle_graph() -> WeightedGraph:
    """A graph whose cycle a -> b -> c -> a weighs -1, reachable from s."""
    return WeightedGraph.from_edges(
        ["s", "a", "b", "c", "d"],
        [
            ("s", "a", 4),
            ("a", "b", 1),
            ("b", "c", -3),
            ("c", "a", 1),
            ("c", "d", 2),
        ],
    )
