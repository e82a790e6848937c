"""Single-source shortest-path algorithms.

This module contains the relaxation primitive and the two solvers built on
it: Bellman-Ford for general directed graphs and the one-pass topological
relaxation for directed acyclic graphs.
"""

from shortest_paths.algorithms.bellman_ford import find_negative_cycle_edges, run_bellman_ford
from shortest_paths.algorithms.dag_shortest_path import run_dag_shortest_path
from shortest_paths.algorithms.paths import path_weight, shortest_path
from shortest_paths.algorithms.relaxation import (
    initialize_single_source,
    relax,
    relax_if_shorter,
    should_relax,
)

__all__ = [
    "find_negative_cycle_edges",
    "initialize_single_source",
    "path_weight",
    "relax",
    "relax_if_shorter",
    "run_bellman_ford",
    "run_dag_shortest_path",
    "shortest_path",
    "should_relax",
]
