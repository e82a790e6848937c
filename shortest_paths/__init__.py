"""Single-source shortest paths over directed weighted graphs.

Provides a directed weighted graph with depth-first search and topological
sort, plus two solvers: Bellman-Ford for general graphs (negative weights,
negative-cycle detection) and one-pass topological relaxation for DAGs.
"""

from shortest_paths.algorithms import run_bellman_ford, run_dag_shortest_path, shortest_path
from shortest_paths.graph import Edge, Vertex, WeightedGraph, topological_sort

__version__ = "0.1.0"

__all__ = [
    "Edge",
    "Vertex",
    "WeightedGraph",
    "run_bellman_ford",
    "run_dag_shortest_path",
    "shortest_path",
    "topological_sort",
]
