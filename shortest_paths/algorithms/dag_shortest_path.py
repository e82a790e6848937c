"""Single-source shortest paths for directed acyclic graphs.

One pass of relaxations in topological order is enough: by the time a
vertex is processed, every edge that can lower its distance has already been
relaxed. Negative weights are fine; negative cycles cannot exist.
"""

from typing import TYPE_CHECKING

import structlog

from shortest_paths.algorithms.relaxation import (
    RelaxationCallback,
    initialize_single_source,
    relax_if_shorter,
)
from shortest_paths.graph.adjacency import VertexRef
from shortest_paths.graph.elements import Vertex
from shortest_paths.graph.traversal import topological_sort

if TYPE_CHECKING:
    from shortest_paths.graph.weighted_graph import WeightedGraph

logger = structlog.get_logger(__name__)


def run_dag_shortest_path(
    graph: "WeightedGraph",
    source: VertexRef,
    on_relaxed: RelaxationCallback | None = None,
    verify_acyclic: bool = False,
) -> list[Vertex]:
    """Compute shortest-path distances from ``source`` in a DAG.

    The graph must be acyclic. Unless ``verify_acyclic`` is set this is
    trusted, and a cyclic graph produces distances that are not shortest.

    Args:
        graph: Directed acyclic graph to solve
        source: Source vertex or its id
        on_relaxed: Observer called with each edge right after it is relaxed
        verify_acyclic: Check the topological order and raise on a cycle

    Returns:
        The topological order the edges were relaxed in

    Raises:
        VertexNotFoundError: If ``source`` is not in the graph
        CycleDetectedError: If ``verify_acyclic`` is set and the graph has a cycle
    """
    source_vertex = graph.require_vertex(source)

    logger.info("dag_shortest_path_started", source=source_vertex.id, **graph.get_stats())

    order = topological_sort(graph, verify=verify_acyclic)
    initialize_single_source(graph, source_vertex)

    relaxations = 0
    for vertex in order:
        for edge in graph.get_outgoing_edges(vertex):
            relaxations += relax_if_shorter(edge, on_relaxed)

    logger.info(
        "dag_shortest_path_complete",
        source=source_vertex.id,
        relaxations=relaxations,
        order=[vertex.id for vertex in order],
    )
    return order
