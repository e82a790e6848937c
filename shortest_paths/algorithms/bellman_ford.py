"""Bellman-Ford single-source shortest paths.

Handles negative edge weights. A negative-weight cycle reachable from the
source is reported through the boolean result, never raised.
"""

from typing import TYPE_CHECKING

import structlog

from shortest_paths.algorithms.relaxation import (
    RelaxationCallback,
    initialize_single_source,
    relax_if_shorter,
    should_relax,
)
from shortest_paths.graph.adjacency import VertexRef
from shortest_paths.graph.elements import Edge

if TYPE_CHECKING:
    from shortest_paths.graph.weighted_graph import WeightedGraph

logger = structlog.get_logger(__name__)


def find_negative_cycle_edges(graph: "WeightedGraph") -> list[Edge]:
    """Return the edges that can still be relaxed.

    Called after the relaxation passes have converged, any such edge lies on
    or behind a negative cycle reachable from the source.

    Args:
        graph: Graph with distances from a completed relaxation run

    Returns:
        Relaxable edges in enumeration order (empty when distances are final)
    """
    return [edge for edge in graph.edges if should_relax(edge)]


def run_bellman_ford(
    graph: "WeightedGraph",
    source: VertexRef,
    on_relaxed: RelaxationCallback | None = None,
) -> bool:
    """Compute shortest-path distances from ``source`` to every vertex.

    Runs up to ``|V| - 1`` passes over all edges, relaxing every edge that
    shortens its target. A pass that relaxes nothing means the distances are
    final and ends the loop. A last pass then looks for edges that could
    still be relaxed.

    Results are written onto the vertices: ``distance`` (``inf`` when
    unreachable) and ``predecessor_id``.

    Args:
        graph: Graph to solve
        source: Source vertex or its id
        on_relaxed: Observer called with each edge right after it is relaxed

    Returns:
        True if all distances are final; False if a negative cycle is
        reachable from the source, in which case distances of the vertices
        it reaches are meaningless

    Raises:
        VertexNotFoundError: If ``source`` is not in the graph

    Example:
        >>> graph = WeightedGraph.from_edges("ab", [("a", "b", -1)])
        >>> run_bellman_ford(graph, "a")
        True
        >>> graph.get_vertex("b").distance
        -1.0
    """
    source_vertex = graph.require_vertex(source)

    logger.info(
        "bellman_ford_started",
        source=source_vertex.id,
        **graph.get_stats(),
    )

    initialize_single_source(graph, source_vertex)

    passes = 0
    total_relaxations = 0
    for _ in range(graph.vertex_count - 1):
        passes += 1
        relaxed = sum(relax_if_shorter(edge, on_relaxed) for edge in graph.edges)
        total_relaxations += relaxed

        logger.debug("bellman_ford_pass_complete", pass_number=passes, relaxed=relaxed)

        if relaxed == 0:
            break

    offending = find_negative_cycle_edges(graph)
    for edge in offending:
        logger.warning(
            "negative_cycle_edge",
            edge_id=edge.id,
            weight=edge.weight,
            source_distance=edge.source.distance,
            target_distance=edge.target.distance,
        )

    consistent = not offending
    logger.info(
        "bellman_ford_complete",
        source=source_vertex.id,
        consistent=consistent,
        passes=passes,
        relaxations=total_relaxations,
    )
    return consistent
