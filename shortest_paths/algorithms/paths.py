"""Shortest-path reconstruction from predecessor links."""

import math
from typing import TYPE_CHECKING

import structlog

from shortest_paths.graph.adjacency import VertexRef
from shortest_paths.graph.elements import Vertex

if TYPE_CHECKING:
    from shortest_paths.graph.weighted_graph import WeightedGraph

logger = structlog.get_logger(__name__)


def shortest_path(graph: "WeightedGraph", target: VertexRef) -> list[Vertex]:
    """Walk predecessor links back from ``target`` after a solver run.

    Args:
        graph: Graph a shortest-path algorithm has run on
        target: Vertex (or id) to build the path to

    Returns:
        Vertices from the source to ``target`` inclusive. Empty when the
        target is unreachable or its predecessor chain loops, which only
        happens after a run that found a negative cycle.

    Raises:
        VertexNotFoundError: If ``target`` is not in the graph
    """
    vertex = graph.require_vertex(target)
    if vertex.distance == math.inf:
        return []

    path: list[Vertex] = []
    seen: set[str] = set()
    current: Vertex | None = vertex
    while current is not None:
        if current.id in seen:
            logger.warning("predecessor_cycle_detected", target=vertex.id, at=current.id)
            return []
        seen.add(current.id)
        path.append(current)
        current = graph.predecessor_of(current)

    path.reverse()
    return path


def path_weight(graph: "WeightedGraph", path: list[Vertex]) -> int:
    """Sum the edge weights along ``path``.

    Each hop uses the lightest edge between the pair, since that is the one a
    shortest path takes when parallel edges exist.

    Raises:
        ValueError: If consecutive vertices are not joined by an edge
    """
    total = 0
    for source, target in zip(path, path[1:]):
        weights = [edge.weight for edge in graph.get_outgoing_edges(source) if edge.target is target]
        if not weights:
            msg = f"No edge from {source.id} to {target.id}"
            raise ValueError(msg)
        total += min(weights)
    return total
