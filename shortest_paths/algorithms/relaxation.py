"""Edge relaxation shared by the single-source shortest-path algorithms."""

import math
from collections.abc import Callable
from typing import TYPE_CHECKING

import structlog

from shortest_paths.graph.elements import Edge, Vertex

if TYPE_CHECKING:
    from shortest_paths.graph.weighted_graph import WeightedGraph

logger = structlog.get_logger(__name__)

RelaxationCallback = Callable[[Edge], None]


def initialize_single_source(graph: "WeightedGraph", source: Vertex) -> None:
    """Reset every vertex to an unreached state and make ``source`` the origin.

    Args:
        graph: Graph whose vertices are reset
        source: Vertex of ``graph`` that gets distance 0
    """
    for vertex in graph.vertices:
        vertex.distance = math.inf
        vertex.predecessor_id = None

    source.distance = 0.0


def should_relax(edge: Edge) -> bool:
    """Whether going through ``edge`` shortens the path to its target.

    Unreached sources have infinite distance, and infinity plus any finite
    weight is never less than anything, so their edges never relax.
    """
    return edge.target.distance > edge.source.distance + edge.weight


def relax(edge: Edge) -> None:
    """Route the target of ``edge`` through its source.

    Unconditional: callers check ``should_relax`` first.
    """
    edge.target.distance = edge.source.distance + edge.weight
    edge.target.predecessor_id = edge.source.id


def relax_if_shorter(edge: Edge, on_relaxed: RelaxationCallback | None = None) -> bool:
    """Relax ``edge`` when it improves its target.

    Args:
        edge: Edge to test
        on_relaxed: Observer called with the edge after it was relaxed

    Returns:
        True if the edge was relaxed
    """
    if not should_relax(edge):
        return False

    relax(edge)
    logger.debug("edge_relaxed", edge_id=edge.id, distance=edge.target.distance)
    if on_relaxed is not None:
        on_relaxed(edge)
    return True
