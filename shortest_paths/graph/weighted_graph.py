"""Directed weighted graph built on the adjacency-list store.

``WeightedGraph`` is the single graph type the traversal and shortest-path
functions operate on. It exposes construction and query operations over an
``AdjacencyList`` and resolves the id-based predecessor links that the
algorithms write onto vertices.
"""

from collections.abc import Iterable, Iterator

import structlog

from shortest_paths.graph.adjacency import AdjacencyList, VertexRef
from shortest_paths.graph.elements import Edge, Vertex

logger = structlog.get_logger(__name__)


class WeightedGraph:
    """Directed graph with integer edge weights.

    The graph owns its vertices through the underlying store. Vertices and
    edges can only be added; algorithm runs mutate vertex state in place but
    never change the structure.

    Thread-safety:
        Not thread-safe. A graph must not be mutated or traversed by more than
        one caller at a time.

    Example:
        >>> graph = WeightedGraph.from_edges(["s", "t"], [("s", "t", 6)])
        >>> graph.get_edge("s", "t").weight
        6
    """

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self._store = AdjacencyList()

    @classmethod
    def from_edges(
        cls,
        vertex_ids: Iterable[str],
        edges: Iterable[tuple[str, str, int]],
    ) -> "WeightedGraph":
        """Build a graph from vertex ids and ``(source, target, weight)`` triples.

        Args:
            vertex_ids: Vertex identifiers, in the order they should be stored
            edges: Edge triples referencing those identifiers

        Returns:
            The populated graph

        Raises:
            DuplicateVertexError: If a vertex id repeats
            VertexNotFoundError: If an edge references an unknown vertex
        """
        graph = cls()
        for vertex_id in vertex_ids:
            graph.add_vertex(vertex_id)
        for source, target, weight in edges:
            graph.add_edge(source, target, weight)

        logger.debug("graph_built", **graph.get_stats())
        return graph

    def add_vertex(self, vertex_id: str) -> Vertex:
        """Add a vertex; see ``AdjacencyList.add_vertex``."""
        return self._store.add_vertex(vertex_id)

    def add_edge(self, source: VertexRef, target: VertexRef, weight: int) -> Edge:
        """Add a directed edge; see ``AdjacencyList.add_edge``."""
        return self._store.add_edge(source, target, weight)

    def get_vertex(self, vertex_id: str | None) -> Vertex | None:
        return self._store.get_vertex(vertex_id)

    def require_vertex(self, ref: VertexRef | None) -> Vertex:
        return self._store.require_vertex(ref)

    def has_vertex(self, ref: VertexRef | None) -> bool:
        return self._store.has_vertex(ref)

    def get_edge(self, source: VertexRef, target: VertexRef) -> Edge | None:
        return self._store.get_edge(source, target)

    def has_edge(self, source: VertexRef, target: VertexRef) -> bool:
        return self._store.has_edge(source, target)

    def get_outgoing_edges(self, ref: VertexRef) -> Iterator[Edge]:
        return self._store.get_outgoing_edges(ref)

    def get_adjacent(self, ref: VertexRef) -> Iterator[Vertex]:
        return self._store.get_adjacent(ref)

    def predecessor_of(self, ref: VertexRef) -> Vertex | None:
        """Resolve the predecessor link of a vertex.

        Args:
            ref: Vertex (or id) whose predecessor is wanted

        Returns:
            The predecessor vertex, or None if it has none

        Raises:
            VertexNotFoundError: If ``ref`` is not in the graph
        """
        vertex = self._store.require_vertex(ref)
        return self._store.get_vertex(vertex.predecessor_id)

    @property
    def vertices(self) -> Iterator[Vertex]:
        return self._store.vertices

    @property
    def edges(self) -> Iterator[Edge]:
        return self._store.edges

    @property
    def vertex_count(self) -> int:
        return self._store.vertex_count

    @property
    def edge_count(self) -> int:
        return self._store.edge_count

    def get_stats(self) -> dict[str, int]:
        """Get statistics about the graph structure.

        Returns:
            Dictionary with:
                - vertex_count: Number of vertices
                - edge_count: Number of edges, parallel edges counted separately
                - negative_edge_count: Number of edges with a negative weight
        """
        return {
            "vertex_count": self.vertex_count,
            "edge_count": self.edge_count,
            "negative_edge_count": sum(1 for edge in self.edges if edge.weight < 0),
        }

    def __contains__(self, ref: object) -> bool:
        return ref in self._store

    def __len__(self) -> int:
        return len(self._store)
