"""Adjacency-list storage for directed weighted graphs.

The store maps each vertex id to the vertex object and the ordered list of
its outgoing edges. Both levels preserve insertion order, which fixes the
enumeration order every algorithm relies on. The store only grows: there are
no removal operations.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field

import structlog

from shortest_paths.graph.elements import Edge, Vertex
from shortest_paths.graph.errors import DuplicateVertexError, VertexNotFoundError

logger = structlog.get_logger(__name__)

VertexRef = Vertex | str


def _ref_id(ref: VertexRef | None) -> str | None:
    if isinstance(ref, Vertex):
        return ref.id
    return ref


@dataclass
class _Entry:
    vertex: Vertex
    edges: list[Edge] = field(default_factory=list)


class AdjacencyList:
    """Ordered vertex store with per-vertex outgoing edge lists.

    Methods that take a vertex accept either the ``Vertex`` object or its id.
    Lookups resolve by id, so the vertex objects held by the store are the
    ones edges point at.

    Example:
        >>> store = AdjacencyList()
        >>> s = store.add_vertex("s")
        >>> t = store.add_vertex("t")
        >>> store.add_edge(s, t, 6)
        Edge(s, t)[6]
        >>> [v.id for v in store.get_adjacent("s")]
        ['t']
    """

    def __init__(self) -> None:
        self._entries: dict[str, _Entry] = {}

    def add_vertex(self, vertex_id: str) -> Vertex:
        """Create and register a new vertex.

        Args:
            vertex_id: Identifier for the new vertex

        Returns:
            The newly created vertex

        Raises:
            InvalidIdentifierError: If vertex_id is None or empty
            DuplicateVertexError: If vertex_id is already registered
        """
        if vertex_id in self._entries:
            raise DuplicateVertexError(vertex_id)

        vertex = Vertex(vertex_id)
        self._entries[vertex_id] = _Entry(vertex)

        logger.debug("vertex_added", vertex_id=vertex_id)
        return vertex

    def add_edge(self, source: VertexRef, target: VertexRef, weight: int) -> Edge:
        """Append a new edge to the outgoing list of ``source``.

        Parallel edges are allowed; each call creates a distinct edge.

        Args:
            source: Vertex (or id) the edge leaves
            target: Vertex (or id) the edge enters
            weight: Signed integer edge weight

        Returns:
            The newly created edge

        Raises:
            VertexNotFoundError: If either endpoint is not in the store
            TypeError: If weight is not an int

        The store is left unchanged when any of these are raised.
        """
        source_entry = self._entries.get(_ref_id(source))
        if source_entry is None:
            raise VertexNotFoundError(_ref_id(source), role="source")

        target_entry = self._entries.get(_ref_id(target))
        if target_entry is None:
            raise VertexNotFoundError(_ref_id(target), role="target")

        edge = Edge(source_entry.vertex, target_entry.vertex, weight)
        source_entry.edges.append(edge)

        logger.debug(
            "edge_added",
            edge_id=edge.id,
            weight=weight,
            out_degree=len(source_entry.edges),
        )
        return edge

    def get_vertex(self, vertex_id: str | None) -> Vertex | None:
        """Return the vertex registered under ``vertex_id``, or None."""
        entry = self._entries.get(vertex_id)
        return entry.vertex if entry is not None else None

    def require_vertex(self, ref: VertexRef | None) -> Vertex:
        """Resolve ``ref`` to the stored vertex.

        Raises:
            VertexNotFoundError: If no vertex has that id
        """
        entry = self._entries.get(_ref_id(ref))
        if entry is None:
            raise VertexNotFoundError(_ref_id(ref))
        return entry.vertex

    def has_vertex(self, ref: VertexRef | None) -> bool:
        return _ref_id(ref) in self._entries

    def get_edge(self, source: VertexRef, target: VertexRef) -> Edge | None:
        """Return the first edge from ``source`` to ``target``.

        With parallel edges only the earliest inserted one is returned; use
        ``get_outgoing_edges`` to see all of them.

        Returns:
            The edge, or None if ``source`` is unknown or has no such edge
        """
        entry = self._entries.get(_ref_id(source))
        if entry is None:
            return None

        target_id = _ref_id(target)
        return next((edge for edge in entry.edges if edge.target.id == target_id), None)

    def has_edge(self, source: VertexRef, target: VertexRef) -> bool:
        return self.get_edge(source, target) is not None

    def get_outgoing_edges(self, ref: VertexRef) -> Iterator[Edge]:
        """Iterate over the outgoing edges of a vertex in insertion order.

        Raises:
            VertexNotFoundError: Immediately, if the vertex is unknown
        """
        entry = self._entries.get(_ref_id(ref))
        if entry is None:
            raise VertexNotFoundError(_ref_id(ref))
        return iter(entry.edges)

    def get_adjacent(self, ref: VertexRef) -> Iterator[Vertex]:
        """Iterate over the targets of a vertex's outgoing edges.

        A target reachable through parallel edges appears once per edge.

        Raises:
            VertexNotFoundError: Immediately, if the vertex is unknown
        """
        return (edge.target for edge in self.get_outgoing_edges(ref))

    @property
    def vertices(self) -> Iterator[Vertex]:
        """All vertices in insertion order."""
        return (entry.vertex for entry in self._entries.values())

    @property
    def edges(self) -> Iterator[Edge]:
        """All edges, grouped by source insertion order."""
        return (edge for entry in self._entries.values() for edge in entry.edges)

    @property
    def vertex_count(self) -> int:
        return len(self._entries)

    @property
    def edge_count(self) -> int:
        return sum(len(entry.edges) for entry in self._entries.values())

    def __contains__(self, ref: object) -> bool:
        return isinstance(ref, Vertex | str) and self.has_vertex(ref)

    def __len__(self) -> int:
        return len(self._entries)
