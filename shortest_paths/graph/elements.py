"""Vertex and edge types for directed weighted graphs.

A vertex carries its identity plus the per-run state written by the
traversal and shortest-path algorithms. Predecessors are stored as vertex
ids, never as object references, so the graph store remains the only owner
of vertex objects.
"""

import math
from dataclasses import dataclass, field
from enum import Enum

from shortest_paths.graph.errors import InvalidEndpointError, InvalidIdentifierError


class VertexColor(Enum):
    """Depth-first search state of a vertex."""

    WHITE = "white"  # undiscovered
    GRAY = "gray"  # on the current traversal stack
    BLACK = "black"  # fully explored


@dataclass(eq=False)
class Vertex:
    """A graph vertex and its algorithm state.

    Attributes:
        id: Identifier, unique within the owning graph
        distance: Best known distance from the current source
        predecessor_id: Id of the vertex preceding this one on the best known
            path (or DFS tree), None when there is none
        color: Depth-first search color
        opened_at: DFS discovery timestamp
        closed_at: DFS finish timestamp
    """

    id: str
    distance: float = math.inf
    predecessor_id: str | None = None
    color: VertexColor = VertexColor.WHITE
    opened_at: int = 0
    closed_at: int = 0

    def __post_init__(self) -> None:
        if not self.id or not isinstance(self.id, str):
            msg = f"Vertex id must be a non-empty string, got {self.id!r}"
            raise InvalidIdentifierError(msg)

    def __setattr__(self, name: str, value: object) -> None:
        if name == "id" and "id" in self.__dict__:
            msg = "Vertex id is read-only"
            raise AttributeError(msg)
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f"Vertex({self.id!r}, distance={self.distance}, predecessor={self.predecessor_id!r})"


@dataclass(eq=False)
class Edge:
    """A directed, weighted connection from ``source`` to ``target``.

    Edges compare by identity. Parallel edges between the same ordered pair
    are distinct objects that share the same display ``id``.

    Attributes:
        source: Vertex the edge leaves
        target: Vertex the edge enters
        weight: Signed integer weight, may be negative
    """

    source: Vertex
    target: Vertex
    weight: int = 0
    _id: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.source is None:
            msg = "Edge source is None"
            raise InvalidEndpointError(msg)
        if self.target is None:
            msg = "Edge target is None"
            raise InvalidEndpointError(msg)
        if isinstance(self.weight, bool) or not isinstance(self.weight, int):
            msg = f"Edge weight must be an int, got {type(self.weight).__name__}"
            raise TypeError(msg)

        self._id = f"({self.source.id}, {self.target.id})"

    @property
    def id(self) -> str:
        """Display identifier ``(source_id, target_id)``; not unique."""
        return self._id

    def __repr__(self) -> str:
        return f"Edge{self._id}[{self.weight}]"


__all__ = ["Edge", "Vertex", "VertexColor"]
