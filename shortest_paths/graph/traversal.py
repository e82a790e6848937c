"""Depth-first search and topological sort over a ``WeightedGraph``.

The search is iterative: each stack frame pairs a vertex with the iterator
over its adjacent vertices, so long paths do not hit the interpreter's
recursion limit. All traversal bookkeeping lives in a ``DFSState`` that is
returned to the caller; the same values are also written onto the vertices.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import structlog

from shortest_paths.graph.elements import Vertex, VertexColor
from shortest_paths.graph.errors import CycleDetectedError

if TYPE_CHECKING:
    from shortest_paths.graph.weighted_graph import WeightedGraph

logger = structlog.get_logger(__name__)

VertexCallback = Callable[[Vertex], None]


@dataclass
class DFSState:
    """Bookkeeping for a single depth-first search run.

    Attributes:
        time: Timestamp counter, incremented on every discovery and finish
        colors: Color of each vertex id
        predecessors: DFS-tree parent of each vertex id (None for roots)
        opened_at: Discovery timestamp of each vertex id
        closed_at: Finish timestamp of each vertex id
        finish_order: Vertices in the order they were finished
    """

    time: int = 0
    colors: dict[str, VertexColor] = field(default_factory=dict)
    predecessors: dict[str, str | None] = field(default_factory=dict)
    opened_at: dict[str, int] = field(default_factory=dict)
    closed_at: dict[str, int] = field(default_factory=dict)
    finish_order: list[Vertex] = field(default_factory=list)

    def reset(self, vertex: Vertex) -> None:
        self.colors[vertex.id] = VertexColor.WHITE
        self.predecessors[vertex.id] = None
        vertex.color = VertexColor.WHITE
        vertex.predecessor_id = None
        vertex.opened_at = 0
        vertex.closed_at = 0

    def is_white(self, vertex: Vertex) -> bool:
        return self.colors[vertex.id] is VertexColor.WHITE

    def discover(self, vertex: Vertex, parent: Vertex | None) -> None:
        self.time += 1
        self.colors[vertex.id] = VertexColor.GRAY
        self.predecessors[vertex.id] = parent.id if parent is not None else None
        self.opened_at[vertex.id] = self.time

        vertex.color = VertexColor.GRAY
        vertex.predecessor_id = self.predecessors[vertex.id]
        vertex.opened_at = self.time

    def finish(self, vertex: Vertex) -> None:
        self.time += 1
        self.colors[vertex.id] = VertexColor.BLACK
        self.closed_at[vertex.id] = self.time
        self.finish_order.append(vertex)

        vertex.color = VertexColor.BLACK
        vertex.closed_at = self.time


def depth_first_search(
    graph: "WeightedGraph",
    on_started: VertexCallback | None = None,
    on_finished: VertexCallback | None = None,
) -> DFSState:
    """Run a full depth-first search over every vertex of the graph.

    Roots are taken in vertex insertion order; whenever the current tree is
    exhausted the search restarts from the next WHITE vertex, so disconnected
    parts are covered too. Adjacent vertices are explored in edge insertion
    order.

    Args:
        graph: Graph to traverse
        on_started: Called with each vertex right after it is discovered
        on_finished: Called with each vertex once all its descendants are done

    Returns:
        The final traversal state. Vertex ``color``, ``predecessor_id``,
        ``opened_at`` and ``closed_at`` hold the same values.
    """
    state = DFSState()
    for vertex in graph.vertices:
        state.reset(vertex)

    for root in graph.vertices:
        if not state.is_white(root):
            continue

        stack: list[tuple[Vertex, Iterator[Vertex]]] = []

        state.discover(root, None)
        if on_started is not None:
            on_started(root)
        stack.append((root, graph.get_adjacent(root)))

        while stack:
            vertex, adjacent = stack[-1]
            child = next((v for v in adjacent if state.is_white(v)), None)

            if child is not None:
                state.discover(child, vertex)
                if on_started is not None:
                    on_started(child)
                stack.append((child, graph.get_adjacent(child)))
                continue

            stack.pop()
            state.finish(vertex)
            if on_finished is not None:
                on_finished(vertex)

    logger.debug(
        "depth_first_search_complete",
        vertex_count=len(state.colors),
        final_time=state.time,
    )
    return state


def topological_sort(graph: "WeightedGraph", verify: bool = False) -> list[Vertex]:
    """Order the vertices of a directed acyclic graph.

    The order is the reverse of the DFS finish order. The graph must be
    acyclic; by default this is not checked and a cyclic graph yields an
    order that is not topological.

    Args:
        graph: Directed acyclic graph to sort
        verify: If True, check that every edge points forward in the result

    Returns:
        Vertices such that each edge (u, v) has u before v

    Raises:
        CycleDetectedError: If ``verify`` is set and the graph has a cycle
    """
    finished: list[Vertex] = []
    depth_first_search(graph, on_finished=finished.append)
    order = finished[::-1]

    if verify:
        position = {vertex.id: index for index, vertex in enumerate(order)}
        for edge in graph.edges:
            if position[edge.source.id] >= position[edge.target.id]:
                logger.error("topological_order_violated", edge_id=edge.id)
                msg = f"Graph is not acyclic: edge {edge.id} closes a cycle"
                raise CycleDetectedError(msg)

    logger.debug("topological_sort_complete", order=[vertex.id for vertex in order])
    return order


__all__ = ["DFSState", "VertexCallback", "depth_first_search", "topological_sort"]
