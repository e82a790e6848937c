"""Unit tests for Vertex and Edge.

Tests cover:
- Identifier validation
- Default algorithm state
- Edge endpoint and weight validation
- Display ids of parallel edges
"""

import math

import pytest

from shortest_paths.graph.elements import Edge, Vertex, VertexColor
from shortest_paths.graph.errors import GraphError, InvalidEndpointError, InvalidIdentifierError


class TestVertex:
    """Test Vertex construction and state."""

    def test_defaults(self):
        """Test that a new vertex starts unreached and undiscovered."""
        vertex = Vertex("s")

        assert vertex.id == "s"
        assert vertex.distance == math.inf
        assert vertex.predecessor_id is None
        assert vertex.color is VertexColor.WHITE
        assert vertex.opened_at == 0
        assert vertex.closed_at == 0

    @pytest.mark.parametrize("bad_id", ["", None])
    def test_empty_identifier_rejected(self, bad_id):
        """Test that missing or empty ids raise InvalidIdentifierError."""
        with pytest.raises(InvalidIdentifierError):
            Vertex(bad_id)

    def test_invalid_identifier_is_value_error(self):
        """Test that the identifier error fits the ValueError and GraphError families."""
        with pytest.raises(ValueError, match="non-empty string"):
            Vertex("")
        with pytest.raises(GraphError):
            Vertex("")

    def test_id_is_read_only(self):
        """Test that the id cannot be reassigned."""
        vertex = Vertex("s")

        with pytest.raises(AttributeError):
            vertex.id = "t"

    def test_state_is_mutable(self):
        """Test that algorithm state can be updated."""
        vertex = Vertex("s")
        vertex.distance = 3.0
        vertex.predecessor_id = "r"

        assert vertex.distance == 3.0
        assert vertex.predecessor_id == "r"

    def test_vertices_compare_by_identity(self):
        """Test that two vertices with the same id are distinct objects."""
        assert Vertex("s") != Vertex("s")


class TestEdge:
    """Test Edge construction."""

    def test_edge_id(self):
        """Test the display id format."""
        edge = Edge(Vertex("s"), Vertex("t"), 6)

        assert edge.id == "(s, t)"
        assert edge.weight == 6

    def test_negative_weight_allowed(self):
        """Test that negative weights are accepted."""
        edge = Edge(Vertex("t"), Vertex("z"), -4)

        assert edge.weight == -4

    def test_missing_source(self):
        """Test that a None source raises InvalidEndpointError."""
        with pytest.raises(InvalidEndpointError, match="source"):
            Edge(None, Vertex("t"), 1)

    def test_missing_target(self):
        """Test that a None target raises InvalidEndpointError."""
        with pytest.raises(InvalidEndpointError, match="target"):
            Edge(Vertex("s"), None, 1)

    @pytest.mark.parametrize("weight", [1.5, "3", True])
    def test_non_integer_weight_rejected(self, weight):
        """Test that weights must be plain integers."""
        with pytest.raises(TypeError, match="int"):
            Edge(Vertex("s"), Vertex("t"), weight)

    def test_parallel_edges_share_id_but_not_identity(self):
        """Test that parallel edges have equal ids and are still distinct."""
        s, t = Vertex("s"), Vertex("t")
        first = Edge(s, t, 1)
        second = Edge(s, t, 2)

        assert first.id == second.id
        assert first != second
