"""Tests for edge distance aggregation."""
import pytest

from osm_graph.errors import IncompleteDataError
from osm_graph.models.elements import Edge
from osm_graph.resolution.distance import edge_distance, populate_distances
from osm_graph.resolution.node_index import NodeIndex
from osm_graph.utils.geo_utils import haversine_distance


LEG_A = haversine_distance(0.0, 0.0, 0.001, 0.0)
LEG_B = haversine_distance(0.001, 0.0, 0.001, 0.001)


class TestEdgeDistance:
    """Tests for edge_distance function."""

    def test_follows_geometry(self, node_index):
        """Test the distance walks every intermediate node."""
        edge = Edge(p1=1, p2=3, geometry=[1, 2, 3])
        assert edge_distance(edge, node_index) == pytest.approx(LEG_A + LEG_B)

    def test_not_the_chord(self, node_index):
        """Test the distance differs from the straight endpoint distance."""
        edge = Edge(p1=1, p2=3, geometry=[1, 2, 3])
        chord = haversine_distance(0.0, 0.0, 0.001, 0.001)
        assert edge_distance(edge, node_index) > chord

    def test_without_geometry_uses_endpoints(self, node_index):
        """Test edges without geometry measure p1 to p2."""
        edge = Edge(p1=1, p2=2)
        assert edge_distance(edge, node_index) == pytest.approx(LEG_A)

    def test_closed_way_has_length(self, node_index):
        """Test a loop returning to its start is measured along the loop."""
        edge = Edge(p1=1, p2=1, geometry=[1, 2, 3, 1])
        assert edge_distance(edge, node_index) > 0

    def test_unresolved_node_raises(self):
        """Test a demanded but unresolved node stops measurement."""
        index = NodeIndex()
        index.demand_all([1, 2])
        index.resolve(1, 0.0, 0.0)

        with pytest.raises(IncompleteDataError) as exc_info:
            edge_distance(Edge(p1=1, p2=2, geometry=[1, 2]), index)
        assert exc_info.value.node_id == 2


class TestPopulateDistances:
    """Tests for populate_distances function."""

    def test_sets_distance_and_drops_geometry(self, node_index):
        """Test every edge gets a distance and loses its node chain."""
        edges = [Edge(p1=1, p2=3, geometry=[1, 2, 3]), Edge(p1=2, p2=3, geometry=[2, 3])]

        total = populate_distances(edges, node_index)

        assert edges[0].distance == pytest.approx(LEG_A + LEG_B)
        assert edges[1].distance == pytest.approx(LEG_B)
        assert all(edge.geometry is None for edge in edges)
        assert total == pytest.approx(LEG_A + 2 * LEG_B)

    def test_empty(self, node_index):
        """Test no edges means zero total."""
        assert populate_distances([], node_index) == 0.0

    def test_distances_non_negative(self, node_index):
        """Test distances are never negative."""
        edges = [Edge(p1=3, p2=1, geometry=[3, 2, 1])]
        populate_distances(edges, node_index)
        assert edges[0].distance >= 0
