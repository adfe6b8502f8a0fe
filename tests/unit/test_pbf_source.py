"""Tests for the PBF record source."""
import pytest

from osm_graph.errors import UpstreamParseError
from osm_graph.parsing import PBFRecordSource, open_record_source


class TestPBFRecordSource:
    """Tests for PBFRecordSource traversals."""

    def test_detected_from_extension(self, road_network_pbf):
        """Test .osm.pbf files get the PBF source."""
        source = open_record_source(road_network_pbf)
        assert isinstance(source, PBFRecordSource)
        assert source.get_format_name() == 'pbf'

    def test_traverse_ways(self, road_network_pbf):
        """Test ways arrive with refs and tags."""
        ways = []
        assert PBFRecordSource(road_network_pbf).traverse_ways(ways.append) is True

        assert [w.id for w in ways] == [100, 101, 102]
        assert ways[0].node_refs == [1, 2, 3]
        assert ways[0].tags == {'highway': 'primary', 'oneway': 'yes', 'sidewalk': 'both'}

    def test_traverse_nodes(self, road_network_pbf):
        """Test nodes arrive with (lon, lat)."""
        nodes = []
        assert PBFRecordSource(road_network_pbf).traverse_nodes(nodes.append) is True

        by_id = {n.id: n for n in nodes}
        assert sorted(by_id) == [1, 2, 3, 4, 5]
        assert by_id[4].lon == pytest.approx(0.001)
        assert by_id[4].lat == pytest.approx(0.002)

    def test_garbage_input(self, tmp_path):
        """Test a file that is not PBF raises a parse error."""
        file = tmp_path / "garbage.pbf"
        file.write_bytes(b"\x00\x01not a protobuf blob at all\xff" * 8)
        with pytest.raises(UpstreamParseError):
            PBFRecordSource(file).traverse_ways(lambda w: None)
