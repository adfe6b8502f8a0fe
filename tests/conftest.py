"""Pytest fixtures for osmgraph tests."""
import pytest
from pathlib import Path


# Nodes 1-4 form two connected roads, 5 is never referenced, 6-7 belong
# to a footway that the road filter rejects.
ROAD_NETWORK_XML = '''<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6">
  <node id="1" lat="0.000" lon="0.000"/>
  <node id="2" lat="0.000" lon="0.001"/>
  <node id="3" lat="0.001" lon="0.001">
    <tag k="highway" v="traffic_signals"/>
  </node>
  <node id="4" lat="0.002" lon="0.001"/>
  <node id="5" lat="0.500" lon="0.500"/>
  <node id="6" lat="0.003" lon="0.003"/>
  <node id="7" lat="0.004" lon="0.003"/>
  <way id="100">
    <nd ref="1"/><nd ref="2"/><nd ref="3"/>
    <tag k="highway" v="primary"/>
    <tag k="oneway" v="yes"/>
    <tag k="sidewalk" v="both"/>
    <tag k="name" v="Main Street"/>
  </way>
  <way id="101">
    <nd ref="3"/><nd ref="4"/>
    <tag k="highway" v="residential"/>
    <tag k="sidewalk" v="left"/>
  </way>
  <way id="102">
    <nd ref="6"/><nd ref="7"/>
    <tag k="highway" v="footway"/>
  </way>
  <way id="103">
    <nd ref="1"/><nd ref="4"/><nd ref="5"/><nd ref="1"/>
    <tag k="building" v="yes"/>
  </way>
</osm>'''


# Same data with every way before the nodes it references
WAYS_FIRST_XML = '''<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6">
  <way id="100">
    <nd ref="1"/><nd ref="2"/><nd ref="3"/>
    <tag k="highway" v="primary"/>
    <tag k="oneway" v="yes"/>
    <tag k="sidewalk" v="both"/>
  </way>
  <way id="101">
    <nd ref="3"/><nd ref="4"/>
    <tag k="highway" v="residential"/>
    <tag k="sidewalk" v="left"/>
  </way>
  <node id="1" lat="0.000" lon="0.000"/>
  <node id="2" lat="0.000" lon="0.001"/>
  <node id="3" lat="0.001" lon="0.001"/>
  <node id="4" lat="0.002" lon="0.001"/>
  <node id="5" lat="0.500" lon="0.500"/>
</osm>'''


@pytest.fixture
def road_network_osm(tmp_path):
    """Create OSM file with two roads, a footway and a building."""
    file = tmp_path / "road_network.osm"
    file.write_text(ROAD_NETWORK_XML)
    return file


@pytest.fixture
def ways_first_osm(tmp_path):
    """Create OSM file whose ways precede their nodes."""
    file = tmp_path / "ways_first.osm"
    file.write_text(WAYS_FIRST_XML)
    return file


@pytest.fixture
def incomplete_osm(tmp_path):
    """Create OSM file with a road referencing a node that is not in the file."""
    content = '''<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6">
  <node id="1" lat="0.000" lon="0.000"/>
  <node id="2" lat="0.000" lon="0.001"/>
  <way id="100">
    <nd ref="1"/><nd ref="2"/><nd ref="99"/>
    <tag k="highway" v="secondary"/>
  </way>
</osm>'''
    file = tmp_path / "incomplete.osm"
    file.write_text(content)
    return file


@pytest.fixture
def no_roads_osm(tmp_path):
    """Create OSM file with nodes and ways but no road of interest."""
    content = '''<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6">
  <node id="1" lat="0.000" lon="0.000"/>
  <node id="2" lat="0.000" lon="0.001"/>
  <way id="100">
    <nd ref="1"/><nd ref="2"/>
    <tag k="highway" v="cycleway"/>
  </way>
</osm>'''
    file = tmp_path / "no_roads.osm"
    file.write_text(content)
    return file


@pytest.fixture
def empty_osm_file(tmp_path):
    """Create empty OSM file."""
    content = '''<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6">
</osm>'''
    file = tmp_path / "empty.osm"
    file.write_text(content)
    return file


@pytest.fixture
def malformed_osm(tmp_path):
    """Create truncated OSM file."""
    content = '''<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6">
  <node id="1" lat="0.000" lon="0.000"/>
  <way id="100">
    <nd ref="1"/>'''
    file = tmp_path / "malformed.osm"
    file.write_text(content)
    return file


@pytest.fixture
def road_network_pbf(tmp_path):
    """Write the road network as an OSM PBF file."""
    import osmium
    from osmium.osm.mutable import Node, Way

    file = tmp_path / "road_network.osm.pbf"
    writer = osmium.SimpleWriter(str(file))
    try:
        for node_id, lon, lat in [(1, 0.0, 0.0), (2, 0.001, 0.0), (3, 0.001, 0.001),
                                  (4, 0.001, 0.002), (5, 0.5, 0.5)]:
            writer.add_node(Node(id=node_id, location=(lon, lat)))
        writer.add_way(Way(id=100, nodes=[1, 2, 3],
                           tags={'highway': 'primary', 'oneway': 'yes', 'sidewalk': 'both'}))
        writer.add_way(Way(id=101, nodes=[3, 4],
                           tags={'highway': 'residential', 'sidewalk': 'left'}))
        writer.add_way(Way(id=102, nodes=[1, 5], tags={'waterway': 'river'}))
    finally:
        writer.close()
    return file


@pytest.fixture
def node_index():
    """Create a node index with nodes 1-3 demanded and resolved."""
    from osm_graph.resolution.node_index import NodeIndex
    index = NodeIndex()
    index.demand_all([1, 2, 3])
    index.freeze()
    index.resolve(1, 0.0, 0.0)
    index.resolve(2, 0.001, 0.0)
    index.resolve(3, 0.001, 0.001)
    return index


@pytest.fixture
def extracted_graph(tmp_path, road_network_osm):
    """Extract the road network with nodes and return the output path."""
    from osm_graph.api import extract_graph
    from osm_graph.config import ExtractionConfig

    output = tmp_path / "graph.json"
    extract_graph(road_network_osm, output, ExtractionConfig(include_nodes=True, quiet=True))
    return output
