"""Road graph compaction and export."""

from osm_graph.export.base import BaseExporter
from osm_graph.export.compactor import compact_nodes
from osm_graph.export.graph_exporter import GraphExporter, load_graph
from osm_graph.export.geojson_converter import GeoJSONConverter

__all__ = ['BaseExporter', 'compact_nodes', 'GraphExporter', 'load_graph', 'GeoJSONConverter']
