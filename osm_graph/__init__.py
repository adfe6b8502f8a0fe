"""
osmgraph - compact routing graphs from OpenStreetMap dumps.

Streams an OSM XML or PBF file twice to build a filtered road edge list
with precomputed great-circle distances, optionally paired with the
coordinates of the edge endpoints.
"""

__version__ = "1.0.0"

# Errors
from osm_graph.errors import (
    OSMGraphError, UpstreamParseError, IncompleteDataError, InvalidExportError
)

# Data models
from osm_graph.models.elements import OSMNode, OSMWay, Edge, RetainedNode
from osm_graph.models.statistics import ExtractionStats
from osm_graph.models.graph import RoadGraph

# Configuration
from osm_graph.config import ExtractionConfig

# Filtering and resolution
from osm_graph.filters.road_filter import ROAD_HIGHWAY_TYPES, EdgeBuilder
from osm_graph.resolution.node_index import NodeIndex

# Parsing
from osm_graph.parsing import (
    RecordSource, XMLRecordSource, PBFRecordSource, open_record_source
)

# Extraction and export
from osm_graph.extraction.pipeline import GraphExtractor
from osm_graph.export.graph_exporter import GraphExporter
from osm_graph.export.geojson_converter import GeoJSONConverter

# Main API
from osm_graph.api import build_graph, extract_graph, convert_to_geojson

__all__ = [
    # Version
    '__version__',
    # Errors
    'OSMGraphError', 'UpstreamParseError', 'IncompleteDataError', 'InvalidExportError',
    # Models
    'OSMNode', 'OSMWay', 'Edge', 'RetainedNode', 'ExtractionStats', 'RoadGraph',
    # Config
    'ExtractionConfig',
    # Filtering and resolution
    'ROAD_HIGHWAY_TYPES', 'EdgeBuilder', 'NodeIndex',
    # Parsing
    'RecordSource', 'XMLRecordSource', 'PBFRecordSource', 'open_record_source',
    # Extraction and export
    'GraphExtractor', 'GraphExporter', 'GeoJSONConverter',
    # API
    'build_graph', 'extract_graph', 'convert_to_geojson',
]
