"""Data models for OSM records and road graph output."""

from osm_graph.models.elements import OSMNode, OSMWay, Edge, RetainedNode
from osm_graph.models.statistics import ExtractionStats
from osm_graph.models.graph import RoadGraph

__all__ = ['OSMNode', 'OSMWay', 'Edge', 'RetainedNode', 'ExtractionStats', 'RoadGraph']
