"""Deferred node resolution and distance aggregation."""

from osm_graph.resolution.node_index import NodeIndex
from osm_graph.resolution.distance import edge_distance, populate_distances

__all__ = ['NodeIndex', 'edge_distance', 'populate_distances']
