"""Utility functions for road graph processing."""

from osm_graph.utils.geo_utils import haversine_distance, calculate_line_length

__all__ = ['haversine_distance', 'calculate_line_length']
