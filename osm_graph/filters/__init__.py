"""Way filtering and edge construction."""

from osm_graph.filters.road_filter import (
    ROAD_HIGHWAY_TYPES, EdgeBuilder, is_road_way, is_directed, parse_sidewalks
)

__all__ = ['ROAD_HIGHWAY_TYPES', 'EdgeBuilder', 'is_road_way', 'is_directed', 'parse_sidewalks']
