"""Edge length computation from resolved node coordinates."""
from typing import List

from osm_graph.models.elements import Edge
from osm_graph.resolution.node_index import NodeIndex
from osm_graph.utils.geo_utils import calculate_line_length


def edge_distance(edge: Edge, index: NodeIndex) -> float:
    """Measure an edge along its full polyline.

    Args:
        edge: Edge whose geometry (or endpoints) to walk
        index: Node index after the node pass

    Returns:
        Length in meters

    Raises:
        IncompleteDataError: If any node on the way is unresolved
    """
    coordinates = [index.coordinates(node_id) for node_id in edge.node_sequence]
    return calculate_line_length(coordinates)


def populate_distances(edges: List[Edge], index: NodeIndex) -> float:
    """Set the distance of every edge and drop its intermediate geometry.

    Args:
        edges: Edges built during the way pass
        index: Node index after the node pass

    Returns:
        Sum of all edge distances in meters
    """
    total = 0.0
    for edge in edges:
        edge.distance = edge_distance(edge, index)
        edge.geometry = None
        total += edge.distance
    return total
