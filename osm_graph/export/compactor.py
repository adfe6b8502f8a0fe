"""Endpoint node compaction.

Intermediate geometry points are only needed to measure distances. Once
that is done, the exported node list keeps just the nodes that some edge
starts or ends at.
"""
from typing import List, Set

from osm_graph.models.elements import Edge, RetainedNode
from osm_graph.resolution.node_index import NodeIndex


def compact_nodes(edges: List[Edge], index: NodeIndex) -> List[RetainedNode]:
    """Collect the endpoint nodes of all edges, each exactly once.

    Nodes are listed in first-encounter order, scanning edges in order and
    each edge's p1 before its p2. The index is only read.

    Args:
        edges: Edges with resolved endpoints
        index: Node index after the node pass

    Returns:
        Retained endpoint nodes

    Raises:
        IncompleteDataError: If an endpoint has no coordinates
    """
    retained_ids: Set[int] = set()
    retained: List[RetainedNode] = []

    for edge in edges:
        for node_id in (edge.p1, edge.p2):
            if node_id in retained_ids:
                continue
            lon, lat = index.coordinates(node_id)
            retained_ids.add(node_id)
            retained.append(RetainedNode(id=node_id, lon=lon, lat=lat))

    return retained
