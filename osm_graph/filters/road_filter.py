"""Road way filter and edge builder.

Decides which ways are roads of interest and turns each accepted way into
graph edges, marking every node it references as needed for the node pass.
"""
from typing import Dict, FrozenSet, List, Tuple

from osm_graph.models.elements import Edge, OSMWay
from osm_graph.resolution.node_index import NodeIndex


# Highway classifications that make up the routable road graph
ROAD_HIGHWAY_TYPES: FrozenSet[str] = frozenset({
    'motorway', 'motorway_link',
    'trunk', 'trunk_link',
    'primary', 'primary_link',
    'secondary', 'secondary_link',
    'tertiary', 'tertiary_link',
    'unclassified', 'residential', 'living_street'
})

# sidewalk=* value -> (left, right)
SIDEWALK_SIDES: Dict[str, Tuple[bool, bool]] = {
    'both': (True, True),
    'left': (True, False),
    'right': (False, True),
}

NO_SIDEWALKS: Tuple[bool, bool] = (False, False)


def is_road_way(tags: Dict[str, str]) -> bool:
    """Check if a way's highway tag is one of the road classifications.

    Args:
        tags: Way tag dictionary

    Returns:
        True if the way belongs in the road graph
    """
    return tags.get('highway') in ROAD_HIGHWAY_TYPES


def is_directed(tags: Dict[str, str]) -> bool:
    """Check if a way is one-way in its drawing direction.

    Only the literal oneway=yes counts. Reverse conventions such as
    oneway=-1 or oneway=reverse are not interpreted and yield an
    undirected edge.
    """
    return tags.get('oneway') == 'yes'


def parse_sidewalks(tags: Dict[str, str]) -> Tuple[bool, bool]:
    """Map the sidewalk tag to (left, right) presence flags.

    Examples:
        >>> parse_sidewalks({'sidewalk': 'left'})
        (True, False)
        >>> parse_sidewalks({'sidewalk': 'no'})
        (False, False)
    """
    return SIDEWALK_SIDES.get(tags.get('sidewalk'), NO_SIDEWALKS)


class EdgeBuilder:
    """Builds road edges from way records during the way pass."""

    def __init__(self, index: NodeIndex, split_segments: bool = False):
        """Initialize edge builder.

        Args:
            index: Node index receiving the demanded node ids
            split_segments: If True, emit one edge per consecutive node
                pair instead of one edge spanning the whole way
        """
        self.index = index
        self.split_segments = split_segments

    def process_way(self, way: OSMWay) -> List[Edge]:
        """Filter a way and build its edges.

        Every node of an accepted way is demanded, not only the endpoints,
        since edge length is measured along the full polyline.

        Args:
            way: Way record from the source

        Returns:
            Edges built from the way (empty if the way was rejected)
        """
        refs = way.node_refs
        if not is_road_way(way.tags) or len(refs) < 2:
            return []

        self.index.demand_all(refs)

        directed = is_directed(way.tags)
        sidewalks = parse_sidewalks(way.tags)

        if self.split_segments:
            return [
                Edge(p1=refs[i], p2=refs[i + 1], directed=directed,
                     sidewalks=sidewalks, geometry=[refs[i], refs[i + 1]])
                for i in range(len(refs) - 1)
            ]

        return [Edge(p1=refs[0], p2=refs[-1], directed=directed,
                     sidewalks=sidewalks, geometry=list(refs))]
