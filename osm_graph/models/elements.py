"""OSM input records and road graph output records."""
from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Any, Optional


@dataclass
class OSMNode:
    """OSM Node as delivered by a record source.

    Only the id and the location matter to graph extraction; tags are
    never read.
    """
    id: int
    lon: float
    lat: float

    @property
    def coordinates(self) -> Tuple[float, float]:
        """Location as a (lon, lat) pair."""
        return (self.lon, self.lat)


@dataclass
class OSMWay:
    """OSM Way with its ordered node references and tags."""
    id: int
    node_refs: List[int] = field(default_factory=list)
    tags: Dict[str, str] = field(default_factory=dict)

    @property
    def highway(self) -> Optional[str]:
        """Value of the highway tag, if any."""
        return self.tags.get('highway')


@dataclass
class Edge:
    """Road segment between two endpoint nodes.

    `geometry` holds the full node chain from p1 to p2 until distances
    are populated, after which it is dropped and only the endpoints remain.
    """
    p1: int
    p2: int
    directed: bool = False
    sidewalks: Tuple[bool, bool] = (False, False)
    geometry: Optional[List[int]] = None
    distance: float = 0.0

    @property
    def node_sequence(self) -> List[int]:
        """Node ids to walk when measuring this edge."""
        if self.geometry:
            return self.geometry
        return [self.p1, self.p2]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the exported road record."""
        return {
            'p1': self.p1,
            'p2': self.p2,
            'directed': self.directed,
            'sidewalks': [self.sidewalks[0], self.sidewalks[1]],
            'distance': self.distance
        }


@dataclass
class RetainedNode:
    """Edge endpoint kept in the exported node list."""
    id: int
    lon: float
    lat: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the exported node record (GeoJSON coordinate order)."""
        return {
            'id': self.id,
            'coordinates': [self.lon, self.lat]
        }
