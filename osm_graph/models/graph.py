"""Road graph container."""
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional

from osm_graph.models.elements import Edge, RetainedNode
from osm_graph.models.statistics import ExtractionStats


@dataclass
class RoadGraph:
    """Result of an extraction run.

    `nodes` is None when node inclusion was not requested, and a (possibly
    empty) list when it was.
    """
    roads: List[Edge] = field(default_factory=list)
    nodes: Optional[List[RetainedNode]] = None
    stats: ExtractionStats = field(default_factory=ExtractionStats)

    @property
    def has_nodes(self) -> bool:
        """Check if endpoint coordinates are part of this graph."""
        return self.nodes is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the exported graph record."""
        result: Dict[str, Any] = {'roads': [edge.to_dict() for edge in self.roads]}
        if self.nodes is not None:
            result['nodes'] = [node.to_dict() for node in self.nodes]
        return result
