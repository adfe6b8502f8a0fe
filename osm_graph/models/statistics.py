"""Extraction run statistics."""
from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass
class ExtractionStats:
    """Counters and timings collected over one extraction run."""
    # Pass 1
    ways_seen: int = 0
    ways_accepted: int = 0
    edges: int = 0

    # Pass 2
    nodes_seen: int = 0
    nodes_demanded: int = 0
    nodes_resolved: int = 0
    nodes_missing: int = 0

    # Output
    nodes_retained: int = 0
    total_distance_m: float = 0.0

    first_pass_time: float = 0.0
    second_pass_time: float = 0.0

    @property
    def ways_rejected(self) -> int:
        """Ways that did not pass the road filter."""
        return self.ways_seen - self.ways_accepted

    @property
    def nodes_ignored(self) -> int:
        """Node records that no accepted way asked for."""
        return self.nodes_seen - self.nodes_resolved

    @property
    def processing_time(self) -> float:
        """Time spent streaming the source."""
        return self.first_pass_time + self.second_pass_time

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        result = asdict(self)
        result['ways_rejected'] = self.ways_rejected
        result['nodes_ignored'] = self.nodes_ignored
        result['processing_time'] = self.processing_time
        return result
