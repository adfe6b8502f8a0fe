"""Node reference index for deferred coordinate resolution.

Ways reference nodes by id long before (or after) the node records carrying
their coordinates show up in the stream. The index keeps two structures:

- a demand set with every node id an accepted way referenced (pass 1)
- a resolution map with the coordinates of demanded ids only (pass 2)

A node id is therefore in one of three states: absent (never demanded),
pending (demanded, not resolved yet) or resolved.
"""
from typing import Dict, Iterable, Iterator, Set, Tuple

from osm_graph.errors import IncompleteDataError


class NodeIndex:
    """Demand set and resolution map for node coordinates."""

    def __init__(self):
        self._demanded: Set[int] = set()
        self._resolved: Dict[int, Tuple[float, float]] = {}
        self._frozen = False

    def demand(self, node_id: int) -> None:
        """Record that an accepted edge needs this node.

        Raises:
            RuntimeError: If the demand set was already frozen
        """
        if self._frozen:
            raise RuntimeError(f"Node index is frozen; cannot demand node {node_id}")
        self._demanded.add(node_id)

    def demand_all(self, node_ids: Iterable[int]) -> None:
        """Record every node of a reference chain."""
        for node_id in node_ids:
            self.demand(node_id)

    def freeze(self) -> None:
        """Seal the demand set. Called once the way stream has ended."""
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        """Check if the demand set is sealed."""
        return self._frozen

    def resolve(self, node_id: int, lon: float, lat: float) -> bool:
        """Attach coordinates to a demanded node.

        Nodes nobody asked for are ignored, so the index never grows past
        the demand set.

        Returns:
            True if the coordinates were stored
        """
        if node_id not in self._demanded:
            return False
        self._resolved[node_id] = (lon, lat)
        return True

    def is_demanded(self, node_id: int) -> bool:
        """Check if any accepted edge references the node."""
        return node_id in self._demanded

    def is_resolved(self, node_id: int) -> bool:
        """Check if the node's coordinates are known."""
        return node_id in self._resolved

    def coordinates(self, node_id: int) -> Tuple[float, float]:
        """Get the (lon, lat) pair of a resolved node.

        Raises:
            IncompleteDataError: If the node is pending or was never demanded
        """
        try:
            return self._resolved[node_id]
        except KeyError:
            if self.is_demanded(node_id):
                reason = "was never found in the node stream"
            else:
                reason = "was never referenced by an accepted way"
            raise IncompleteDataError(
                f"Incomplete data: node {node_id} {reason}", node_id=node_id
            ) from None

    def unresolved(self) -> Iterator[int]:
        """Iterate over demanded node ids still lacking coordinates."""
        return (node_id for node_id in self._demanded if node_id not in self._resolved)

    @property
    def resolved_count(self) -> int:
        """Number of demanded nodes with known coordinates."""
        return len(self._resolved)

    def __len__(self) -> int:
        return len(self._demanded)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._demanded
