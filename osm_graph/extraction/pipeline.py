"""Two-pass road graph extraction.

Ways reference nodes that may appear anywhere in the file, so a single pass
cannot attach coordinates to edges. Extraction therefore streams the same
source twice:

1. Ways: filter roads, build edges, demand every referenced node id.
2. Nodes: store coordinates for demanded ids only, ignore everything else.

Memory grows with the accepted ways and the nodes they reference, never
with the size of the input file.
"""
import time
from typing import List, Optional

from osm_graph.config import ExtractionConfig
from osm_graph.errors import UpstreamParseError
from osm_graph.export.compactor import compact_nodes
from osm_graph.filters.road_filter import EdgeBuilder
from osm_graph.models.elements import Edge, OSMNode, OSMWay
from osm_graph.models.graph import RoadGraph
from osm_graph.models.statistics import ExtractionStats
from osm_graph.parsing.base import RecordSource
from osm_graph.resolution.distance import populate_distances
from osm_graph.resolution.node_index import NodeIndex


class GraphExtractor:
    """Runs the way pass, the node pass, distance aggregation and compaction."""

    def __init__(self, source: RecordSource, config: Optional[ExtractionConfig] = None):
        """Initialize extractor.

        Args:
            source: Record source for the input file
            config: Extraction options (defaults if None)
        """
        self.source = source
        self.config = config or ExtractionConfig()
        self.index = NodeIndex()
        self.builder = EdgeBuilder(self.index, split_segments=self.config.split_segments)
        self.edges: List[Edge] = []
        self.stats = ExtractionStats()
        self._ways_ended = False
        self._nodes_ended = False

    def run(self) -> RoadGraph:
        """Extract the road graph.

        Returns:
            RoadGraph with distances populated and, if requested, the
            endpoint nodes

        Raises:
            UpstreamParseError: If the source is malformed
            IncompleteDataError: If a referenced node never appeared
        """
        self.collect_edges()
        self.resolve_nodes()

        self._report("Populating distances")
        self.stats.total_distance_m = populate_distances(self.edges, self.index)

        if self.config.simplify:
            self._report("Geometry simplification is not implemented; roads are kept as extracted",
                         detail=True)

        nodes = None
        if self.config.include_nodes:
            self._report("Stripping intermediate nodes")
            nodes = compact_nodes(self.edges, self.index)
            self.stats.nodes_retained = len(nodes)

        return RoadGraph(roads=self.edges, nodes=nodes, stats=self.stats)

    def collect_edges(self) -> List[Edge]:
        """Pass 1: stream ways and build edges in encounter order."""
        self._report("First pass (ways)")
        start_time = time.time()

        self.source.traverse_ways(self._on_way, on_end=self._on_ways_end,
                                  on_error=self._on_error)
        if not self._ways_ended:
            raise UpstreamParseError(f"{self.source.path}: way stream ended unexpectedly")

        self.index.freeze()
        self.stats.edges = len(self.edges)
        self.stats.nodes_demanded = len(self.index)
        self.stats.first_pass_time = time.time() - start_time

        self._report(f"  {self.stats.ways_accepted:,} of {self.stats.ways_seen:,} ways accepted, "
                     f"{self.stats.edges:,} edges, {self.stats.nodes_demanded:,} nodes needed "
                     f"({self.stats.first_pass_time:.3f}s)", detail=True)
        return self.edges

    def resolve_nodes(self) -> None:
        """Pass 2: stream nodes and attach coordinates to demanded ids.

        Raises:
            RuntimeError: If the way pass has not completed
        """
        if not self.index.is_frozen:
            raise RuntimeError("Node pass requested before the way pass completed")

        self._report("Second pass (nodes)")
        start_time = time.time()

        self.source.traverse_nodes(self._on_node, on_end=self._on_nodes_end,
                                   on_error=self._on_error)
        if not self._nodes_ended:
            raise UpstreamParseError(f"{self.source.path}: node stream ended unexpectedly")

        self.stats.nodes_resolved = self.index.resolved_count
        self.stats.nodes_missing = sum(1 for _ in self.index.unresolved())
        self.stats.second_pass_time = time.time() - start_time

        self._report(f"  {self.stats.nodes_resolved:,} of {self.stats.nodes_demanded:,} needed nodes "
                     f"resolved, {self.stats.nodes_ignored:,} ignored "
                     f"({self.stats.second_pass_time:.3f}s)", detail=True)
        if self.stats.nodes_missing:
            self._report(f"  {self.stats.nodes_missing:,} needed nodes missing from the node stream",
                         detail=True)

    def _on_way(self, way: OSMWay) -> None:
        self.stats.ways_seen += 1
        edges = self.builder.process_way(way)
        if edges:
            self.stats.ways_accepted += 1
            self.edges.extend(edges)

    def _on_ways_end(self) -> None:
        self._ways_ended = True

    def _on_node(self, node: OSMNode) -> None:
        self.stats.nodes_seen += 1
        self.index.resolve(node.id, node.lon, node.lat)

    def _on_nodes_end(self) -> None:
        self._nodes_ended = True

    def _on_error(self, message: str) -> None:
        raise UpstreamParseError(message)

    def _report(self, message: str, detail: bool = False) -> None:
        if self.config.quiet or (detail and not self.config.verbose):
            return
        print(message)
