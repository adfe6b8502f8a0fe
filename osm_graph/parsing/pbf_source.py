"""OSM PBF record source built on pyosmium."""
import osmium

from osm_graph.errors import UpstreamParseError
from osm_graph.models.elements import OSMNode, OSMWay
from osm_graph.parsing.base import RecordSource, WayCallback, NodeCallback


class _WayHandler(osmium.SimpleHandler):
    """Forwards ways only; osmium skips decoding the other entity types."""

    def __init__(self, on_way: WayCallback):
        super().__init__()
        self.on_way = on_way

    def way(self, w):
        self.on_way(OSMWay(
            id=w.id,
            node_refs=[n.ref for n in w.nodes],
            tags={tag.k: tag.v for tag in w.tags}
        ))


class _NodeHandler(osmium.SimpleHandler):
    """Forwards nodes with a valid location."""

    def __init__(self, on_node: NodeCallback):
        super().__init__()
        self.on_node = on_node

    def node(self, n):
        location = n.location
        if not location.valid():
            return
        self.on_node(OSMNode(id=n.id, lon=location.lon, lat=location.lat))


class PBFRecordSource(RecordSource):
    """Record source for .osm.pbf files (any format libosmium reads)."""

    def get_format_name(self) -> str:
        return 'pbf'

    def _stream_ways(self, on_way: WayCallback) -> None:
        self._apply(_WayHandler(on_way))

    def _stream_nodes(self, on_node: NodeCallback) -> None:
        self._apply(_NodeHandler(on_node))

    def _apply(self, handler: osmium.SimpleHandler) -> None:
        try:
            handler.apply_file(self.path)
        except RuntimeError as e:
            raise UpstreamParseError(f"{self.path}: {e}") from e
