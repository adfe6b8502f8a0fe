"""OSM XML record source built on a SAX handler.

SAX keeps memory flat regardless of file size: only the way currently
being read is held, never the document tree.
"""
import xml.sax
from typing import Optional

from osm_graph.errors import UpstreamParseError
from osm_graph.models.elements import OSMNode, OSMWay
from osm_graph.parsing.base import RecordSource, WayCallback, NodeCallback


def _int_attr(attrs, name: str, element: str) -> int:
    value = attrs.get(name)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise UpstreamParseError(
            f"Invalid {element} {name} attribute: {value!r}"
        ) from None


def _float_attr(attrs, name: str, element: str) -> float:
    value = attrs.get(name)
    try:
        return float(value)
    except (TypeError, ValueError):
        raise UpstreamParseError(
            f"Invalid {element} {name} attribute: {value!r}"
        ) from None


class OSMRecordHandler(xml.sax.ContentHandler):
    """SAX handler turning OSM XML elements into node and way records."""

    def __init__(self, on_way: Optional[WayCallback] = None,
                 on_node: Optional[NodeCallback] = None):
        super().__init__()
        self.on_way = on_way
        self.on_node = on_node
        self._way_id: Optional[int] = None
        self._node_refs = []
        self._tags = {}

    def startElement(self, name, attrs):
        if name == 'node':
            if self.on_node is not None:
                self.on_node(OSMNode(
                    id=_int_attr(attrs, 'id', 'node'),
                    lon=_float_attr(attrs, 'lon', 'node'),
                    lat=_float_attr(attrs, 'lat', 'node')
                ))

        elif name == 'way':
            if self.on_way is not None:
                self._way_id = _int_attr(attrs, 'id', 'way')
                self._node_refs = []
                self._tags = {}

        elif self._way_id is not None:
            if name == 'nd':
                self._node_refs.append(_int_attr(attrs, 'ref', 'nd'))
            elif name == 'tag':
                self._tags[attrs.get('k', '')] = attrs.get('v', '')

    def endElement(self, name):
        if name == 'way' and self._way_id is not None:
            way = OSMWay(id=self._way_id, node_refs=self._node_refs, tags=self._tags)
            self._way_id = None
            self._node_refs = []
            self._tags = {}
            self.on_way(way)


class XMLRecordSource(RecordSource):
    """Record source for .osm XML files."""

    def get_format_name(self) -> str:
        return 'xml'

    def _stream_ways(self, on_way: WayCallback) -> None:
        self._parse(OSMRecordHandler(on_way=on_way))

    def _stream_nodes(self, on_node: NodeCallback) -> None:
        self._parse(OSMRecordHandler(on_node=on_node))

    def _parse(self, handler: OSMRecordHandler) -> None:
        parser = xml.sax.make_parser()
        parser.setContentHandler(handler)
        try:
            parser.parse(self.path)
        except xml.sax.SAXParseException as e:
            raise UpstreamParseError(
                f"{self.path}:{e.getLineNumber()}:{e.getColumnNumber()}: {e.getMessage()}"
            ) from e
        except xml.sax.SAXException as e:
            raise UpstreamParseError(f"{self.path}: {e.getMessage()}") from e
