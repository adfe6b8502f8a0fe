"""Record source interface.

A record source streams the ways or the nodes of one OSM file through
callbacks, one record at a time. Either traversal can be requested any
number of times; each one re-reads the file from the start.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional, Union

from osm_graph.errors import UpstreamParseError
from osm_graph.models.elements import OSMNode, OSMWay

WayCallback = Callable[[OSMWay], None]
NodeCallback = Callable[[OSMNode], None]
EndCallback = Callable[[], None]
ErrorCallback = Callable[[str], None]


class RecordSource(ABC):
    """Abstract base class for streaming OSM record sources."""

    def __init__(self, path: Union[str, Path]):
        self.path = str(path)

    def traverse_ways(self, on_way: WayCallback,
                      on_end: Optional[EndCallback] = None,
                      on_error: Optional[ErrorCallback] = None) -> bool:
        """Stream every way record of the file.

        Args:
            on_way: Called once per way, in file order
            on_end: Called after the last way, once the stream is exhausted
            on_error: Called with a message if the input is malformed; the
                traversal then stops without reaching `on_end`

        Returns:
            True if the stream ended normally

        Raises:
            UpstreamParseError: On malformed input when `on_error` is not given
        """
        return self._traverse(lambda: self._stream_ways(on_way), on_end, on_error)

    def traverse_nodes(self, on_node: NodeCallback,
                       on_end: Optional[EndCallback] = None,
                       on_error: Optional[ErrorCallback] = None) -> bool:
        """Stream every node record of the file.

        Same contract as `traverse_ways`.
        """
        return self._traverse(lambda: self._stream_nodes(on_node), on_end, on_error)

    def _traverse(self, stream: Callable[[], None],
                  on_end: Optional[EndCallback],
                  on_error: Optional[ErrorCallback]) -> bool:
        try:
            stream()
        except UpstreamParseError as e:
            if on_error is None:
                raise
            on_error(str(e))
            return False

        if on_end is not None:
            on_end()
        return True

    @abstractmethod
    def _stream_ways(self, on_way: WayCallback) -> None:
        """Deliver all ways, raising UpstreamParseError on malformed input."""
        pass

    @abstractmethod
    def _stream_nodes(self, on_node: NodeCallback) -> None:
        """Deliver all nodes, raising UpstreamParseError on malformed input."""
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """Get the input format name ('xml' or 'pbf')."""
        pass
