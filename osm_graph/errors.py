"""Error types raised while extracting or converting road graphs."""
from typing import Optional


class OSMGraphError(Exception):
    """Base class for all osmgraph failures. Every one of them ends the run."""


class UpstreamParseError(OSMGraphError):
    """The document parser reported malformed or truncated input."""


class IncompleteDataError(OSMGraphError):
    """An edge references a node whose coordinates never appeared.

    Raised when the node stream of the source does not cover the node
    references of the accepted ways.
    """

    def __init__(self, message: str, node_id: Optional[int] = None):
        super().__init__(message)
        self.node_id = node_id


class InvalidExportError(OSMGraphError):
    """A graph file cannot be converted (no roads, no nodes, or a dangling endpoint)."""
