"""Base class for road graph exporters."""
from abc import ABC, abstractmethod
from typing import Dict, Any

from osm_graph.models.graph import RoadGraph


class BaseExporter(ABC):
    """Abstract base class for exporters."""

    @abstractmethod
    def export(self, graph: RoadGraph, output_file: str) -> Dict[str, Any]:
        """Export a graph to file.

        Args:
            graph: Fully resolved road graph
            output_file: Output file path

        Returns:
            Metadata dictionary
        """
        pass

    @abstractmethod
    def get_format_name(self) -> str:
        """Get the format name (e.g., 'json').

        Returns:
            Format name string
        """
        pass
