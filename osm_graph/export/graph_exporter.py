"""Road graph JSON export."""
import json
from pathlib import Path
from typing import Dict, Any, Union

from osm_graph.export.base import BaseExporter
from osm_graph.models.graph import RoadGraph


class GraphExporter(BaseExporter):
    """Export a road graph as a single JSON document.

    Output layout::

        {"roads": [{"p1", "p2", "directed", "sidewalks", "distance"}, ...],
         "nodes": [{"id", "coordinates": [lon, lat]}, ...]}

    The nodes list is only written for graphs extracted with nodes.
    """

    def __init__(self, pretty: bool = False):
        """Initialize graph exporter.

        Args:
            pretty: If True, indent the output
        """
        self.pretty = pretty

    def get_format_name(self) -> str:
        return 'json'

    def export(self, graph: RoadGraph, output_file: str) -> Dict[str, Any]:
        """Write the graph to a JSON file in one go.

        Args:
            graph: Fully resolved road graph
            output_file: Output file path

        Returns:
            Metadata dict with road and node counts
        """
        if self.pretty:
            output_str = json.dumps(graph.to_dict(), indent=2)
        else:
            output_str = json.dumps(graph.to_dict(), separators=(',', ':'))

        with open(output_file, 'w', encoding='utf-8') as f:
            f.write(output_str)

        return {
            'format': self.get_format_name(),
            'output_file': str(output_file),
            'roads': len(graph.roads),
            'nodes': len(graph.nodes) if graph.nodes is not None else None,
            'bytes_written': len(output_str.encode('utf-8'))
        }


def load_graph(input_file: Union[str, Path]) -> Dict[str, Any]:
    """Read a graph file written by GraphExporter.

    Args:
        input_file: Path to the graph JSON file

    Returns:
        Parsed graph record
    """
    with open(input_file, 'r', encoding='utf-8') as f:
        return json.load(f)
