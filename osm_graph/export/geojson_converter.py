"""Convert an exported road graph into a GeoJSON GeometryCollection.

Each road becomes a straight two-point LineString between its endpoints,
which is enough to eyeball the extracted network in any GeoJSON viewer.
"""
import json
from pathlib import Path
from typing import Dict, Any, List, Union

from osm_graph.errors import InvalidExportError
from osm_graph.export.graph_exporter import load_graph


class GeoJSONConverter:
    """Map graph records to a GeometryCollection."""

    def __init__(self, pretty: bool = False):
        self.pretty = pretty

    def convert(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Convert a graph record.

        Args:
            data: Graph record with both 'roads' and 'nodes'

        Returns:
            GeoJSON GeometryCollection dict

        Raises:
            InvalidExportError: If roads or nodes are missing, or a road
                endpoint is not in the node list
        """
        if not isinstance(data, dict) or data.get('roads') is None or data.get('nodes') is None:
            raise InvalidExportError(
                "Can only use complete extracted data (extract with --nodes)"
            )

        try:
            coordinates = {node['id']: node['coordinates'] for node in data['nodes']}
        except (KeyError, TypeError):
            raise InvalidExportError("Malformed node list in extracted data") from None

        try:
            endpoints = [(road['p1'], road['p2']) for road in data['roads']]
        except (KeyError, TypeError):
            raise InvalidExportError("Malformed road list in extracted data") from None

        geometries: List[Dict[str, Any]] = []
        for i, (p1, p2) in enumerate(endpoints):
            for node_id in (p1, p2):
                if not isinstance(node_id, int) or node_id not in coordinates:
                    raise InvalidExportError(
                        f"Road {i} references node {node_id} missing from the node list"
                    )

            geometries.append({
                'type': 'LineString',
                'coordinates': [coordinates[p1], coordinates[p2]]
            })

        return {
            'type': 'GeometryCollection',
            'geometries': geometries
        }

    def convert_file(self, input_file: Union[str, Path],
                     output_file: Union[str, Path]) -> Dict[str, Any]:
        """Convert a graph file and write the GeometryCollection.

        Nothing is written if the conversion fails.

        Returns:
            Metadata dict with the geometry count
        """
        collection = self.convert(load_graph(input_file))

        with open(output_file, 'w', encoding='utf-8') as f:
            if self.pretty:
                json.dump(collection, f, indent=2)
            else:
                json.dump(collection, f, separators=(',', ':'))

        return {
            'format': 'geojson',
            'output_file': str(output_file),
            'geometries': len(collection['geometries'])
        }
