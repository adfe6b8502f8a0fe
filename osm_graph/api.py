"""File-level entry points.

Provides extract_graph (OSM dump to road graph JSON) and
convert_to_geojson (road graph JSON to GeometryCollection).
"""
from pathlib import Path
from typing import Dict, Any, Optional, Union

from osm_graph.config import ExtractionConfig
from osm_graph.export.geojson_converter import GeoJSONConverter
from osm_graph.export.graph_exporter import GraphExporter
from osm_graph.extraction.pipeline import GraphExtractor
from osm_graph.models.graph import RoadGraph
from osm_graph.parsing import open_record_source


def build_graph(input_file: Union[str, Path],
                config: Optional[ExtractionConfig] = None) -> RoadGraph:
    """Extract a road graph from an OSM file without writing it.

    Args:
        input_file: OSM XML or PBF file
        config: Extraction options

    Returns:
        Resolved RoadGraph
    """
    config = config or ExtractionConfig()
    source = open_record_source(input_file, config.input_format)
    return GraphExtractor(source, config).run()


def extract_graph(input_file: Union[str, Path], output_file: Union[str, Path],
                  config: Optional[ExtractionConfig] = None) -> Dict[str, Any]:
    """Extract a road graph and write it as JSON.

    The output file is only created once extraction fully succeeded.

    Args:
        input_file: OSM XML or PBF file
        output_file: Graph JSON output path
        config: Extraction options

    Returns:
        Metadata dict with export details and run statistics
    """
    config = config or ExtractionConfig()
    graph = build_graph(input_file, config)

    if not config.quiet:
        if graph.nodes is not None:
            print(f"Exporting ({len(graph.roads)} roads and {len(graph.nodes)} nodes)")
        else:
            print(f"Exporting ({len(graph.roads)} roads)")

    result = GraphExporter(pretty=config.pretty).export(graph, str(output_file))
    result['stats'] = graph.stats.to_dict()
    return result


def convert_to_geojson(input_file: Union[str, Path], output_file: Union[str, Path],
                       pretty: bool = False) -> Dict[str, Any]:
    """Convert a graph file extracted with nodes into a GeometryCollection.

    Raises:
        InvalidExportError: If the graph lacks roads or nodes
    """
    if not Path(input_file).exists():
        raise FileNotFoundError(f"Graph file not found: {input_file}")
    return GeoJSONConverter(pretty=pretty).convert_file(input_file, output_file)
