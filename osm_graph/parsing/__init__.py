"""Streaming OSM record sources."""
from pathlib import Path
from typing import Optional, Union

from osm_graph.parsing.base import RecordSource
from osm_graph.parsing.xml_source import XMLRecordSource
from osm_graph.parsing.pbf_source import PBFRecordSource

SOURCE_FORMATS = {
    'xml': XMLRecordSource,
    'pbf': PBFRecordSource,
}


def detect_format(filepath: Union[str, Path]) -> str:
    """Detect input format from file extension.

    Anything that is not plainly XML is handed to the PBF reader.
    """
    ext = Path(filepath).suffix.lower()
    format_map = {
        '.osm': 'xml',
        '.xml': 'xml',
        '.pbf': 'pbf'
    }
    return format_map.get(ext, 'pbf')


def open_record_source(filepath: Union[str, Path],
                       input_format: Optional[str] = None) -> RecordSource:
    """Create the record source for an input file.

    Args:
        filepath: Path to the OSM file
        input_format: 'xml' or 'pbf'; detected from the extension if None

    Returns:
        RecordSource for the file

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the format is unknown
    """
    if not Path(filepath).exists():
        raise FileNotFoundError(f"OSM file not found: {filepath}")

    fmt = input_format or detect_format(filepath)
    if fmt not in SOURCE_FORMATS:
        raise ValueError(f"Unknown input format: {fmt}")

    return SOURCE_FORMATS[fmt](filepath)


__all__ = [
    'RecordSource', 'XMLRecordSource', 'PBFRecordSource',
    'SOURCE_FORMATS', 'detect_format', 'open_record_source',
]
