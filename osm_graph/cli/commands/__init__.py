"""CLI command implementations."""

from osm_graph.cli.commands.extract import run as cmd_extract
from osm_graph.cli.commands.geojson import run as cmd_geojson

__all__ = ['cmd_extract', 'cmd_geojson']
