"""Two-pass road graph extraction."""

from osm_graph.extraction.pipeline import GraphExtractor

__all__ = ['GraphExtractor']
