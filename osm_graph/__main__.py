"""Allow running osm_graph as a module.

Usage:
    python -m osm_graph --help
    python -m osm_graph extract map.osm.pbf graph.json --nodes
    python -m osm_graph geojson graph.json graph.geojson
"""

import sys
from osm_graph.cli import main

if __name__ == "__main__":
    sys.exit(main())
