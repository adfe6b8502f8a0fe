"""Allow running osm_graph.cli as a module.

Usage:
    python -m osm_graph.cli --help
    python -m osm_graph.cli extract map.osm graph.json
"""

import sys
from osm_graph.cli import main

if __name__ == "__main__":
    sys.exit(main())
