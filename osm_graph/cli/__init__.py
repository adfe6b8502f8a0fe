"""osmgraph command-line interface.

Installed as the ``osmgraph`` console script; ``python -m osm_graph`` and
``python -m osm_graph.cli`` run the same entry point.
"""

import sys
from typing import Optional

from osm_graph.cli.main import main as _main, create_parser

__all__ = ['main', 'create_parser']


def main(argv: Optional[list] = None) -> int:
    """Run the CLI and return its exit code. Ctrl-C exits with 130."""
    try:
        return _main(argv) or 0
    except KeyboardInterrupt:
        print("\nosmgraph: interrupted", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
