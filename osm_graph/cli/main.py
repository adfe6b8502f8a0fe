"""CLI main entry point with subcommand structure."""
import argparse
import sys
from typing import Optional

from osm_graph import __version__
from osm_graph.errors import OSMGraphError


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with subcommands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog='osmgraph',
        description='osmgraph - compact routing graphs from OpenStreetMap dumps',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  osmgraph extract region.osm.pbf graph.json
  osmgraph extract --nodes region.osm graph.json
  osmgraph geojson graph.json graph.geojson
'''
    )

    # Global options
    parser.add_argument('--version', '-V', action='version',
                        version=f'osmgraph {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Suppress non-error output')
    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help='Increase verbosity')

    subparsers = parser.add_subparsers(dest='command', title='commands',
                                       description='Available commands')

    from osm_graph.cli.commands.extract import setup_parser as setup_extract
    setup_extract(subparsers)

    from osm_graph.cli.commands.geojson import setup_parser as setup_geojson
    setup_geojson(subparsers)

    return parser


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    # No command specified - show help
    if not parsed_args.command:
        parser.print_help()
        return 0

    try:
        return parsed_args.func(parsed_args)

    except FileNotFoundError as e:
        print(f"osmgraph: error: File not found: {e}", file=sys.stderr)
        return 3
    except PermissionError as e:
        print(f"osmgraph: error: Permission denied: {e}", file=sys.stderr)
        return 4
    except OSMGraphError as e:
        print(f"osmgraph: error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"osmgraph: error: {e}", file=sys.stderr)
        if parsed_args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
