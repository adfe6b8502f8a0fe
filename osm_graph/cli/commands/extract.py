"""Extract command - build the road graph from an OSM dump."""
import argparse
import sys
import time
from pathlib import Path

from ...api import extract_graph
from ...config import ExtractionConfig, INPUT_FORMATS


def setup_parser(subparsers):
    """Setup the extract subcommand parser."""
    parser = subparsers.add_parser(
        'extract',
        help='Extract and transform OSM data into a road graph',
        description='Extract road edges with distances from an OSM XML or PBF file.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  osmgraph extract region.osm.pbf graph.json
  osmgraph extract --nodes region.osm graph.json
  osmgraph extract --nodes --split-segments -f pbf dump.bin graph.json
'''
    )

    parser.add_argument('input', help='OSM input data file (XML or PBF)')
    parser.add_argument('output', help='Output JSON file')
    parser.add_argument(
        '--nodes',
        action='store_true',
        help='Include nodes information in the export'
    )
    parser.add_argument(
        '--simplify',
        dest='simplify',
        action='store_true',
        default=True,
        help='Simplify road geometry (default; currently has no effect)'
    )
    parser.add_argument(
        '--no-simplify',
        dest='simplify',
        action='store_false',
        help='Do not simplify road geometry'
    )
    parser.add_argument(
        '-f', '--format',
        choices=list(INPUT_FORMATS),
        help='Input format (default: .osm/.xml is XML, anything else PBF)'
    )
    parser.add_argument(
        '--split-segments',
        action='store_true',
        help='One edge per consecutive node pair instead of one per way'
    )
    parser.add_argument(
        '--pretty',
        action='store_true',
        help='Indent the JSON output'
    )

    parser.set_defaults(func=run)
    return parser


def run(args):
    """Execute the extract command."""
    input_path = Path(args.input)

    if not input_path.exists():
        print(f"osmgraph: error: File not found: {args.input}", file=sys.stderr)
        return 3

    config = ExtractionConfig.from_args(args)
    start_time = time.time()

    result = extract_graph(input_path, args.output, config)

    elapsed = time.time() - start_time

    if not config.quiet:
        print("\nGraph exported:")
        print(f"  Roads: {result['roads']}")
        if result['nodes'] is not None:
            print(f"  Nodes: {result['nodes']}")
        print(f"  Distance: {result['stats']['total_distance_m'] / 1000:.1f} km")
        print(f"  Output: {args.output}")
        print(f"  Time: {elapsed:.3f}s")

    return 0
