"""GeoJSON command - visualize an extracted graph."""
import sys
from pathlib import Path

from ...api import convert_to_geojson


def setup_parser(subparsers):
    """Setup the geojson subcommand parser."""
    parser = subparsers.add_parser(
        'geojson',
        help='Create GeoJSON from extracted data',
        description='Convert a graph extracted with --nodes into a GeoJSON GeometryCollection '
                    'with one straight line per road.'
    )

    parser.add_argument('input', help='Input JSON file produced with `extract ... --nodes`')
    parser.add_argument('output', help='Output GeoJSON file')
    parser.add_argument(
        '--pretty',
        action='store_true',
        help='Indent the GeoJSON output'
    )

    parser.set_defaults(func=run)
    return parser


def run(args):
    """Execute the geojson command."""
    input_path = Path(args.input)

    if not input_path.exists():
        print(f"osmgraph: error: File not found: {args.input}", file=sys.stderr)
        return 3

    result = convert_to_geojson(input_path, args.output,
                                pretty=getattr(args, 'pretty', False))

    if not getattr(args, 'quiet', False):
        print(f"GeoJSON saved to: {args.output} ({result['geometries']} lines)")

    return 0
