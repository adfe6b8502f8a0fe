"""Extraction configuration."""
from dataclasses import dataclass
from typing import Optional

INPUT_FORMATS = ('xml', 'pbf')


@dataclass
class ExtractionConfig:
    """User options for one extraction run.

    Args:
        include_nodes (bool): Export the coordinates of edge endpoints
          alongside the roads.
        simplify (bool): Request road geometry simplification. Accepted for
          command-line compatibility; geometry is not simplified.
        split_segments (bool): Emit one edge per consecutive node pair of a
          way instead of one edge per way.
        input_format (str): 'xml' or 'pbf'. Detected from the input file
          extension when None.
        pretty (bool): Indent the JSON output.
        quiet (bool): Suppress progress output.
        verbose (int): Extra progress detail when above zero.
    """

    include_nodes: bool = False
    simplify: bool = True
    split_segments: bool = False
    input_format: Optional[str] = None
    pretty: bool = False
    quiet: bool = False
    verbose: int = 0

    def __post_init__(self):
        if self.input_format is not None and self.input_format not in INPUT_FORMATS:
            raise ValueError(
                f"input_format must be one of {', '.join(INPUT_FORMATS)}, "
                f"got {self.input_format!r}"
            )

    @classmethod
    def from_args(cls, args) -> 'ExtractionConfig':
        """Build a config from parsed `extract` command arguments."""
        return cls(
            include_nodes=getattr(args, 'nodes', False),
            simplify=getattr(args, 'simplify', True),
            split_segments=getattr(args, 'split_segments', False),
            input_format=getattr(args, 'format', None),
            pretty=getattr(args, 'pretty', False),
            quiet=getattr(args, 'quiet', False),
            verbose=getattr(args, 'verbose', 0) or 0,
        )
