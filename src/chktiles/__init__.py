"""SVG tile checker: metadata, spelling and duplicate detection."""

from .checks import run_checks
from .config import TileCheckConfig, load_config
from .duplicates import DuplicateDetector, find_duplicates
from .errors import ConfigError, DimensionError, TileCheckError, TileParseError
from .metadata import TileDocument, load_tile, parse_tile
from .report import ConsoleSink, Diagnostic, Severity
from .units import magnitude, unit_multiplier
from .walker import ScanSummary, TileWalker

__all__ = [
    "ConfigError",
    "ConsoleSink",
    "Diagnostic",
    "DimensionError",
    "DuplicateDetector",
    "ScanSummary",
    "Severity",
    "TileCheckConfig",
    "TileCheckError",
    "TileDocument",
    "TileParseError",
    "TileWalker",
    "find_duplicates",
    "load_config",
    "load_tile",
    "magnitude",
    "parse_tile",
    "run_checks",
    "unit_multiplier",
]
