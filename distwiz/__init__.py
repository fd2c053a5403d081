"""
distwiz: sparse pairwise distances to dense, gzip-compressed square matrices.
"""

from .converter import ConversionSummary, build_row, build_store, convert, emit_matrix, format_distance
from .errors import ConfigError, DistwizError, FormatError
from .labels import scan_for_labels
from .parsing import Edge, parse_edge
from .selector import Mode, parse_mode, select_mode
from .sink import open_compressed_sink
from .stores import DiskScanningDistanceStore, DistanceStore, InMemoryDistanceStore

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ConversionSummary",
    "DiskScanningDistanceStore",
    "DistanceStore",
    "DistwizError",
    "Edge",
    "FormatError",
    "InMemoryDistanceStore",
    "Mode",
    "build_row",
    "build_store",
    "convert",
    "emit_matrix",
    "format_distance",
    "open_compressed_sink",
    "parse_edge",
    "parse_mode",
    "scan_for_labels",
    "select_mode",
]
