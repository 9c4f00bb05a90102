"""Permission engine: path parsing, tree construction and membership checks."""

from .paths import canonicalize, parse_region_path, parse_region_paths
from .query import is_authorized
from .builder import build_region_tree
from .validator import validate_within_parent

__all__ = [
    "canonicalize",
    "parse_region_path",
    "parse_region_paths",
    "is_authorized",
    "build_region_tree",
    "validate_within_parent",
]
