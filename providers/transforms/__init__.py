"""Source text transforms applied around compilation."""

from .license_normalizer import (
    LICENSE_HOLDERS,
    LICENSE_PATTERN,
    LicenseNormalizer,
    line_count,
    normalize,
)
from .path_flatten import (
    DEFAULT_FLATTEN_AREA,
    FLATTEN_TOKEN,
    PathFlattenTransform,
    PathParts,
    flatten_path,
    unflatten_path,
)
from .source_map import rewrite_source_map_file, rewrite_sources

__all__ = [
    "LICENSE_HOLDERS",
    "LICENSE_PATTERN",
    "LicenseNormalizer",
    "line_count",
    "normalize",
    "DEFAULT_FLATTEN_AREA",
    "FLATTEN_TOKEN",
    "PathFlattenTransform",
    "PathParts",
    "flatten_path",
    "unflatten_path",
    "rewrite_source_map_file",
    "rewrite_sources",
]
