"""Providers package for ChunkLink - concrete implementations of abstract interfaces."""

from .compiler import ClosureCompiler, CompilerOptions
from .graph import ClosureCalculateChunksProvider, ResolverCache
from .transforms import LicenseNormalizer, PathFlattenTransform

__all__ = [
    # Graph calculation
    "ClosureCalculateChunksProvider",
    "ResolverCache",

    # Compilation
    "ClosureCompiler",
    "CompilerOptions",

    # Source transforms
    "LicenseNormalizer",
    "PathFlattenTransform",
]
