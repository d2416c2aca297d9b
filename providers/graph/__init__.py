"""Graph calculation providers for ChunkLink."""

from .chunk_cache import ResolverCache
from .closure_calculator import ClosureCalculateChunksProvider

__all__ = [
    "ClosureCalculateChunksProvider",
    "ResolverCache",
]
