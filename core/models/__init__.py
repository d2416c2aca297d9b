"""ChunkLink Core Models Package - Domain model definitions.

This package contains the domain models of the build core: declared chunks,
the raw output of the graph calculation tool, and the resolved chunk graph.

The models follow these principles:
- Immutable data structures using dataclasses with frozen=True
- Declared configuration and computed results kept in separate records
- Validation on construction, raising core exceptions
"""

from .chunk_definition import ChunkDefinition, ChunkRegistry, default_import_alias, is_js_identifier
from .chunk_graph import ChunkGraph, ChunkGraphNode
from .resolver_output import ChunkDescriptor, RawResolverOutput

__all__ = [
    "ChunkDefinition",
    "ChunkRegistry",
    "default_import_alias",
    "is_js_identifier",
    "ChunkGraph",
    "ChunkGraphNode",
    "ChunkDescriptor",
    "RawResolverOutput",
]
