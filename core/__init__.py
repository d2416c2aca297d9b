"""ChunkLink Core Package - Domain models, types, and exceptions.

This package contains the core domain models and types that form the foundation
of the ChunkLink build core. These models are independent of the external
tools and of the CLI.

Modules:
    models: Chunk definitions, resolver output and the resolved chunk graph
    types: Common type definitions and aliases
    exceptions: Core exception classes for error handling
"""

from .exceptions import (
    CacheMissingError,
    ChunkLinkError,
    ConfigurationError,
    GraphInconsistencyError,
    ToolExecutionError,
    UnsupportedRuntimeError,
    ValidationError,
)
from .models import (
    ChunkDefinition,
    ChunkDescriptor,
    ChunkGraph,
    ChunkGraphNode,
    ChunkRegistry,
    RawResolverOutput,
)
from .types import ChunkName, CompilationLevel, FilePath, Nickname, WarningLevel

__all__ = [
    # Domain Models
    "ChunkDefinition",
    "ChunkRegistry",
    "ChunkGraph",
    "ChunkGraphNode",
    "ChunkDescriptor",
    "RawResolverOutput",

    # Types
    "ChunkName",
    "Nickname",
    "FilePath",
    "CompilationLevel",
    "WarningLevel",

    # Exceptions
    "ChunkLinkError",
    "ValidationError",
    "ConfigurationError",
    "GraphInconsistencyError",
    "UnsupportedRuntimeError",
    "CacheMissingError",
    "ToolExecutionError",
]

__version__ = "0.3.0"
