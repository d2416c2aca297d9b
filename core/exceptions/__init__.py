"""ChunkLink Core Exceptions Package - Core exception classes for error handling.

This package contains the exception hierarchy for the ChunkLink build core.
The hierarchy is designed to:
- Separate fatal build errors from the one recoverable condition
  (an unsupported runtime, which falls back to the resolver cache)
- Carry structured context (chunk names, nicknames, paths) for reporting
"""

from .core import (
    CacheMissingError,
    ChunkLinkError,
    ConfigurationError,
    GraphInconsistencyError,
    ToolExecutionError,
    UnsupportedRuntimeError,
    ValidationError,
)

__all__ = [
    # Base exception
    "ChunkLinkError",

    # Domain-specific exceptions
    "ValidationError",
    "ConfigurationError",
    "GraphInconsistencyError",
    "UnsupportedRuntimeError",
    "CacheMissingError",
    "ToolExecutionError",
]
