"""
Configuration management package for ChunkLink.

This package provides a unified configuration system that supports:
- Multiple configuration sources (environment variables, config files, CLI args)
- Type-safe configuration validation using Pydantic
- JSON and YAML project config files
"""

from .unified_config import (
    BuildConfig,
    ChunkConfig,
    ChunkLinkConfig,
    CompilerConfig,
    ResolverConfig,
    TransformConfig,
    find_project_config,
    load_config_file,
)

__all__ = [
    "ChunkLinkConfig",
    "ChunkConfig",
    "ResolverConfig",
    "CompilerConfig",
    "TransformConfig",
    "BuildConfig",
    "find_project_config",
    "load_config_file",
]
