"""
Configuration helper utilities for CLI commands.

This module bridges CLI arguments with the unified configuration system.
"""

import argparse
from pathlib import Path
from typing import Any

from chunklink.core.config.unified_config import ChunkLinkConfig


def args_to_config(args: argparse.Namespace, project_dir: Path | None = None) -> ChunkLinkConfig:
    """
    Convert CLI arguments to unified configuration.

    Args:
        args: Parsed CLI arguments
        project_dir: Project directory for config file loading

    Returns:
        ChunkLinkConfig instance
    """
    config_overrides: dict[str, Any] = {}

    # Resolver configuration
    resolver_config = {}
    if getattr(args, 'deps_file', None):
        resolver_config['deps_file'] = args.deps_file
    if getattr(args, 'base_js_path', None):
        resolver_config['base_js_path'] = args.base_js_path
    if getattr(args, 'cache_file', None):
        resolver_config['cache_file'] = args.cache_file

    if resolver_config:
        config_overrides['resolver'] = resolver_config

    # Compiler configuration
    compiler_config: dict[str, Any] = {}
    if getattr(args, 'debug', False):
        compiler_config['debug'] = True
    if getattr(args, 'strict', False):
        compiler_config['strict'] = True
    if getattr(args, 'verbose', False):
        compiler_config['verbose'] = True
    if getattr(args, 'version_string', None):
        compiler_config['version'] = args.version_string

    if compiler_config:
        config_overrides['compiler'] = compiler_config

    # Build configuration
    if getattr(args, 'build_dir', None):
        config_overrides['build'] = {'build_dir': args.build_dir}

    return ChunkLinkConfig.load_hierarchical(
        project_dir=project_dir,
        config_file=getattr(args, 'config', None),
        **config_overrides,
    )
