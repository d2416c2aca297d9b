"""Argument parser utilities for ChunkLink CLI commands."""

from .main_parser import create_main_parser, setup_subparsers
from .build_parser import add_build_subparser
from .graph_parser import add_graph_subparser
from .config_parser import add_config_subparser

__all__ = [
    "create_main_parser",
    "setup_subparsers",
    "add_build_subparser",
    "add_graph_subparser",
    "add_config_subparser",
]
