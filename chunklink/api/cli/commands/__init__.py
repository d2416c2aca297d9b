"""ChunkLink CLI commands package - modular command implementations."""

from .build import build_command
from .graph import graph_command
from .config import config_command

__all__ = [
    "build_command",
    "graph_command",
    "config_command",
]
