"""ChunkLink CLI API package - modular command-line interface."""

# Commands are imported lazily in main.py when needed

__all__ = [
    "build_command",
    "graph_command",
    "config_command",
]
