"""Shared utilities for ChunkLink CLI commands."""

from .config_helpers import args_to_config
from .output import OutputFormatter, format_graph_summary, graph_to_dict, print_graph_table, print_section
from .validation import exit_on_validation_error, validate_config_file_path, validate_path

__all__ = [
    "args_to_config",
    "OutputFormatter",
    "format_graph_summary",
    "graph_to_dict",
    "print_graph_table",
    "print_section",
    "exit_on_validation_error",
    "validate_config_file_path",
    "validate_path",
]
