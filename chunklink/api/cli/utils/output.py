"""Output formatting utilities for ChunkLink CLI commands."""

import json
import sys
from typing import Any, Dict, List, Optional

from core.models import ChunkGraph


class OutputFormatter:
    """Handles consistent output formatting across CLI commands."""

    def __init__(self, verbose: bool = False):
        """Initialize output formatter.

        Args:
            verbose: Whether to enable verbose output
        """
        self.verbose = verbose

    def info(self, message: str) -> None:
        print(f"ℹ️  {message}")

    def success(self, message: str) -> None:
        print(f"✅ {message}")

    def warning(self, message: str) -> None:
        print(f"⚠️  {message}")

    def error(self, message: str) -> None:
        print(f"❌ {message}", file=sys.stderr)

    def verbose_info(self, message: str) -> None:
        """Print a verbose info message if verbose mode is enabled."""
        if self.verbose:
            print(f"🔍 {message}")

    def json_output(self, data: Dict[str, Any]) -> None:
        """Print data as formatted JSON.

        Args:
            data: Data to output as JSON
        """
        print(json.dumps(data, indent=2, default=str))

    def table_header(self, headers: List[str], widths: Optional[List[int]] = None) -> None:
        """Print a table header.

        Args:
            headers: Column headers
            widths: Optional column widths
        """
        if widths:
            row = " | ".join(header.ljust(width) for header, width in zip(headers, widths))
        else:
            row = " | ".join(headers)

        print(row)
        print("-" * len(row))

    def table_row(self, values: List[str], widths: Optional[List[int]] = None) -> None:
        """Print a table row.

        Args:
            values: Column values
            widths: Optional column widths
        """
        if widths:
            row = " | ".join(str(value).ljust(width) for value, width in zip(values, widths))
        else:
            row = " | ".join(str(value) for value in values)

        print(row)


def format_graph_summary(graph: ChunkGraph) -> str:
    """Format a resolved graph for a one-line summary.

    Args:
        graph: Resolved chunk graph

    Returns:
        Summary string
    """
    return f"{len(graph)} chunks, {graph.total_files} files (root: {graph.root.name})"


def graph_to_dict(graph: ChunkGraph) -> Dict[str, Any]:
    """Convert a resolved graph to JSON-serializable data."""
    return {
        'chunk': graph.compiler_chunk_specs(),
        'js': list(graph.js_files),
        'chunks': [
            {
                'name': node.name,
                'files': node.file_count,
                'dependencies': list(node.dependency_names),
                'exports': node.definition.exports_path,
                'import_as': node.definition.import_alias,
            }
            for node in graph
        ],
    }


def print_graph_table(formatter: OutputFormatter, graph: ChunkGraph) -> None:
    """Print one table row per chunk in declared order."""
    rows = [
        [node.name, str(node.file_count), ", ".join(node.dependency_names) or "-"]
        for node in graph
    ]
    headers = ["Chunk", "Files", "Depends on"]
    widths = [
        max([len(headers[column])] + [len(row[column]) for row in rows])
        for column in range(len(headers))
    ]

    formatter.table_header(headers, widths)
    for row in rows:
        formatter.table_row(row, widths)


def print_section(title: str, content: str) -> None:
    """Print a titled section of text."""
    print(f"\n{title}")
    print("=" * len(title))
    print(content)


__all__ = [
    "OutputFormatter",
    "format_graph_summary",
    "graph_to_dict",
    "print_graph_table",
    "print_section",
]
