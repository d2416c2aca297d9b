"""Graph command argument parser for ChunkLink CLI."""

import argparse

from .main_parser import add_common_arguments, add_path_argument, add_resolver_arguments


def add_graph_subparser(subparsers) -> argparse.ArgumentParser:
    """Add graph command subparser to the main parser."""
    graph_parser = subparsers.add_parser(
        "graph",
        help="Show the resolved chunk graph",
        description="Resolve the chunk graph and print chunk specs and dependencies",
    )

    add_path_argument(graph_parser)
    add_common_arguments(graph_parser)
    add_resolver_arguments(graph_parser)

    graph_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the graph as JSON",
    )

    graph_parser.add_argument(
        "--wrappers",
        action="store_true",
        help="Also print the generated chunk wrappers",
    )

    return graph_parser


__all__ = ["add_graph_subparser"]
