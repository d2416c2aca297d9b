"""Main argument parser for ChunkLink CLI."""

import argparse
from pathlib import Path

# Version imported dynamically to avoid early chunklink module loading


def create_main_parser() -> argparse.ArgumentParser:
    """Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    from chunklink import __version__

    parser = argparse.ArgumentParser(
        prog="chunklink",
        description="Chunked Closure Compiler builds with cross-chunk namespace linking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  chunklink build
  chunklink build /path/to/project --strict --version-string 10.1.0
  chunklink graph . --json
  chunklink graph . --wrappers
  chunklink config show --config ./chunklink.yaml
  chunklink config validate
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"chunklink {__version__}",
    )

    return parser


def setup_subparsers(parser: argparse.ArgumentParser) -> argparse._SubParsersAction:
    """Set up subparsers for the main parser.

    Args:
        parser: Main argument parser

    Returns:
        Subparsers action for adding command parsers
    """
    return parser.add_subparsers(dest="command", help="Available commands")


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add common arguments used across multiple commands.

    Args:
        parser: Parser to add arguments to
    """
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Configuration file path (JSON or YAML)",
    )


def add_path_argument(parser: argparse.ArgumentParser) -> None:
    """Add the positional project directory argument to a parser.

    Args:
        parser: Parser to add argument to
    """
    parser.add_argument(
        "path",
        type=Path,
        nargs="?",
        default=Path("."),
        help="Project directory (default: current directory)",
    )


def add_resolver_arguments(parser: argparse.ArgumentParser) -> None:
    """Add graph resolution arguments to a parser.

    Args:
        parser: Parser to add arguments to
    """
    parser.add_argument(
        "--deps-file",
        help="Dependency manifest read by closure-calculate-chunks",
    )

    parser.add_argument(
        "--base-js-path",
        help="Closure library base file",
    )

    parser.add_argument(
        "--cache-file",
        help="Resolver cache file (default: chunks.json)",
    )


__all__ = [
    "create_main_parser",
    "setup_subparsers",
    "add_common_arguments",
    "add_path_argument",
    "add_resolver_arguments",
]
