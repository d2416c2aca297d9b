"""Build command argument parser for ChunkLink CLI."""

import argparse

from .main_parser import add_common_arguments, add_path_argument, add_resolver_arguments


def add_build_subparser(subparsers) -> argparse.ArgumentParser:
    """Add build command subparser to the main parser.

    Args:
        subparsers: Subparsers object from the main argument parser

    Returns:
        The configured build subparser
    """
    build_parser = subparsers.add_parser(
        "build",
        help="Compile the declared chunks",
        description="Resolve the chunk graph, stage sources and compile every chunk",
    )

    add_path_argument(build_parser)
    add_common_arguments(build_parser)
    add_resolver_arguments(build_parser)

    build_parser.add_argument(
        "--build-dir",
        help="Directory receiving compiled chunks (default: build)",
    )

    build_parser.add_argument(
        "--debug",
        action="store_true",
        help="Treat compiler diagnostic groups as errors",
    )

    build_parser.add_argument(
        "--strict",
        action="store_true",
        help="Like --debug, and also fail on strict type checks",
    )

    build_parser.add_argument(
        "--version-string",
        dest="version_string",
        help="Version injected as a compile-time define",
    )

    return build_parser


__all__ = ["add_build_subparser"]
