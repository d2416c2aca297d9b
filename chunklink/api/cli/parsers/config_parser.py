"""Config command argument parser for ChunkLink CLI."""

import argparse

from .main_parser import add_common_arguments, add_path_argument


def add_config_subparser(subparsers) -> argparse.ArgumentParser:
    """Add config command subparser to the main parser.

    Args:
        subparsers: Subparsers object from the main argument parser

    Returns:
        The configured config subparser
    """
    config_parser = subparsers.add_parser(
        "config",
        help="Inspect the build configuration",
        description="Show or validate the merged ChunkLink configuration"
    )

    config_subparsers = config_parser.add_subparsers(
        dest="config_command",
        help="Configuration commands",
        required=True
    )

    show_parser = config_subparsers.add_parser(
        "show",
        help="Print the merged configuration"
    )
    add_path_argument(show_parser)
    add_common_arguments(show_parser)

    validate_parser = config_subparsers.add_parser(
        "validate",
        help="Check that the configuration declares a usable chunk registry"
    )
    add_path_argument(validate_parser)
    add_common_arguments(validate_parser)

    return config_parser


__all__ = ["add_config_subparser"]
