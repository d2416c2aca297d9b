"""Modular CLI entry point for ChunkLink."""

import argparse
import sys

from loguru import logger

from core.exceptions import ChunkLinkError
from .utils.validation import exit_on_validation_error, validate_config_file_path, validate_path


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI.

    Args:
        verbose: Whether to enable verbose logging
    """
    logger.remove()

    if verbose:
        logger.add(
            sys.stderr,
            level="DEBUG",
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        )
    else:
        logger.add(
            sys.stderr,
            level="INFO",
            format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"
        )


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments to validate
    """
    path = getattr(args, "path", None)
    if path is not None and not validate_path(path, must_exist=True, must_be_dir=True):
        exit_on_validation_error(f"Invalid path: {path}")

    if not validate_config_file_path(getattr(args, "config", None)):
        exit_on_validation_error(f"Invalid config file: {args.config}")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the complete argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    from .parsers import create_main_parser, setup_subparsers
    from .parsers.build_parser import add_build_subparser
    from .parsers.graph_parser import add_graph_subparser
    from .parsers.config_parser import add_config_subparser

    parser = create_main_parser()
    subparsers = setup_subparsers(parser)

    add_build_subparser(subparsers)
    add_graph_subparser(subparsers)
    add_config_subparser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging(getattr(args, "verbose", False))
    validate_args(args)

    try:
        if args.command == "build":
            from .commands.build import build_command
            build_command(args)
        elif args.command == "graph":
            from .commands.graph import graph_command
            graph_command(args)
        elif args.command == "config":
            from .commands.config import config_command
            config_command(args)
        else:
            logger.error(f"Unknown command: {args.command}")
            sys.exit(1)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(0)
    except ChunkLinkError as e:
        logger.error(f"Build failed: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Command failed: {e}")
        logger.opt(exception=e).debug("Full error details")
        sys.exit(1)


if __name__ == "__main__":
    main()
