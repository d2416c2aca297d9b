"""Config command module - shows and validates the merged configuration."""

import argparse
import sys
from pathlib import Path

from loguru import logger

from core.exceptions import ConfigurationError
from ..utils.config_helpers import args_to_config
from ..utils.output import OutputFormatter


def config_command(args: argparse.Namespace) -> None:
    """Execute the config command with appropriate subcommand.

    Args:
        args: Parsed command-line arguments
    """
    subcommand_handlers = {
        "show": config_show_command,
        "validate": config_validate_command,
    }

    handler = subcommand_handlers.get(args.config_command)
    if handler:
        handler(args)
    else:
        logger.error(f"Unknown config command: {args.config_command}")
        sys.exit(1)


def config_show_command(args: argparse.Namespace) -> None:
    """Handle config show command."""
    formatter = OutputFormatter(verbose=getattr(args, 'verbose', False))
    config = args_to_config(args, Path(args.path).resolve())
    formatter.json_output(config.model_dump(mode='json'))


def config_validate_command(args: argparse.Namespace) -> None:
    """Handle config validate command."""
    formatter = OutputFormatter(verbose=getattr(args, 'verbose', False))
    config = args_to_config(args, Path(args.path).resolve())

    missing = config.get_missing_config()
    if missing:
        formatter.error(f"Missing configuration: {', '.join(missing)}")
        sys.exit(1)

    try:
        registry = config.to_registry()
    except ConfigurationError as e:
        formatter.error(str(e))
        sys.exit(1)

    formatter.success(
        f"Configuration valid: {len(registry)} chunks, root chunk {registry.root.name}"
    )
    for definition in registry:
        formatter.verbose_info(
            f"{definition.name}: {definition.entry_point} -> "
            f"{definition.exports_path} as {definition.import_alias}"
        )
