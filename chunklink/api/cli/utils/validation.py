"""Validation utilities for ChunkLink CLI arguments."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def validate_path(path: Path, must_exist: bool = True, must_be_dir: bool = True) -> bool:
    """Validate a file system path.

    Args:
        path: Path to validate
        must_exist: Whether the path must exist
        must_be_dir: Whether the path must be a directory

    Returns:
        True if valid, False otherwise
    """
    if must_exist and not path.exists():
        logger.error(f"Path does not exist: {path}")
        return False

    if must_exist and must_be_dir and not path.is_dir():
        logger.error(f"Path is not a directory: {path}")
        return False

    return True


def validate_config_file_path(config_path: Optional[Path]) -> bool:
    """Validate an explicit configuration file path.

    Args:
        config_path: Optional config file path

    Returns:
        True if valid, False otherwise
    """
    if config_path is None:
        return True

    if not config_path.is_file():
        logger.error(f"Config file does not exist: {config_path}")
        return False

    if config_path.suffix not in ('.json', '.yaml', '.yml'):
        logger.error(f"Config file must be JSON or YAML: {config_path}")
        return False

    return True


def exit_on_validation_error(message: str) -> None:
    """Print error message and exit with error code.

    Args:
        message: Error message to display
    """
    logger.error(message)
    sys.exit(1)


__all__ = [
    "validate_path",
    "validate_config_file_path",
    "exit_on_validation_error",
]
