"""Build command module - runs the chunked compilation pipeline."""

import argparse
from pathlib import Path

from loguru import logger

from chunklink import __version__
from registry import configure_registry, create_build_coordinator
from ..utils.config_helpers import args_to_config
from ..utils.output import OutputFormatter, format_graph_summary


def build_command(args: argparse.Namespace) -> None:
    """Execute the build command using the service layer.

    Args:
        args: Parsed command-line arguments
    """
    formatter = OutputFormatter(verbose=args.verbose)
    project_dir = Path(args.path).resolve()

    formatter.info(f"Starting ChunkLink v{__version__}")
    formatter.info(f"Project directory: {project_dir}")

    config = args_to_config(args, project_dir)
    registry = config.to_registry()
    formatter.verbose_info(f"Chunks: {', '.join(d.name for d in registry)}")

    configure_registry(config.model_dump(), project_dir)
    coordinator = create_build_coordinator()

    result = coordinator.build(registry)
    logger.debug(f"Compiler options: {result.plan.options}")

    formatter.success(f"Build complete: {format_graph_summary(result.graph)}")
    formatter.info(f"License blocks stripped: {result.licenses_stripped}")
    for output in result.outputs:
        formatter.verbose_info(f"Wrote {output}")
