"""Graph command module - resolves and prints the chunk graph."""

import argparse
from pathlib import Path

from registry import configure_registry, create_build_coordinator, create_graph_resolver
from ..utils.config_helpers import args_to_config
from ..utils.output import (
    OutputFormatter, format_graph_summary, graph_to_dict, print_graph_table, print_section
)


def graph_command(args: argparse.Namespace) -> None:
    """Execute the graph command.

    Args:
        args: Parsed command-line arguments
    """
    formatter = OutputFormatter(verbose=args.verbose)
    project_dir = Path(args.path).resolve()

    config = args_to_config(args, project_dir)
    registry = config.to_registry()
    configure_registry(config.model_dump(), project_dir)

    wrappers = {}
    if args.wrappers:
        plan = create_build_coordinator().plan(registry)
        graph, wrappers = plan.graph, plan.wrappers
    else:
        graph = create_graph_resolver().compute_graph(
            registry, config.resolver.deps_file, config.resolver.base_js_path
        )

    if args.json:
        data = graph_to_dict(graph)
        if wrappers:
            data['wrappers'] = wrappers
        formatter.json_output(data)
        return

    formatter.info(format_graph_summary(graph))
    print_graph_table(formatter, graph)
    for spec in graph.compiler_chunk_specs():
        formatter.verbose_info(f"--chunk {spec}")
    for name, wrapper in wrappers.items():
        print_section(f"Wrapper: {name}", wrapper)
