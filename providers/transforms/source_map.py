"""Rewriting of emitted source maps so tooling shows true source locations."""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from loguru import logger

from core.exceptions import ToolExecutionError


def rewrite_sources(map_data: Dict[str, Any], transform: Callable[[str], str]) -> Dict[str, Any]:
    """Return a copy of ``map_data`` with ``transform`` applied to each source.

    Maps without a ``sources`` list are returned unchanged.
    """
    sources = map_data.get("sources")
    if not isinstance(sources, list):
        return dict(map_data)

    rewritten = dict(map_data)
    rewritten["sources"] = [
        transform(source) if isinstance(source, str) else source
        for source in sources
    ]
    return rewritten


def rewrite_source_map_file(
    map_path: Union[str, Path],
    transform: Callable[[str], str],
    source_root: Optional[str] = None,
    output_name: Optional[str] = None,
) -> Dict[str, Any]:
    """Rewrite a source map file in place.

    Args:
        map_path: Path of the .map file
        transform: Applied to every entry of ``sources``
        source_root: If given, stored as ``sourceRoot``
        output_name: If given, stored as ``file`` (after an output rename)

    Returns:
        The rewritten map data

    Raises:
        ToolExecutionError: If the compiler emitted an unreadable map
    """
    map_path = Path(map_path)
    try:
        with open(map_path, encoding="utf-8") as f:
            map_data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ToolExecutionError(
            "source-map", reason=f"cannot read {map_path}: {e}", cause=e
        )

    map_data = rewrite_sources(map_data, transform)
    if source_root is not None:
        map_data["sourceRoot"] = source_root
    if output_name is not None:
        map_data["file"] = output_name

    with open(map_path, "w", encoding="utf-8") as f:
        json.dump(map_data, f)

    logger.debug(f"Rewrote {len(map_data.get('sources', []))} sources in {map_path}")
    return map_data
