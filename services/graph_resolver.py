"""Chunk graph resolver service for ChunkLink - builds the validated chunk DAG."""

from pathlib import Path
from typing import Dict, List, Optional, Union

from loguru import logger

from core.exceptions import GraphInconsistencyError, UnsupportedRuntimeError
from core.models import ChunkGraph, ChunkGraphNode, ChunkRegistry, RawResolverOutput
from core.types import Nickname
from interfaces.graph_calculator import GraphCalculator
from providers.graph.chunk_cache import ResolverCache
from .base_service import BaseService


class ChunkGraphResolver(BaseService):
    """Turns the declared chunk list into a dependency graph.

    The external tool names chunks after their entry point files
    ("nicknames"). Its descriptors come back in the order the entry points
    were supplied, so descriptor *i* belongs to the *i*-th declared chunk.
    """

    def __init__(
        self,
        graph_calculator: GraphCalculator,
        cache: ResolverCache,
        project_dir: Optional[Union[str, Path]] = None,
    ):
        """Initialize resolver.

        Args:
            graph_calculator: Adapter for the graph calculation tool
            cache: Resolver cache used as fallback and refreshed on live runs
            project_dir: Directory the tool runs in; absolute paths under it
                are made relative before caching
        """
        super().__init__(project_dir)
        self._calculator = graph_calculator
        self._cache = cache

    def compute_graph(
        self,
        registry: ChunkRegistry,
        deps_file: Union[str, Path],
        base_js_path: Union[str, Path],
    ) -> ChunkGraph:
        """Resolve the dependency graph for ``registry``.

        Args:
            registry: Declared chunks in order
            deps_file: Dependency manifest (must be up to date)
            base_js_path: Library base file handed to the tool

        Returns:
            Resolved graph with one node per declared chunk

        Raises:
            GraphInconsistencyError: If the output cannot be mapped onto the registry
            CacheMissingError: If the fallback cache is absent or unparsable
            ToolExecutionError: If the live tool fails
        """
        raw = self.load_raw_output(registry, deps_file, base_js_path)
        graph = self.parse_raw_output(registry, raw)
        logger.info(
            f"Resolved {len(graph)} chunks over {len(graph.js_files)} files"
        )
        return graph

    def load_raw_output(
        self,
        registry: ChunkRegistry,
        deps_file: Union[str, Path],
        base_js_path: Union[str, Path],
    ) -> RawResolverOutput:
        """Run the tool, or read the cache when the tool cannot run here."""
        try:
            self._calculator.ensure_supported()
        except UnsupportedRuntimeError as e:
            logger.warning(f"{e}; using pre-computed chunks from {self._cache.cache_file}")
            return self._cache.load()

        raw = self._calculator.calculate(registry.entry_points, deps_file, base_js_path)
        # Relative paths keep the cache valid on other machines.
        raw = raw.relativized(self.project_dir)
        self._cache.save(raw)
        return raw

    @staticmethod
    def parse_raw_output(registry: ChunkRegistry, raw: RawResolverOutput) -> ChunkGraph:
        """Bind resolver descriptors to declared chunks by position.

        Nicknames are bound as each descriptor is processed, so a
        dependency can only name a chunk declared earlier.

        Raises:
            GraphInconsistencyError: On count mismatch, unknown or duplicate
                nicknames, malformed descriptors or ordering violations
        """
        descriptors = raw.parse_descriptors()
        if len(descriptors) != len(registry):
            raise GraphInconsistencyError(
                f"Resolver returned {len(descriptors)} chunk descriptors "
                f"for {len(registry)} declared chunks",
            )

        nodes_by_nickname: Dict[Nickname, ChunkGraphNode] = {}
        nodes: List[ChunkGraphNode] = []
        for index, (descriptor, definition) in enumerate(zip(descriptors, registry)):
            dependencies = []
            for nick in descriptor.dependency_nicknames:
                dependency = nodes_by_nickname.get(nick)
                if dependency is None:
                    raise GraphInconsistencyError(
                        "Dependency nickname is not bound to an earlier chunk",
                        chunk=definition.name,
                        nickname=nick,
                    )
                dependencies.append(dependency)

            if index == 0 and dependencies:
                raise GraphInconsistencyError(
                    "The first declared chunk cannot have dependencies",
                    chunk=definition.name,
                )
            if index > 0 and not dependencies:
                raise GraphInconsistencyError(
                    "Every chunk after the first must depend on an earlier chunk",
                    chunk=definition.name,
                )

            if descriptor.nickname in nodes_by_nickname:
                raise GraphInconsistencyError(
                    "Nickname is already bound to another chunk",
                    chunk=definition.name,
                    nickname=descriptor.nickname,
                )

            node = ChunkGraphNode(
                definition=definition,
                index=index,
                file_count=descriptor.file_count,
                dependencies=tuple(dependencies),
            )
            nodes_by_nickname[descriptor.nickname] = node
            nodes.append(node)
            logger.debug(f"{descriptor.nickname} -> {node!r}")

        return ChunkGraph(nodes=tuple(nodes), js_files=raw.js)
