"""Build coordinator service for ChunkLink - orchestrates a chunked compilation."""

import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from loguru import logger

from core.exceptions import ConfigurationError, ToolExecutionError, ValidationError
from core.models import ChunkGraph, ChunkRegistry
from core.types import WrapperText
from interfaces.compiler_provider import CompilerProvider
from providers.compiler.closure_compiler import CompilerOptions
from providers.transforms.license_normalizer import LicenseNormalizer
from providers.transforms.path_flatten import PathFlattenTransform
from providers.transforms.source_map import rewrite_source_map_file
from .base_service import BaseService
from .graph_resolver import ChunkGraphResolver
from .wrapper_generator import WrapperGenerator


@dataclass
class BuildPlan:
    """Everything decided before the compiler runs."""

    graph: ChunkGraph
    wrappers: Dict[str, WrapperText]
    options: Dict[str, Any]


@dataclass
class BuildResult:
    """Outcome of a successful build."""

    plan: BuildPlan
    outputs: List[Path] = field(default_factory=list)
    source_maps: List[Path] = field(default_factory=list)
    licenses_stripped: int = 0

    @property
    def graph(self) -> ChunkGraph:
        return self.plan.graph


class BuildCoordinator(BaseService):
    """Runs the build pipeline as a strict sequence.

    resolve graph -> generate wrappers -> stage sources (strip licenses,
    flatten paths) -> compile -> rename outputs -> restore true paths in
    source maps. Any error aborts the whole build.
    """

    def __init__(
        self,
        resolver: ChunkGraphResolver,
        wrapper_generator: WrapperGenerator,
        compiler: CompilerProvider,
        deps_file: Union[str, Path],
        base_js_path: Union[str, Path],
        build_dir: Union[str, Path],
        staging_dir: Union[str, Path],
        compiler_options: Optional[CompilerOptions] = None,
        license_normalizer: Optional[LicenseNormalizer] = None,
        path_transform: Optional[PathFlattenTransform] = None,
        source_root: str = './',
        project_dir: Optional[Union[str, Path]] = None,
    ):
        super().__init__(project_dir)
        self._resolver = resolver
        self._wrappers = wrapper_generator
        self._compiler = compiler
        self._deps_file = deps_file
        self._base_js_path = base_js_path
        self._build_dir = self.resolve_path(build_dir)
        self._staging_dir = self.resolve_path(staging_dir)
        self._compiler_options = compiler_options or CompilerOptions()
        self._normalizer = license_normalizer or LicenseNormalizer()
        self._paths = path_transform or PathFlattenTransform()
        self._source_root = source_root

    @property
    def build_dir(self) -> Path:
        return self._build_dir

    def plan(self, registry: ChunkRegistry) -> BuildPlan:
        """Resolve the graph and generate wrappers and compiler options."""
        graph = self._resolver.compute_graph(registry, self._deps_file, self._base_js_path)
        wrappers = self._wrappers.generate_all(graph)

        options = self._compiler_options.to_dict()
        options.update({
            'chunk': graph.compiler_chunk_specs(),
            'chunk_wrapper': [f"{name}:{wrapper}" for name, wrapper in wrappers.items()],
            'rename_prefix_namespace': self._wrappers.namespace,
        })
        return BuildPlan(graph=graph, wrappers=wrappers, options=options)

    def _check_staging_dir(self) -> None:
        """Refuse staging directories whose removal would delete the project."""
        staging = self._staging_dir.resolve()
        project = self.project_dir.resolve()
        if staging == project or staging in project.parents or staging == Path(staging.anchor):
            raise ConfigurationError(
                "build.staging_dir",
                str(self._staging_dir),
                "Staging directory must not be the project directory or one of its parents",
            )

    def stage_sources(self, graph: ChunkGraph) -> Tuple[List[str], int]:
        """Write license-stripped, path-flattened copies of every source file.

        Returns:
            Tuple of (staged paths relative to the staging directory,
            number of license blocks removed)
        """
        self._check_staging_dir()
        if self._staging_dir.exists():
            shutil.rmtree(self._staging_dir)
        self._staging_dir.mkdir(parents=True)

        staged: List[str] = []
        stripped = 0
        for js_file in graph.js_files:
            relative = os.path.normpath(js_file)
            if os.path.isabs(relative) or relative.split(os.sep)[0] == os.pardir:
                raise ValidationError("js", js_file, "Source lies outside the project directory")

            text, removed = self._normalizer.normalize_file(self.resolve_path(relative))
            stripped += removed

            flat = self._paths.flatten_path(relative)
            destination = self._staging_dir / flat
            destination.parent.mkdir(parents=True, exist_ok=True)
            with open(destination, 'w', encoding='utf-8', newline='') as f:
                f.write(text)
            staged.append(flat)

        logger.info(
            f"Staged {len(staged)} files ({stripped} license blocks stripped) in {self._staging_dir}"
        )
        return staged, stripped

    def finalize_outputs(self, plan: BuildPlan, emitted: List[Path]) -> BuildResult:
        """Rename compiler outputs and rewrite their source maps."""
        if len(emitted) != len(plan.graph):
            raise ToolExecutionError(
                self._compiler.name,
                reason=f"Compiler emitted {len(emitted)} outputs for {len(plan.graph)} chunks",
            )

        result = BuildResult(plan=plan)
        for node, emitted_path in zip(plan.graph, emitted):
            target = self._build_dir / self._wrappers.output_filename(node)
            emitted_path.replace(target)
            result.outputs.append(target)

            emitted_map = emitted_path.with_name(emitted_path.name + '.map')
            if not emitted_map.exists():
                logger.warning(f"No source map emitted for chunk {node.name}")
                continue
            target_map = target.with_name(target.name + '.map')
            emitted_map.replace(target_map)
            rewrite_source_map_file(
                target_map,
                self._paths.reverse,
                source_root=self._source_root,
                output_name=target.name,
            )
            result.source_maps.append(target_map)

        return result

    def build(self, registry: ChunkRegistry) -> BuildResult:
        """Run the complete pipeline for ``registry``."""
        plan = self.plan(registry)
        staged, stripped = self.stage_sources(plan.graph)

        emitted = self._compiler.compile(
            plan.options,
            staged,
            self._build_dir,
            cwd=self._staging_dir,
        )

        result = self.finalize_outputs(plan, emitted)
        result.licenses_stripped = stripped
        logger.info(
            f"Built {len(result.outputs)} chunks into {self._build_dir}"
        )
        return result
