"""Tests for the build pipeline coordinator."""

import json
from pathlib import Path

import pytest

from core.exceptions import ConfigurationError, ToolExecutionError, ValidationError
from core.models import RawResolverOutput
from providers.graph.chunk_cache import ResolverCache
from providers.transforms.license_normalizer import line_count
from services.build_coordinator import BuildCoordinator
from services.graph_resolver import ChunkGraphResolver
from services.wrapper_generator import WrapperGenerator
from tests import FakeGraphCalculator, create_test_file

LICENSED_SOURCE = (
    "/**\n"
    " * @license\n"
    " * Copyright 2021 Google LLC\n"
    " * SPDX-License-Identifier: Apache-2.0\n"
    " */\n"
    "\n"
    "goog.module('Lib.licensed');\n"
)


class FakeCompiler:
    """Writes one output file and source map per chunk like the real compiler."""

    name = "fake-compiler"

    def __init__(self):
        self.calls = []

    def build_command(self, options, sources, output_dir):
        return ["fake-compiler"]

    def compile(self, options, sources, output_dir, cwd=None):
        self.calls.append((options, list(sources), Path(output_dir), cwd))
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        emitted = []
        for spec in options["chunk"]:
            name = spec.split(":", 1)[0]
            output = output_dir / f"{name}.js"
            output.write_text(f"// {name}\n")
            (output_dir / f"{name}.js.map").write_text(json.dumps({
                "version": 3,
                "file": f"{name}.js",
                "sources": list(sources),
                "mappings": "",
            }))
            emitted.append(output)
        return emitted


@pytest.fixture
def project(temp_dir, sample_raw_output):
    """Project tree containing every file in the resolver output."""
    for js_file in sample_raw_output.js:
        content = LICENSED_SOURCE if js_file.endswith("licensed.js") else f"// {js_file}\n"
        create_test_file(temp_dir, js_file, content)
    return temp_dir


@pytest.fixture
def compiler():
    return FakeCompiler()


def make_coordinator(project_dir, raw, compiler, staging_dir="build/.staging"):
    resolver = ChunkGraphResolver(
        FakeGraphCalculator(raw),
        ResolverCache(project_dir / "chunks.json"),
        project_dir=project_dir,
    )
    return BuildCoordinator(
        resolver=resolver,
        wrapper_generator=WrapperGenerator(),
        compiler=compiler,
        deps_file="./tests/deps.js",
        base_js_path="./closure/goog/base_minimal.js",
        build_dir="build",
        staging_dir=staging_dir,
        project_dir=project_dir,
    )


class TestBuildCoordinator:
    """Test BuildCoordinator."""

    def test_plan(self, project, sample_registry, sample_raw_output, compiler):
        plan = make_coordinator(project, sample_raw_output, compiler).plan(sample_registry)

        assert plan.options["chunk"] == ["A:5", "B:3:A"]
        assert plan.options["rename_prefix_namespace"] == "$"
        assert plan.options["chunk_wrapper"][1].startswith("B:")
        assert "const $=Lib.internal_;" in plan.options["chunk_wrapper"][1]
        assert list(plan.wrappers) == ["A", "B"]

    def test_stage_sources(self, project, sample_registry, sample_raw_output, compiler):
        coordinator = make_coordinator(project, sample_raw_output, compiler)
        graph = coordinator.plan(sample_registry).graph

        staged, stripped = coordinator.stage_sources(graph)

        assert stripped == 1
        assert staged[0] == "closure/goog/base_minimal.js"
        assert "core/renderers-slash-common-slash-block.js" in staged
        assert "blocks/logic.js" in staged

        staging = project / "build" / ".staging"
        licensed = (staging / "core" / "licensed.js").read_text()
        assert "@license" not in licensed
        assert line_count(licensed) == line_count(LICENSED_SOURCE)

    def test_source_outside_project_rejected(self, project, sample_registry, compiler):
        raw = RawResolverOutput(chunk=("a:1", "b:1:a"), js=("../outside.js", "./blocks/e2.js"))
        coordinator = make_coordinator(project, raw, compiler)
        graph = coordinator.plan(sample_registry).graph

        with pytest.raises(ValidationError):
            coordinator.stage_sources(graph)

    def test_build(self, project, sample_registry, sample_raw_output, compiler):
        coordinator = make_coordinator(project, sample_raw_output, compiler)

        result = coordinator.build(sample_registry)

        build_dir = project / "build"
        assert result.outputs == [build_dir / "A_compressed.js", build_dir / "B_compressed.js"]
        assert all(output.exists() for output in result.outputs)
        assert not (build_dir / "A.js").exists()
        assert result.licenses_stripped == 1
        assert result.graph.root.name == "A"

        options, sources, output_dir, cwd = compiler.calls[0]
        assert cwd == project / "build" / ".staging"
        assert output_dir == build_dir

        source_map = json.loads((build_dir / "A_compressed.js.map").read_text())
        assert source_map["file"] == "A_compressed.js"
        assert source_map["sourceRoot"] == "./"
        assert "core/renderers/common/block.js" in source_map["sources"]
        assert not any("-slash-" in source for source in source_map["sources"])

    def test_missing_source_map_tolerated(self, project, sample_registry, sample_raw_output):
        class NoMapCompiler(FakeCompiler):
            def compile(self, options, sources, output_dir, cwd=None):
                emitted = super().compile(options, sources, output_dir, cwd)
                for output in emitted:
                    output.with_name(output.name + ".map").unlink()
                return emitted

        result = make_coordinator(project, sample_raw_output, NoMapCompiler()).build(sample_registry)

        assert len(result.outputs) == 2
        assert result.source_maps == []

    @pytest.mark.parametrize("staging_dir", ["", ".", "..", "/"])
    def test_staging_dir_enclosing_project_rejected(
        self, project, sample_registry, sample_raw_output, compiler, staging_dir
    ):
        coordinator = make_coordinator(project, sample_raw_output, compiler, staging_dir)
        graph = coordinator.plan(sample_registry).graph

        with pytest.raises(ConfigurationError):
            coordinator.stage_sources(graph)

        assert (project / "blocks" / "logic.js").exists()
        assert (project / "core" / "renderers" / "common" / "block.js").exists()

    def test_missing_compiler_output_rejected(self, project, sample_registry, sample_raw_output):
        class ShortCompiler(FakeCompiler):
            def compile(self, options, sources, output_dir, cwd=None):
                return super().compile(options, sources, output_dir, cwd)[:-1]

        coordinator = make_coordinator(project, sample_raw_output, ShortCompiler())

        with pytest.raises(ToolExecutionError):
            coordinator.build(sample_registry)

        assert not (project / "build" / "A_compressed.js").exists()
