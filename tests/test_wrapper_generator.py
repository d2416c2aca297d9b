"""Tests for UMD chunk wrapper generation."""

import shutil
import subprocess

import pytest

from core.models import ChunkDefinition, ChunkRegistry, RawResolverOutput
from services.graph_resolver import ChunkGraphResolver
from services.wrapper_generator import OUTPUT_PLACEHOLDER, WrapperGenerator


@pytest.fixture
def graph(sample_registry, sample_raw_output):
    return ChunkGraphResolver.parse_raw_output(sample_registry, sample_raw_output)


@pytest.fixture
def generator():
    return WrapperGenerator()


class TestWrapperGenerator:
    """Test WrapperGenerator."""

    def test_root_creates_namespace(self, generator, graph):
        wrapper = generator.generate(graph.root)

        assert "const $={};" in wrapper
        assert "$.Lib.internal_=$;" in wrapper
        assert "return $.Lib;" in wrapper
        assert "define([], factory);" in wrapper
        assert "module.exports = factory();" in wrapper
        assert "root.Lib = factory();" in wrapper
        assert "}(this, function() {" in wrapper

    def test_dependent_reuses_namespace(self, generator, graph):
        wrapper = generator.generate(graph.node("B"))

        assert "const $={};" not in wrapper
        assert "const $=Lib.internal_;" in wrapper
        assert "function(Lib)" in wrapper
        assert "return $.Lib.Blocks;" in wrapper

    def test_dependency_paths(self, generator, graph):
        wrapper = generator.generate(graph.node("B"))

        assert 'define(["./A_compressed.js"], factory);' in wrapper
        assert 'module.exports = factory(require("./A_compressed.js"));' in wrapper
        assert "root.Lib.Blocks = factory(root.Lib);" in wrapper

    def test_placeholder_present_once(self, generator, graph):
        for node in graph:
            assert generator.generate(node).count(OUTPUT_PLACEHOLDER) == 1

    def test_overrides_used_verbatim(self, sample_raw_output):
        registry = ChunkRegistry([
            ChunkDefinition(name="A", entry_point="./core/e1.js", exports_path="Lib", import_alias="Lib"),
            ChunkDefinition(
                name="B", entry_point="./blocks/e2.js", exports_path="Lib.Blocks",
                import_alias="LibBlocks", factory_preamble="/* pre */", factory_postamble="",
            ),
        ])
        graph = ChunkGraphResolver.parse_raw_output(registry, sample_raw_output)
        wrapper = WrapperGenerator().generate(graph.node("B"))

        assert "/* pre */" in wrapper
        assert "Lib.internal_" not in wrapper

    def test_deep_chunk_references_root_alias(self):
        registry = ChunkRegistry.from_records([
            {"name": "core", "entry": "./core/main.js", "exports": "Blockly"},
            {"name": "blocks", "entry": "./blocks/all.js", "exports": "Blockly.Blocks"},
            {"name": "python", "entry": "./generators/python.js", "exports": "Blockly.Python"},
        ])
        raw = RawResolverOutput(chunk=("main:3", "all:2:main", "python:1:all"))
        graph = ChunkGraphResolver.parse_raw_output(registry, raw)

        wrapper = WrapperGenerator().generate(graph.node("python"))
        assert "const $=Blockly.internal_;" in wrapper
        assert "function(BlocklyBlocks, Blockly)" in wrapper
        assert 'define(["./blocks_compressed.js", "./core_compressed.js"], factory);' in wrapper
        assert "root.Blockly.Python = factory(root.Blockly.Blocks, root.Blockly);" in wrapper

    def test_direct_root_dependency_not_repeated(self, generator, graph):
        wrapper = generator.generate(graph.node("B"))
        assert "function(Lib)" in wrapper
        assert wrapper.count("A_compressed.js") == 2

    def test_custom_namespace_and_suffix(self, graph):
        generator = WrapperGenerator(namespace="ns", compiled_suffix=".min")
        wrapper = generator.generate(graph.node("B"))

        assert "const ns=Lib.internal_;" in wrapper
        assert "./A.min.js" in wrapper
        assert generator.output_filename(graph.root) == "A.min.js"

    def test_generate_all_and_specs(self, generator, graph):
        wrappers = generator.generate_all(graph)
        assert list(wrappers) == ["A", "B"]

        specs = generator.compiler_wrapper_specs(graph)
        assert specs[0].startswith("A:// Do not edit this file")
        assert len(specs) == 2


@pytest.mark.skipif(shutil.which("node") is None, reason="Node.js not available")
class TestWrapperLoading:
    """Load generated wrappers under Node.js with a stand-in compiled body."""

    def write_chunks(self, graph, directory):
        generator = WrapperGenerator()
        for node in graph:
            exports = node.definition.exports_path
            body = f'$.{exports}={{name: "{node.name}"}};'
            wrapper = generator.generate(node).replace(OUTPUT_PLACEHOLDER, body)
            (directory / generator.output_filename(node)).write_text(wrapper)

    def test_chunks_share_namespace(self, temp_dir):
        registry = ChunkRegistry.from_records([
            {"name": "core", "entry": "./core/main.js", "exports": "Blockly"},
            {"name": "blocks", "entry": "./blocks/all.js", "exports": "Blockly.Blocks"},
            {"name": "python", "entry": "./generators/python.js", "exports": "Blockly.Python"},
        ])
        raw = RawResolverOutput(chunk=("main:3", "all:2:main", "python:1:all"))
        self.write_chunks(ChunkGraphResolver.parse_raw_output(registry, raw), temp_dir)

        script = (
            "const python = require('./python_compressed.js');"
            "const blocks = require('./blocks_compressed.js');"
            "const core = require('./core_compressed.js');"
            "if (python.name !== 'python' || core.Python !== python || core.Blocks !== blocks)"
            " { process.exit(1); }"
        )
        result = subprocess.run(
            ["node", "-e", script], cwd=temp_dir, capture_output=True, text=True
        )
        assert result.returncode == 0, result.stderr
