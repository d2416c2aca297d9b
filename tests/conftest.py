"""Shared fixtures for ChunkLink tests."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from core.models import ChunkDefinition, ChunkRegistry, RawResolverOutput
from tests import FakeGraphCalculator


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_registry() -> ChunkRegistry:
    """Two chunks: the root A and B depending on it."""
    return ChunkRegistry([
        ChunkDefinition(
            name="A", entry_point="./core/e1.js", exports_path="Lib", import_alias="Lib"
        ),
        ChunkDefinition(
            name="B", entry_point="./blocks/e2.js", exports_path="Lib.Blocks",
            import_alias="LibBlocks"
        ),
    ])


@pytest.fixture
def sample_raw_output() -> RawResolverOutput:
    """Resolver output matching sample_registry."""
    return RawResolverOutput(
        chunk=("a:5", "b:3:a"),
        js=(
            "./closure/goog/base_minimal.js",
            "./core/e1.js",
            "./core/utils/dom.js",
            "./core/renderers/common/block.js",
            "./core/licensed.js",
            "./blocks/e2.js",
            "./blocks/logic.js",
            "./blocks/math.js",
        ),
    )


@pytest.fixture
def fake_calculator(sample_raw_output: RawResolverOutput) -> FakeGraphCalculator:
    return FakeGraphCalculator(sample_raw_output)
