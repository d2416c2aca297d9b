"""ChunkLink test package."""

__version__ = "0.3.0"

# Test utilities
from pathlib import Path
from typing import List, Optional

from core.exceptions import UnsupportedRuntimeError
from core.models import ChunkDefinition, ChunkRegistry, RawResolverOutput


class FakeGraphCalculator:
    """In-memory stand-in for the graph calculation tool."""

    name = "fake-calculate-chunks"

    def __init__(self, output: RawResolverOutput, supported: bool = True):
        self.output = output
        self.supported = supported
        self.calls: List[tuple] = []

    def is_supported(self) -> bool:
        return self.supported

    def ensure_supported(self) -> None:
        if not self.supported:
            raise UnsupportedRuntimeError(self.name, "requires Node.js v14 or later, found v12")

    def calculate(self, entry_points, deps_file, base_js_path) -> RawResolverOutput:
        self.calls.append((tuple(entry_points), deps_file, base_js_path))
        return self.output


def registry_of(*names: str, exports: Optional[List[str]] = None) -> ChunkRegistry:
    """Build a registry with one chunk per name and generated entry points."""
    exports = exports or [f"Lib{name}" for name in names]
    return ChunkRegistry(
        ChunkDefinition(
            name=name,
            entry_point=f"./src/{name}.js",
            exports_path=export,
            import_alias=export.replace(".", ""),
        )
        for name, export in zip(names, exports)
    )


def create_test_file(directory: Path, filename: str, content: str) -> Path:
    """Create a test file with given content, creating parent directories."""
    file_path = directory / filename
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content)
    return file_path
