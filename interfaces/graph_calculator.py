"""GraphCalculator protocol for ChunkLink - interface to the chunk graph calculation tool."""

from pathlib import Path
from typing import Protocol, Sequence, Union

from core.models import RawResolverOutput


class GraphCalculator(Protocol):
    """Abstract protocol for the external chunk graph calculation tool.

    Implementations run a tool that, given entry points in declared order
    and a dependency manifest, returns the chunk descriptors and the global
    ordered file list.
    """

    @property
    def name(self) -> str:
        """Tool name used in log messages and errors."""
        ...

    def is_supported(self) -> bool:
        """Return True if the tool can run in the current environment."""
        ...

    def ensure_supported(self) -> None:
        """Raise UnsupportedRuntimeError if the tool cannot run here."""
        ...

    def calculate(
        self,
        entry_points: Sequence[str],
        deps_file: Union[str, Path],
        base_js_path: Union[str, Path],
    ) -> RawResolverOutput:
        """Run the tool once and return its parsed output.

        Args:
            entry_points: Chunk entry points in declared order
            deps_file: Dependency manifest the tool reads
            base_js_path: Path of the library base file

        Returns:
            Raw resolver output with descriptors in entry point order

        Raises:
            ToolExecutionError: If the tool fails or emits invalid JSON
        """
        ...
