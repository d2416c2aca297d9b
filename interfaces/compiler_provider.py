"""CompilerProvider protocol for ChunkLink - interface to the optimizing compiler."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Sequence, Union


class CompilerProvider(Protocol):
    """Abstract protocol for the external optimizing compiler.

    The compiler consumes the staged (license-stripped, path-flattened)
    sources in global file order, one chunk spec and one wrapper per chunk,
    and writes one output file per chunk plus a source map.
    """

    @property
    def name(self) -> str:
        """Compiler name used in log messages and errors."""
        ...

    def build_command(
        self,
        options: Dict[str, Any],
        sources: Sequence[Union[str, Path]],
        output_dir: Union[str, Path],
    ) -> List[str]:
        """Build the full command line for one compilation."""
        ...

    def compile(
        self,
        options: Dict[str, Any],
        sources: Sequence[Union[str, Path]],
        output_dir: Union[str, Path],
        cwd: Optional[Union[str, Path]] = None,
    ) -> List[Path]:
        """Run one compilation.

        Returns:
            Paths of the emitted chunk files, in chunk order

        Raises:
            ToolExecutionError: If the compiler exits non-zero
        """
        ...
