"""closure-calculate-chunks provider for ChunkLink graph resolution."""

import json
import re
import shlex
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Union

from loguru import logger

from core.exceptions import ToolExecutionError, UnsupportedRuntimeError
from core.models import RawResolverOutput

_NODE_VERSION_RE = re.compile(r"v(\d+)\.")


class ClosureCalculateChunksProvider:
    """Runs closure-calculate-chunks to compute the chunk graph.

    The tool requires a minimum Node.js major version; on older runtimes
    (or when the tool is not installed) it reports itself as unsupported
    and the resolver falls back to the checked-in cache file.
    """

    def __init__(
        self,
        command: str = "closure-calculate-chunks",
        node_command: str = "node",
        min_node_version: int = 14,
        cwd: Optional[Union[str, Path]] = None,
    ):
        """Initialize the provider.

        Args:
            command: Tool command line prefix (may include a launcher, e.g. "npx ...")
            node_command: Node.js executable used for the version probe
            min_node_version: Lowest Node.js major version the tool runs on
            cwd: Working directory for the tool (defaults to the current one)
        """
        self._command = shlex.split(command)
        self._node_command = node_command
        self._min_node_version = min_node_version
        self._cwd = Path(cwd) if cwd else None

    @property
    def name(self) -> str:
        return Path(self._command[-1]).name if self._command else "closure-calculate-chunks"

    def node_major_version(self) -> Optional[int]:
        """Return the major version of the Node.js runtime, or None if unavailable."""
        try:
            result = subprocess.run(
                [self._node_command, "--version"],
                capture_output=True,
                text=True,
                check=True,
            )
        except (OSError, subprocess.CalledProcessError) as e:
            logger.debug(f"Node.js version probe failed: {e}")
            return None

        match = _NODE_VERSION_RE.search(result.stdout)
        if not match:
            logger.debug(f"Unrecognized Node.js version string: {result.stdout.strip()!r}")
            return None
        return int(match.group(1))

    def ensure_supported(self) -> None:
        """Raise UnsupportedRuntimeError if the tool cannot run here."""
        if not self._command or shutil.which(self._command[0]) is None:
            raise UnsupportedRuntimeError(
                self.name, f"'{self._command[0] if self._command else ''}' not found on PATH"
            )

        version = self.node_major_version()
        if version is None:
            raise UnsupportedRuntimeError(self.name, "Node.js runtime not available")
        if version < self._min_node_version:
            raise UnsupportedRuntimeError(
                self.name,
                f"requires Node.js v{self._min_node_version} or later, found v{version}",
                context={"node_version": version},
            )

    def is_supported(self) -> bool:
        try:
            self.ensure_supported()
        except UnsupportedRuntimeError:
            return False
        return True

    def build_command(
        self,
        entry_points: Sequence[str],
        deps_file: Union[str, Path],
        base_js_path: Union[str, Path],
    ) -> List[str]:
        command = list(self._command)
        command.extend(["--closure-library-base-js-path", str(base_js_path)])
        command.extend(["--deps-file", str(deps_file)])
        for entry_point in entry_points:
            command.extend(["--entrypoint", str(entry_point)])
        return command

    def calculate(
        self,
        entry_points: Sequence[str],
        deps_file: Union[str, Path],
        base_js_path: Union[str, Path],
    ) -> RawResolverOutput:
        """Run the tool once and parse its JSON output.

        Raises:
            ToolExecutionError: If the tool fails or emits invalid output
        """
        command = self.build_command(entry_points, deps_file, base_js_path)
        logger.debug(f"Running: {' '.join(command)}")

        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                check=True,
                cwd=self._cwd,
            )
        except subprocess.CalledProcessError as e:
            raise ToolExecutionError(
                self.name,
                command=command,
                returncode=e.returncode,
                reason=(e.stderr or "").strip() or "non-zero exit status",
                cause=e,
            )
        except OSError as e:
            raise ToolExecutionError(self.name, command=command, reason=str(e), cause=e)

        try:
            raw = RawResolverOutput.from_dict(json.loads(result.stdout))
        except (json.JSONDecodeError, ValueError) as e:
            raise ToolExecutionError(
                self.name,
                command=command,
                reason=f"unexpected output: {e}",
                cause=e,
            )

        logger.info(
            f"{self.name} computed {len(raw.chunk)} chunks over {len(raw.js)} files"
        )
        return raw
