"""ChunkLink Resolver Output Model - Raw output of the graph calculation tool.

The tool emits a JSON object of the form::

    {
      "chunk": ["requires:258", "all:10:requires", "all1:11:requires"],
      "js": ["./core/serialization/workspaces.js", ...]
    }

Each "chunk" entry is a compact descriptor ``nickname:fileCount[:dep,dep]``
whose nicknames are chosen by the tool from entry point file names. The
descriptors appear in the order the entry points were supplied. The same
object is persisted verbatim (with relative paths) as the resolver cache.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from ..types import FileCount, FilePath, Nickname
from ..exceptions import GraphInconsistencyError


@dataclass(frozen=True)
class ChunkDescriptor:
    """One parsed ``nickname:fileCount[:dep,dep]`` descriptor."""

    nickname: Nickname
    file_count: FileCount
    dependency_nicknames: Tuple[Nickname, ...] = ()

    @classmethod
    def parse(cls, descriptor: str) -> "ChunkDescriptor":
        """Parse a compact descriptor string.

        Raises:
            GraphInconsistencyError: If the descriptor is malformed
        """
        parts = descriptor.split(":")
        if len(parts) < 2 or len(parts) > 3 or not parts[0]:
            raise GraphInconsistencyError(
                f"Malformed chunk descriptor '{descriptor}'"
            )

        nickname, count_text = parts[0], parts[1]
        try:
            file_count = int(count_text)
        except ValueError:
            raise GraphInconsistencyError(
                f"Non-numeric file count in descriptor '{descriptor}'",
                nickname=nickname,
            )
        if file_count < 0:
            raise GraphInconsistencyError(
                f"Negative file count in descriptor '{descriptor}'",
                nickname=nickname,
            )

        dependencies: Tuple[Nickname, ...] = ()
        if len(parts) == 3 and parts[2]:
            dependencies = tuple(Nickname(nick) for nick in parts[2].split(","))

        return cls(
            nickname=Nickname(nickname),
            file_count=FileCount(file_count),
            dependency_nicknames=dependencies,
        )


@dataclass(frozen=True)
class RawResolverOutput:
    """Ordered descriptor list plus the global ordered source file list."""

    chunk: Tuple[str, ...]
    js: Tuple[FilePath, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Any) -> "RawResolverOutput":
        """Create from the tool's JSON object.

        Raises:
            ValueError: If the object does not have the expected shape
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

        chunk = data.get("chunk")
        js = data.get("js")
        if not isinstance(chunk, list) or not all(isinstance(c, str) for c in chunk):
            raise ValueError("'chunk' must be a list of strings")
        if not isinstance(js, list) or not all(isinstance(p, str) for p in js):
            raise ValueError("'js' must be a list of strings")

        return cls(chunk=tuple(chunk), js=tuple(FilePath(p) for p in js))

    def to_dict(self) -> Dict[str, List[str]]:
        return {"chunk": list(self.chunk), "js": list(self.js)}

    def parse_descriptors(self) -> List[ChunkDescriptor]:
        return [ChunkDescriptor.parse(descriptor) for descriptor in self.chunk]

    def relativized(self, cwd: Union[str, Path]) -> "RawResolverOutput":
        """Rewrite absolute paths under ``cwd`` as ``./relative`` paths.

        Paths outside ``cwd`` are kept unchanged.
        """
        prefix = str(cwd).rstrip("/\\")
        rewritten = []
        for path in self.js:
            if prefix and path.startswith(prefix) and path[len(prefix):len(prefix) + 1] in ("/", "\\"):
                path = FilePath("." + path[len(prefix):])
            rewritten.append(path)
        return RawResolverOutput(chunk=self.chunk, js=tuple(rewritten))
