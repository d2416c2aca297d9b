"""ChunkLink Chunk Graph Model - Resolved dependency graph of declared chunks.

Nodes are derived once per build from the resolver output and the chunk
registry. The input ChunkDefinitions are never mutated; computed fields
(dependencies, file counts) live on the nodes instead.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from ..types import ChunkName, ChunkSpec, FileCount, FilePath
from ..exceptions import ValidationError
from .chunk_definition import ChunkDefinition


@dataclass(frozen=True)
class ChunkGraphNode:
    """One declared chunk plus its resolved dependencies.

    Attributes:
        definition: The declared chunk
        index: Position of the chunk in the registry
        file_count: Number of source files the chunk compiles
        dependencies: Earlier-declared chunks this chunk depends on directly
    """

    definition: ChunkDefinition
    index: int
    file_count: FileCount
    dependencies: Tuple["ChunkGraphNode", ...] = ()

    def __post_init__(self):
        if self.index < 0:
            raise ValidationError("index", self.index, "Index cannot be negative")
        if self.file_count < 0:
            raise ValidationError("file_count", self.file_count, "File count cannot be negative")

    @property
    def name(self) -> ChunkName:
        return self.definition.name

    @property
    def is_root(self) -> bool:
        return not self.dependencies

    @property
    def root(self) -> "ChunkGraphNode":
        """The root chunk reached by following first dependencies."""
        node = self
        while node.dependencies:
            node = node.dependencies[0]
        return node

    @property
    def dependency_names(self) -> Tuple[ChunkName, ...]:
        return tuple(dependency.name for dependency in self.dependencies)

    def to_chunk_spec(self) -> ChunkSpec:
        """Render the ``name:fileCount[:dep,dep]`` form using configured names."""
        if not self.dependencies:
            return f"{self.name}:{self.file_count}"
        return f"{self.name}:{self.file_count}:{','.join(self.dependency_names)}"

    def __repr__(self) -> str:
        deps = ", ".join(self.dependency_names)
        return f"ChunkGraphNode({self.name}, files={self.file_count}, deps=[{deps}])"


@dataclass(frozen=True)
class ChunkGraph:
    """Ordered list of resolved nodes plus the global ordered file list."""

    nodes: Tuple[ChunkGraphNode, ...]
    js_files: Tuple[FilePath, ...] = field(default_factory=tuple)

    @property
    def root(self) -> ChunkGraphNode:
        return self.nodes[0]

    @property
    def total_files(self) -> int:
        return sum(node.file_count for node in self.nodes)

    def node(self, name: str) -> Optional[ChunkGraphNode]:
        for node in self.nodes:
            if node.name == name:
                return node
        return None

    def compiler_chunk_specs(self) -> List[ChunkSpec]:
        return [node.to_chunk_spec() for node in self.nodes]

    def __iter__(self) -> Iterator[ChunkGraphNode]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> ChunkGraphNode:
        return self.nodes[index]
