"""ChunkLink Chunk Definition Model - Declared chunks and the ordered registry.

A ChunkDefinition is static build configuration: one independently loadable
unit of compiled output rooted at a single entry point. The ChunkRegistry is
the ordered, immutable list of them. Order matters: later chunks may depend
on earlier ones, never the reverse, and the first chunk is the root that
every other chunk depends on.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple, overload

from ..types import ChunkName, ExportsPath, FilePath, ImportAlias
from ..exceptions import ConfigurationError, ValidationError

# Separators of the compact "name:fileCount:dep,dep" descriptor format.
_RESERVED_NAME_CHARS = (":", ",")


def is_js_identifier(name: str) -> bool:
    """True if ``name`` is usable as a JavaScript binding name, $ included."""
    return name.replace("$", "_").isidentifier()


def default_import_alias(exports_path: str) -> str:
    """Derive a factory parameter name from a dotted exports path.

    "Blockly.Blocks" becomes "BlocklyBlocks".
    """
    return exports_path.replace(".", "")


@dataclass(frozen=True)
class ChunkDefinition:
    """Domain model for one declared chunk.

    Attributes:
        name: Chunk name; prefix of the compiled output file name
        entry_point: Source file at the root of the chunk's dependency closure
        exports_path: Dotted symbol returned by the factory and, in a browser,
            assigned on the global root object
        import_alias: Parameter name under which dependents receive this
            chunk's exports (exports paths are usually not valid identifiers)
        factory_preamble: Verbatim replacement for the default preamble
        factory_postamble: Verbatim replacement for the default postamble
    """

    name: ChunkName
    entry_point: FilePath
    exports_path: ExportsPath
    import_alias: ImportAlias
    factory_preamble: Optional[str] = None
    factory_postamble: Optional[str] = None

    def __post_init__(self):
        """Validate chunk definition after initialization."""
        self._validate()

    def _validate(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("name", self.name, "Chunk name cannot be empty")

        if any(char in self.name for char in _RESERVED_NAME_CHARS):
            raise ValidationError(
                "name", self.name, "Chunk name cannot contain ':' or ','"
            )

        if not self.entry_point or not self.entry_point.strip():
            raise ValidationError("entry_point", self.entry_point, "Entry point cannot be empty")

        if not self.exports_path or not all(
            is_js_identifier(part) for part in self.exports_path.split(".")
        ):
            raise ValidationError(
                "exports_path", self.exports_path, "Exports path must be a dotted identifier"
            )

        if not self.import_alias or not is_js_identifier(self.import_alias):
            raise ValidationError(
                "import_alias", self.import_alias, "Import alias must be a valid identifier"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ChunkDefinition":
        """Create a ChunkDefinition from a chunk registry record.

        Accepts both the config spelling ("entry", "exports", "import_as")
        and the attribute spelling ("entry_point", "exports_path",
        "import_alias").

        Raises:
            ValidationError: If required fields are missing or invalid
        """
        name = data.get("name")
        if not name:
            raise ValidationError("name", name, "Chunk name is required")

        entry_point = data.get("entry_point", data.get("entry"))
        if not entry_point:
            raise ValidationError("entry_point", entry_point, "Entry point is required")

        exports_path = data.get("exports_path", data.get("exports"))
        if not exports_path:
            raise ValidationError("exports_path", exports_path, "Exports path is required")

        import_alias = data.get("import_alias", data.get("import_as"))
        if not import_alias:
            import_alias = default_import_alias(exports_path)

        return cls(
            name=ChunkName(name),
            entry_point=FilePath(entry_point),
            exports_path=ExportsPath(exports_path),
            import_alias=ImportAlias(import_alias),
            factory_preamble=data.get("factory_preamble"),
            factory_postamble=data.get("factory_postamble"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a chunk registry record."""
        result: Dict[str, Any] = {
            "name": self.name,
            "entry": self.entry_point,
            "exports": self.exports_path,
            "import_as": self.import_alias,
        }
        if self.factory_preamble is not None:
            result["factory_preamble"] = self.factory_preamble
        if self.factory_postamble is not None:
            result["factory_postamble"] = self.factory_postamble
        return result

    def __str__(self) -> str:
        return f"{self.name} ({self.entry_point} -> {self.exports_path})"


class ChunkRegistry:
    """Ordered, immutable sequence of declared chunks.

    Construction rejects an empty list, duplicate chunk names and duplicate
    import aliases, since two chunks bound to the same factory parameter
    would shadow one another inside a dependent's wrapper.
    """

    def __init__(self, definitions: Iterable[ChunkDefinition]):
        self._definitions: Tuple[ChunkDefinition, ...] = tuple(definitions)
        self._validate()

    def _validate(self) -> None:
        if not self._definitions:
            raise ConfigurationError("chunks", [], "At least one chunk must be declared")

        seen_names: Dict[str, int] = {}
        seen_aliases: Dict[str, str] = {}
        for index, definition in enumerate(self._definitions):
            if definition.name in seen_names:
                raise ConfigurationError(
                    "chunks",
                    definition.name,
                    f"Duplicate chunk name '{definition.name}'",
                    context={"first_index": seen_names[definition.name], "index": index},
                )
            seen_names[definition.name] = index

            if definition.import_alias in seen_aliases:
                raise ConfigurationError(
                    "chunks",
                    definition.import_alias,
                    f"Import alias '{definition.import_alias}' used by both "
                    f"'{seen_aliases[definition.import_alias]}' and '{definition.name}'",
                )
            seen_aliases[definition.import_alias] = definition.name

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "ChunkRegistry":
        """Build a registry from a list of chunk registry records."""
        return cls(ChunkDefinition.from_dict(record) for record in records)

    @property
    def root(self) -> ChunkDefinition:
        """The first declared chunk."""
        return self._definitions[0]

    @property
    def entry_points(self) -> Tuple[FilePath, ...]:
        return tuple(definition.entry_point for definition in self._definitions)

    def get(self, name: str) -> Optional[ChunkDefinition]:
        for definition in self._definitions:
            if definition.name == name:
                return definition
        return None

    def __iter__(self) -> Iterator[ChunkDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    @overload
    def __getitem__(self, index: int) -> ChunkDefinition: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[ChunkDefinition, ...]: ...

    def __getitem__(self, index):
        return self._definitions[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChunkRegistry):
            return NotImplemented
        return self._definitions == other._definitions

    def __hash__(self) -> int:
        return hash(self._definitions)

    def __repr__(self) -> str:
        names = ", ".join(definition.name for definition in self._definitions)
        return f"ChunkRegistry([{names}])"
