"""ChunkLink Core Types Package - Common type definitions and aliases.

The types are organized into logical groups:
- Compiler option enumerations
- Chunk naming types (configured names, resolver nicknames, aliases)
- Common aliases for better readability
"""

from .common import (
    ChunkName,
    ChunkSpec,
    CompilationLevel,
    ExportsPath,
    FileCount,
    FileList,
    FilePath,
    ImportAlias,
    Nickname,
    WarningLevel,
    WrapperText,
)

__all__ = [
    # Enums
    "CompilationLevel",
    "WarningLevel",

    # String types
    "ChunkName",
    "Nickname",
    "ExportsPath",
    "ImportAlias",
    "FilePath",
    "WrapperText",

    # Numeric types
    "FileCount",

    # Complex types
    "ChunkSpec",
    "FileList",
]
