"""ChunkLink Core Types - Common type definitions and aliases.

This module contains type definitions, enums, and type aliases used throughout
the ChunkLink build core.
"""

from enum import Enum
from typing import List, NewType


# String-based type aliases for better semantic clarity
ChunkName = NewType("ChunkName", str)      # Configured chunk name, e.g. "blockly"
Nickname = NewType("Nickname", str)        # Resolver-assigned name, e.g. "requires"
ExportsPath = NewType("ExportsPath", str)  # Dotted symbol, e.g. "Blockly.Blocks"
ImportAlias = NewType("ImportAlias", str)  # Factory parameter name, e.g. "BlocklyBlocks"
FilePath = NewType("FilePath", str)        # File path as string
WrapperText = NewType("WrapperText", str)  # Generated loader snippet

# Numeric type aliases
FileCount = NewType("FileCount", int)      # Number of source files in a chunk

# Complex types
ChunkSpec = str                            # "name:fileCount[:dep,dep]"
FileList = List[FilePath]


class CompilationLevel(Enum):
    """Optimization levels understood by the external compiler."""

    WHITESPACE_ONLY = "WHITESPACE_ONLY"
    SIMPLE_OPTIMIZATIONS = "SIMPLE_OPTIMIZATIONS"
    ADVANCED_OPTIMIZATIONS = "ADVANCED_OPTIMIZATIONS"

    @classmethod
    def from_string(cls, value: str) -> "CompilationLevel":
        """Convert string to CompilationLevel, accepting short forms like 'simple'."""
        normalized = value.strip().upper()
        for level in cls:
            if level.value == normalized or level.value.startswith(f"{normalized}_"):
                return level
        raise ValueError(f"Unknown compilation level: {value}")


class WarningLevel(Enum):
    """Compiler warning verbosity."""

    QUIET = "QUIET"
    DEFAULT = "DEFAULT"
    VERBOSE = "VERBOSE"
