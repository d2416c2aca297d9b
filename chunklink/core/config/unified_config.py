"""
Unified configuration system for ChunkLink.

This module provides a single, type-safe configuration model covering the
graph resolver, the compiler, the source transforms, the build layout and
the chunk registry, with hierarchical loading from multiple sources.
"""

import json
from pathlib import Path
from typing import Any, Optional

import yaml
from loguru import logger
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.exceptions import ConfigurationError
from core.models import ChunkRegistry, is_js_identifier

PROJECT_CONFIG_NAMES = ('.chunklink.json', '.chunklink.yaml', '.chunklink.yml')


class ResolverConfig(BaseModel):
    """Graph calculation tool configuration."""

    command: str = Field(
        default='closure-calculate-chunks',
        description="Command used to run the graph calculation tool"
    )

    node_command: str = Field(
        default='node',
        description="Node.js executable used to probe the runtime version"
    )

    min_node_version: int = Field(
        default=14,
        ge=0,
        description="Lowest Node.js major version the tool runs on"
    )

    deps_file: str = Field(
        default='./tests/deps.js',
        description="Dependency manifest read by the tool (must be up to date)"
    )

    base_js_path: str = Field(
        default='./closure/goog/base_minimal.js',
        description="Closure library base file"
    )

    cache_file: str = Field(
        default='chunks.json',
        description="Checked-in cache of the tool's output"
    )


class CompilerConfig(BaseModel):
    """Compiler and generated wrapper configuration."""

    command: str = Field(
        default='google-closure-compiler',
        description="Command used to run the compiler"
    )

    externs: list[str] = Field(
        default_factory=list,
        description="Extern files passed to the compiler"
    )

    compiled_suffix: str = Field(
        default='_compressed',
        description="Suffix added to compiled chunk file names"
    )

    namespace_object: str = Field(
        default='$',
        description="Name of the namespace object shared between chunks"
    )

    debug: bool = Field(default=False, description="Treat diagnostic groups as errors")

    strict: bool = Field(default=False, description="Also treat strict type checks as errors")

    verbose: bool = Field(default=False, description="Verbose compiler warnings")

    version: Optional[str] = Field(
        default=None,
        description="Version string injected as a compile-time define"
    )

    version_define: str = Field(
        default='VERSION',
        description="Name of the define receiving the version string"
    )

    @field_validator('namespace_object')
    def validate_namespace_object(cls, v: str) -> str:
        if not is_js_identifier(v):
            raise ValueError(f"Namespace object must be a valid identifier: {v!r}")
        return v


class TransformConfig(BaseModel):
    """Source transform configuration."""

    flatten_area: str = Field(
        default='core',
        description="Top-level source directory flattened into one visibility scope"
    )

    source_root: str = Field(
        default='./',
        description="sourceRoot written into rewritten source maps"
    )

    license_holders: list[str] = Field(
        default_factory=lambda: ['Google LLC', 'Massachusetts Institute of Technology'],
        description="Rights-holders whose license headers are stripped"
    )


class BuildConfig(BaseModel):
    """Build layout configuration."""

    build_dir: str = Field(default='build', description="Directory receiving compiled chunks")

    staging_dir: str = Field(
        default='build/.staging',
        description="Scratch directory for transformed sources"
    )


class ChunkConfig(BaseModel):
    """One chunk registry record."""

    name: str
    entry: str
    exports: str
    import_as: Optional[str] = None
    factory_preamble: Optional[str] = None
    factory_postamble: Optional[str] = None


class ChunkLinkConfig(BaseSettings):
    """
    Unified configuration for ChunkLink.

    Configuration Sources (in order of precedence):
    1. Runtime parameters (highest priority)
    2. Project config file (.chunklink.json / .chunklink.yaml, or --config)
    3. User config file (~/.chunklink/config.json)
    4. Environment variables (CHUNKLINK_*)
    5. Default values (lowest priority)

    Environment Variable Examples:
        CHUNKLINK_RESOLVER__CACHE_FILE=scripts/chunks.json
        CHUNKLINK_RESOLVER__MIN_NODE_VERSION=16
        CHUNKLINK_COMPILER__STRICT=true
        CHUNKLINK_BUILD__BUILD_DIR=dist
        CHUNKLINK_DEBUG=true
    """

    model_config = SettingsConfigDict(
        env_prefix='CHUNKLINK_',
        env_nested_delimiter='__',
        case_sensitive=False,
        validate_default=True,
        extra='ignore',
        env_file=None,
    )

    resolver: ResolverConfig = Field(
        default_factory=ResolverConfig,
        description="Graph calculation tool configuration"
    )

    compiler: CompilerConfig = Field(
        default_factory=CompilerConfig,
        description="Compiler configuration"
    )

    transform: TransformConfig = Field(
        default_factory=TransformConfig,
        description="Source transform configuration"
    )

    build: BuildConfig = Field(
        default_factory=BuildConfig,
        description="Build layout configuration"
    )

    chunks: list[ChunkConfig] = Field(
        default_factory=list,
        description="Declared chunks; order matters"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    @classmethod
    def load_hierarchical(cls,
                          project_dir: Path | None = None,
                          config_file: Path | None = None,
                          **override_values: Any) -> 'ChunkLinkConfig':
        """
        Load configuration from hierarchical sources.

        Args:
            project_dir: Project directory to search for .chunklink.json/.yaml
            config_file: Explicit config file replacing the project file lookup
            **override_values: Runtime parameter overrides

        Returns:
            Loaded and validated configuration

        Raises:
            ConfigurationError: If an explicit config file is missing or
                invalid, or the merged data fails validation
        """
        config_data: dict[str, Any] = {}

        # 1. User config file (~/.chunklink/config.json)
        user_config_path = Path.home() / '.chunklink' / 'config.json'
        if user_config_path.exists():
            try:
                _deep_merge(config_data, load_config_file(user_config_path))
            except ConfigurationError as e:
                logger.warning(f"Ignoring user config: {e}")

        # 2. Project config file
        if config_file is not None:
            _deep_merge(config_data, load_config_file(config_file))
        else:
            project_config_path = find_project_config(project_dir or Path.cwd())
            if project_config_path is not None:
                _deep_merge(config_data, load_config_file(project_config_path))

        # 3. Runtime overrides
        _deep_merge(config_data, override_values)

        try:
            return cls(**config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(reason=f"Invalid configuration: {e}")

    def to_registry(self) -> ChunkRegistry:
        """Build the immutable chunk registry from the declared chunks.

        Raises:
            ConfigurationError: If no chunks are declared or aliases collide
        """
        return ChunkRegistry.from_records(
            chunk.model_dump(exclude_none=True) for chunk in self.chunks
        )

    def get_missing_config(self) -> list[str]:
        """Get list of missing required configuration parameters."""
        missing = []
        if not self.chunks:
            missing.append('chunks')
        return missing

    def is_valid(self) -> bool:
        return not self.get_missing_config()


def find_project_config(project_dir: Path) -> Path | None:
    """Return the first project config file present in ``project_dir``."""
    for name in PROJECT_CONFIG_NAMES:
        candidate = Path(project_dir) / name
        if candidate.is_file():
            return candidate
    return None


def load_config_file(path: Path | str) -> dict[str, Any]:
    """Load a JSON or YAML config file into a dictionary.

    Raises:
        ConfigurationError: If the file is missing, unreadable or not a mapping
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(str(path), reason="Config file not found")

    try:
        with open(path, encoding='utf-8') as f:
            if path.suffix in ('.yaml', '.yml'):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(str(path), reason=f"Cannot parse config file: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(str(path), reason="Config file must contain a mapping")
    return data


def _deep_merge(target: dict[str, Any], source: dict[str, Any]) -> dict[str, Any]:
    """Merge ``source`` into ``target``; nested mappings merge, lists replace."""
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _deep_merge(target[key], value)
        else:
            target[key] = value
    return target
