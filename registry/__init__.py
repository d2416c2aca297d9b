"""Provider registry and dependency injection container for ChunkLink."""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from loguru import logger

from providers.compiler.closure_compiler import ClosureCompiler, CompilerOptions
from providers.graph.chunk_cache import ResolverCache
from providers.graph.closure_calculator import ClosureCalculateChunksProvider
from providers.transforms.license_normalizer import LicenseNormalizer
from providers.transforms.path_flatten import PathFlattenTransform
from services.build_coordinator import BuildCoordinator
from services.graph_resolver import ChunkGraphResolver
from services.wrapper_generator import WrapperGenerator


class ProviderRegistry:
    """Registry for managing provider implementations and dependency injection."""

    def __init__(self):
        """Initialize the provider registry."""
        self._providers: Dict[str, Any] = {}
        self._singletons: Dict[str, Any] = {}
        self._config: Dict[str, Any] = {}
        self._project_dir: Path = Path.cwd()

        # Register default providers
        self._register_default_providers()

    def configure(
        self,
        config: Dict[str, Any],
        project_dir: Optional[Union[str, Path]] = None,
    ) -> None:
        """Configure the registry with application settings.

        Args:
            config: Configuration dictionary (ChunkLinkConfig.model_dump())
            project_dir: Directory relative paths resolve against
        """
        self._config = config.copy()
        if project_dir is not None:
            self._project_dir = Path(project_dir)

        # Configured providers must be rebuilt with the new settings
        self._singletons.clear()

        logger.debug("Provider registry configured")

    def register_provider(self, name: str, implementation: Any, singleton: bool = True) -> None:
        """Register a provider implementation.

        Args:
            name: Provider name/identifier
            implementation: Concrete implementation class
            singleton: Whether to use singleton pattern for this provider
        """
        self._providers[name] = (implementation, singleton)

        # Clear existing singleton if registered
        if singleton and name in self._singletons:
            del self._singletons[name]

        logger.debug(f"Registered {implementation.__name__} as {name}")

    def get_provider(self, name: str) -> Any:
        """Get a provider instance for the specified name.

        Raises:
            ValueError: If no provider is registered for the name
        """
        if name not in self._providers:
            raise ValueError(f"No provider registered for {name}")

        implementation_class, is_singleton = self._providers[name]

        if is_singleton:
            if name not in self._singletons:
                self._singletons[name] = self._create_instance(name, implementation_class)
            return self._singletons[name]
        else:
            return self._create_instance(name, implementation_class)

    def create_graph_resolver(self) -> ChunkGraphResolver:
        """Create a ChunkGraphResolver with all dependencies."""
        return ChunkGraphResolver(
            graph_calculator=self.get_provider("graph_calculator"),
            cache=self.get_provider("resolver_cache"),
            project_dir=self._project_dir,
        )

    def create_wrapper_generator(self) -> WrapperGenerator:
        compiler_config = self._config.get('compiler', {})
        return WrapperGenerator(
            namespace=compiler_config.get('namespace_object', '$'),
            compiled_suffix=compiler_config.get('compiled_suffix', '_compressed'),
        )

    def create_compiler_options(self) -> CompilerOptions:
        compiler_config = self._config.get('compiler', {})
        return CompilerOptions.for_build(
            externs=compiler_config.get('externs', []),
            verbose=compiler_config.get('verbose', False),
            debug=compiler_config.get('debug', False),
            strict=compiler_config.get('strict', False),
            version=compiler_config.get('version'),
            version_define=compiler_config.get('version_define', 'VERSION'),
        )

    def create_build_coordinator(self) -> BuildCoordinator:
        """Create a BuildCoordinator with all dependencies."""
        resolver_config = self._config.get('resolver', {})
        build_config = self._config.get('build', {})
        transform_config = self._config.get('transform', {})

        return BuildCoordinator(
            resolver=self.create_graph_resolver(),
            wrapper_generator=self.create_wrapper_generator(),
            compiler=self.get_provider("compiler"),
            deps_file=resolver_config.get('deps_file', './tests/deps.js'),
            base_js_path=resolver_config.get('base_js_path', './closure/goog/base_minimal.js'),
            build_dir=build_config.get('build_dir', 'build'),
            staging_dir=build_config.get('staging_dir', 'build/.staging'),
            compiler_options=self.create_compiler_options(),
            license_normalizer=self.get_provider("license_normalizer"),
            path_transform=self.get_provider("path_transform"),
            source_root=transform_config.get('source_root', './'),
            project_dir=self._project_dir,
        )

    def _register_default_providers(self) -> None:
        """Register default provider implementations."""
        self.register_provider("graph_calculator", ClosureCalculateChunksProvider, singleton=True)
        self.register_provider("resolver_cache", ResolverCache, singleton=True)
        self.register_provider("compiler", ClosureCompiler, singleton=True)
        self.register_provider("license_normalizer", LicenseNormalizer, singleton=True)
        self.register_provider("path_transform", PathFlattenTransform, singleton=True)

    def _create_instance(self, name: str, cls: Any) -> Any:
        """Create an instance, injecting configuration by provider name."""
        try:
            if name == "graph_calculator":
                resolver_config = self._config.get('resolver', {})
                params = {
                    key: resolver_config[key]
                    for key in ('command', 'node_command', 'min_node_version')
                    if resolver_config.get(key) is not None
                }
                return cls(cwd=self._project_dir, **params)
            elif name == "resolver_cache":
                cache_file = self._config.get('resolver', {}).get('cache_file', 'chunks.json')
                cache_path = Path(cache_file)
                if not cache_path.is_absolute():
                    cache_path = self._project_dir / cache_path
                return cls(cache_path)
            elif name == "compiler":
                command = self._config.get('compiler', {}).get('command')
                return cls(command) if command else cls()
            elif name == "license_normalizer":
                holders = self._config.get('transform', {}).get('license_holders')
                return cls(holders) if holders else cls()
            elif name == "path_transform":
                area = self._config.get('transform', {}).get('flatten_area')
                return cls(area) if area else cls()
            else:
                return cls()
        except Exception as e:
            logger.error(f"Failed to create {name} provider: {e}")
            raise


# Global registry instance (lazy initialization)
_registry = None


def get_registry() -> ProviderRegistry:
    """Get the global registry instance."""
    global _registry
    if _registry is None:
        _registry = ProviderRegistry()
    return _registry


def configure_registry(
    config: Dict[str, Any],
    project_dir: Optional[Union[str, Path]] = None,
) -> None:
    """Configure the global provider registry."""
    get_registry().configure(config, project_dir)


def get_provider(name: str) -> Any:
    """Get a provider from the global registry."""
    return get_registry().get_provider(name)


def create_graph_resolver() -> ChunkGraphResolver:
    """Create a ChunkGraphResolver from the global registry."""
    return get_registry().create_graph_resolver()


def create_build_coordinator() -> BuildCoordinator:
    """Create a BuildCoordinator from the global registry."""
    return get_registry().create_build_coordinator()


__all__ = [
    'ProviderRegistry',
    'get_registry',
    'configure_registry',
    'get_provider',
    'create_graph_resolver',
    'create_build_coordinator',
]
