"""ChunkLink - Chunked compilation graph, loader wrappers and source transforms."""

__version__ = "0.3.0"
__description__ = "Chunked compilation graph, loader wrappers and source transforms"

__all__ = [
    "ChunkLinkConfig",
    "BuildCoordinator",
    "create_build_coordinator",
]


def __getattr__(name: str):
    """Lazy import to keep CLI start-up light."""
    if name == "ChunkLinkConfig":
        from .core.config import ChunkLinkConfig
        return ChunkLinkConfig
    elif name == "BuildCoordinator":
        from services.build_coordinator import BuildCoordinator
        return BuildCoordinator
    elif name == "create_build_coordinator":
        from registry import create_build_coordinator
        return create_build_coordinator
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
