"""Service layer for ChunkLink - build pipeline coordination."""

from .base_service import BaseService
from .build_coordinator import BuildCoordinator, BuildPlan, BuildResult
from .graph_resolver import ChunkGraphResolver
from .wrapper_generator import WrapperGenerator

__all__ = [
    'BaseService',
    'BuildCoordinator',
    'BuildPlan',
    'BuildResult',
    'ChunkGraphResolver',
    'WrapperGenerator',
]
