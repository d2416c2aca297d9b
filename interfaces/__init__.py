"""Interfaces package for ChunkLink - abstract protocols for provider implementations."""

from .compiler_provider import CompilerProvider
from .graph_calculator import GraphCalculator

__all__ = [
    "GraphCalculator",
    "CompilerProvider",
]
