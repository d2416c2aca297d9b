"""
Core configuration for ChunkLink.

This package contains the unified configuration system shared by every
ChunkLink command.
"""

__all__ = ["config"]
