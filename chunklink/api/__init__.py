"""ChunkLink API package."""
