"""Compiler providers for ChunkLink."""

from .closure_compiler import JSCOMP_ERROR, ClosureCompiler, CompilerOptions, render_flags

__all__ = [
    "ClosureCompiler",
    "CompilerOptions",
    "JSCOMP_ERROR",
    "render_flags",
]
