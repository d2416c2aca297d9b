"""ChunkLink Core Exceptions - Core exception classes for error handling.

This module contains the exception hierarchy for the ChunkLink build core.
Every error raised by the graph resolver, the transforms and the external
tool adapters derives from ChunkLinkError so the CLI can report it uniformly
and abort the build with a non-zero status.
"""

from typing import Optional, Any, Dict, List


class ChunkLinkError(Exception):
    """Base exception for all ChunkLink-specific errors.

    Carries a human-readable message, an optional context dictionary
    (chunk names, file paths, nicknames) and the underlying cause.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize ChunkLink error.

        Args:
            message: Human-readable error description
            context: Optional dictionary with error context (e.g., chunk names, paths)
            cause: Optional underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return formatted error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message

    def add_context(self, key: str, value: Any) -> "ChunkLinkError":
        """Add context information to the error."""
        self.context[key] = value
        return self


class ValidationError(ChunkLinkError):
    """Raised when a domain model field fails validation."""

    def __init__(
        self,
        field: str,
        value: Any,
        reason: str,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize validation error.

        Args:
            field: Name of the field that failed validation
            value: The invalid value
            reason: Description of why validation failed
            context: Optional additional context
        """
        message = f"Validation failed for field '{field}': {reason}"
        super().__init__(message, context)
        self.field = field
        self.value = value
        self.reason = reason


class ConfigurationError(ChunkLinkError):
    """Raised when configuration or the chunk registry is invalid.

    Duplicate chunk names, duplicate import aliases and unreadable config
    files all end up here.
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize configuration error.

        Args:
            config_key: Configuration key that caused the error
            config_value: Invalid configuration value
            reason: Description of what went wrong
            context: Optional additional context
        """
        if config_key:
            message = f"Configuration error for '{config_key}': {reason}"
        else:
            message = f"Configuration error: {reason}" if reason else "Configuration error"

        super().__init__(message, context)
        self.config_key = config_key
        self.config_value = config_value
        self.reason = reason


class GraphInconsistencyError(ChunkLinkError):
    """Raised when resolver output cannot be mapped onto the chunk registry.

    Covers a descriptor count that differs from the number of declared
    chunks, a dependency nickname that is not bound to an earlier chunk,
    a nickname bound twice, a malformed descriptor and a violation of the
    ordering invariant (root with dependencies, non-root without).
    """

    def __init__(
        self,
        reason: str,
        chunk: Optional[str] = None,
        nickname: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize graph inconsistency error.

        Args:
            reason: Description of the inconsistency
            chunk: Configured name of the chunk being resolved
            nickname: Resolver nickname involved, if any
            context: Optional additional context
        """
        parts = []
        if chunk:
            parts.append(f"chunk={chunk}")
        if nickname:
            parts.append(f"nickname={nickname}")

        prefix = f"Graph inconsistency ({', '.join(parts)})" if parts else "Graph inconsistency"
        super().__init__(f"{prefix}: {reason}", context)
        self.chunk = chunk
        self.nickname = nickname
        self.reason = reason


class UnsupportedRuntimeError(ChunkLinkError):
    """Raised when the graph calculation tool cannot run in this environment.

    The resolver recovers from this by reading the cached resolver output.
    """

    def __init__(
        self,
        tool: str,
        reason: str,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(f"Cannot run {tool}: {reason}", context)
        self.tool = tool
        self.reason = reason


class CacheMissingError(ChunkLinkError):
    """Raised when the resolver cache is needed but absent or unparsable."""

    def __init__(
        self,
        cache_file: str,
        reason: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(f"Resolver cache {cache_file} unusable: {reason}", context, cause)
        self.cache_file = cache_file
        self.reason = reason


class ToolExecutionError(ChunkLinkError):
    """Raised when an external build tool exits non-zero or emits bad output.

    There is no retry policy; the build is aborted.
    """

    def __init__(
        self,
        tool: str,
        command: Optional[List[str]] = None,
        returncode: Optional[int] = None,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize tool execution error.

        Args:
            tool: Name of the external tool (e.g., "closure-calculate-chunks")
            command: Full command line that was executed
            returncode: Process exit status if the process ran
            reason: Description of what went wrong
            context: Optional additional context
            cause: Optional underlying exception
        """
        parts = [f"tool={tool}"]
        if returncode is not None:
            parts.append(f"status={returncode}")

        prefix = f"Tool error ({', '.join(parts)})"
        message = f"{prefix}: {reason}" if reason else prefix

        super().__init__(message, context, cause)
        self.tool = tool
        self.command = command or []
        self.returncode = returncode
        self.reason = reason
