"""
Base Exception

The root of the hostfs exception hierarchy. Every error surfaced to a
script derives from HostFSError and names the operation that failed.

Version: 1.0.0
"""

from typing import Optional, Any


class HostFSError(Exception):
    """
    Base exception for all hostfs errors.

    Attributes:
        message: Human-readable error description
        operation: Script-visible name of the failing call (e.g. 'fs.list()')
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error

    Example:
        >>> raise HostFSError("fs.list() can't access the directory",
        ...                   operation="fs.list()", error_code=2001)
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.error_code = error_code or 0
        self.context = dict(context or {})

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({context_str})"
        return base

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"operation={self.operation!r}, "
            f"error_code={self.error_code})"
        )
