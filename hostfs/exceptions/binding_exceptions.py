"""
Binding Exceptions

Errors raised at the script boundary, before any filesystem call is made:
wrong argument counts, unknown operation names, and writes to read-only
bindings.

Version: 1.0.0
"""

from typing import Optional, Any

from .base import HostFSError


class ArgumentError(HostFSError):
    """
    Wrong number of positional arguments passed to an operation.

    Always fatal to the call; never retried.

    Example:
        >>> raise ArgumentError("fs.exists()", expected="1 argument", received=2)
    """

    def __init__(
        self,
        operation: str,
        expected: str,
        received: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        if received is not None:
            ctx["received"] = received
        super().__init__(
            message=f"{operation} accepts {expected}",
            operation=operation,
            error_code=1001,
            context=ctx
        )
        self.expected = expected
        self.received = received


class UnknownOperationError(HostFSError, AttributeError):
    """The script asked for an operation that is not bound."""

    def __init__(
        self,
        owner: str,
        name: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"{owner} has no operation named '{name}'",
            operation=f"{owner}.{name}",
            error_code=1002,
            context=context
        )
        self.owner = owner
        self.name = name


class ReadOnlyAttributeError(HostFSError, AttributeError):
    """An assignment targeted a read-only binding such as pathSeparator."""

    def __init__(
        self,
        owner: str,
        name: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"{owner}.{name} is read-only",
            operation=f"{owner}.{name}",
            error_code=1003,
            context=context
        )
        self.owner = owner
        self.name = name
