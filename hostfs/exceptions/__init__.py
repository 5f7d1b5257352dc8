"""
hostfs Exception Hierarchy

All errors surfaced to scripts inherit from HostFSError and carry a
message naming the failing operation.

Architecture:
    HostFSError (Base)
    ├── ArgumentError
    ├── UnknownOperationError
    ├── ReadOnlyAttributeError
    ├── AccessError
    ├── StreamException
    │   ├── OpenError
    │   ├── InvalidModeError
    │   ├── EndOfStreamError
    │   ├── StreamClosedError
    │   ├── StreamNotWritableError
    │   ├── StreamNotReadableError
    │   └── StreamIOError
    └── ConfigurationError (hostfs.core.config_loader)
"""

from .base import HostFSError

from .binding_exceptions import (
    ArgumentError,
    UnknownOperationError,
    ReadOnlyAttributeError,
)

from .fs_exceptions import AccessError

from .stream_exceptions import (
    StreamException,
    OpenError,
    InvalidModeError,
    EndOfStreamError,
    StreamClosedError,
    StreamNotWritableError,
    StreamNotReadableError,
    StreamIOError,
)

__all__ = [
    "HostFSError",
    # Binding exceptions
    "ArgumentError",
    "UnknownOperationError",
    "ReadOnlyAttributeError",
    # Filesystem exceptions
    "AccessError",
    # Stream exceptions
    "StreamException",
    "OpenError",
    "InvalidModeError",
    "EndOfStreamError",
    "StreamClosedError",
    "StreamNotWritableError",
    "StreamNotReadableError",
    "StreamIOError",
]
