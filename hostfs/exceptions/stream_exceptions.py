"""
Stream Exceptions

Exceptions related to line streams: opening, mode parsing,
end-of-stream signalling, and use of a stream in the wrong state.

Version: 1.0.0
"""

from typing import Optional, Any

from .base import HostFSError


class StreamException(HostFSError):
    """
    Base exception for all stream-related errors.

    Attributes:
        path: Path of the file the stream is (or was to be) bound to
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        path: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        if path is not None:
            ctx["path"] = path
        super().__init__(
            message=message,
            operation=operation,
            error_code=error_code or 3000,
            context=ctx
        )
        self.path = path


class OpenError(StreamException):
    """
    The file could not be opened while constructing a stream.

    No stream object exists after this error, and no descriptor is held.

    Example:
        >>> raise OpenError("/root/secret", mode="r", reason="Permission denied")
    """

    def __init__(
        self,
        path: str,
        mode: Optional[str] = None,
        errno: Optional[int] = None,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        if mode is not None:
            ctx["mode"] = mode
        if errno is not None:
            ctx["errno"] = errno
        if reason:
            ctx["reason"] = reason
        super().__init__(
            message="Stream() can't open the file",
            operation="Stream()",
            path=path,
            error_code=3001,
            context=ctx
        )
        self.mode = mode
        self.errno = errno
        self.reason = reason


class InvalidModeError(StreamException):
    """
    The mode string grants neither read nor write access.

    Raised before the filesystem is touched.

    Example:
        >>> raise InvalidModeError("x")
    """

    def __init__(
        self,
        mode: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        ctx["mode"] = mode
        super().__init__(
            message="Stream() invalid open mode",
            operation="Stream()",
            error_code=3002,
            context=ctx
        )
        self.mode = mode


class EndOfStreamError(StreamException):
    """
    next() was called with no lines remaining.

    Scripts use this as a loop-terminating condition.
    """

    def __init__(
        self,
        path: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message="Stream.next() reaches end of file",
            operation="Stream.next()",
            path=path,
            error_code=3003,
            context=context
        )


class StreamClosedError(StreamException):
    """An operation was attempted on a stream that has been closed."""

    def __init__(
        self,
        operation: str,
        path: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"{operation} called on a closed stream",
            operation=operation,
            path=path,
            error_code=3004,
            context=context
        )


class StreamNotWritableError(StreamException):
    """writeLine() on a stream that was not opened for writing."""

    def __init__(
        self,
        path: Optional[str] = None,
        mode: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        if mode is not None:
            ctx["mode"] = mode
        super().__init__(
            message="Stream.writeLine() stream is not open for writing",
            operation="Stream.writeLine()",
            path=path,
            error_code=3005,
            context=ctx
        )
        self.mode = mode


class StreamIOError(StreamException):
    """The OS reported an error while reading, writing or flushing an open stream."""

    def __init__(
        self,
        operation: str,
        path: Optional[str] = None,
        errno: Optional[int] = None,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        if errno is not None:
            ctx["errno"] = errno
        if reason:
            ctx["reason"] = reason
        super().__init__(
            message=f"{operation} failed",
            operation=operation,
            path=path,
            error_code=3007,
            context=ctx
        )
        self.errno = errno
        self.reason = reason


class StreamNotReadableError(StreamException):
    """A read primitive was used on a write-only stream."""

    def __init__(
        self,
        operation: str,
        path: Optional[str] = None,
        mode: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        if mode is not None:
            ctx["mode"] = mode
        super().__init__(
            message=f"{operation} stream is not open for reading",
            operation=operation,
            path=path,
            error_code=3006,
            context=ctx
        )
        self.mode = mode
