"""
Filesystem Exceptions

Raised by the filesystem facade when an underlying OS call
(stat, mkdir, opendir, getcwd) fails.

Version: 1.0.0
"""

from typing import Optional, Any

from .base import HostFSError


class AccessError(HostFSError):
    """
    An OS-level filesystem query or directory operation failed.

    The message names the failing operation so scripts can tell
    which call went wrong; the OS errno and reason are kept in the
    context when available.

    Attributes:
        path: Path the operation was applied to (if any)
        errno: OS error number (if known)
        reason: OS error text (if known)

    Example:
        >>> raise AccessError("fs.isFile()", "can't access the file", path="/nope")
    """

    def __init__(
        self,
        operation: str,
        description: str,
        path: Optional[str] = None,
        errno: Optional[int] = None,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = dict(context or {})
        if path is not None:
            ctx["path"] = path
        if errno is not None:
            ctx["errno"] = errno
        if reason:
            ctx["reason"] = reason
        super().__init__(
            message=f"{operation} {description}",
            operation=operation,
            error_code=2001,
            context=ctx
        )
        self.path = path
        self.errno = errno
        self.reason = reason

    @classmethod
    def from_error(
        cls,
        operation: str,
        description: str,
        path: Optional[str],
        exc: Exception
    ) -> 'AccessError':
        """
        Build an AccessError carrying the details of an OS-level failure.

        OSError supplies errno and strerror; anything else (an embedded
        NUL byte, say) contributes only its text.
        """
        return cls(
            operation,
            description,
            path=path,
            errno=getattr(exc, 'errno', None),
            reason=getattr(exc, 'strerror', None) or str(exc)
        )
