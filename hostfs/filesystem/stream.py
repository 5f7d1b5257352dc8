"""
Line Stream Module

A handle wrapping exactly one open file, with sequential line
reading and writing.

States:
    OPEN   - after successful construction
    CLOSED - after close(); terminal

The file is released by close(). If a stream becomes unreachable
while still open, a finalizer closes it; that path is a leak guard
and logs a warning.

Version: 1.0.0
"""

import os
import weakref
from enum import Enum
from typing import IO, Optional, Any

from hostfs.core.config_loader import StreamConfig, get_config
from hostfs.exceptions import (
    OpenError,
    InvalidModeError,
    EndOfStreamError,
    StreamClosedError,
    StreamNotWritableError,
    StreamNotReadableError,
    StreamIOError,
)
from hostfs.logger import get_logger


_logger = get_logger('stream')


class OpenMode(Enum):
    """Stream open modes."""
    READ = 'r'
    WRITE = 'w'
    READ_WRITE = 'r+'

    @classmethod
    def parse(cls, mode: Optional[str] = None) -> 'OpenMode':
        """
        Derive the open mode from a script mode string.

        'r' grants reading and 'w' grants writing; both together give
        READ_WRITE, which requires the file to exist and keeps its contents.
        No mode string means READ.

        Raises:
            InvalidModeError: If the string contains neither 'r' nor 'w'
        """
        if mode is None:
            return cls.READ

        mode = str(mode)
        read = 'r' in mode
        write = 'w' in mode

        if not read and not write:
            raise InvalidModeError(mode)
        if read and write:
            return cls.READ_WRITE
        if write:
            return cls.WRITE
        return cls.READ

    def can_read(self) -> bool:
        return self in (OpenMode.READ, OpenMode.READ_WRITE)

    def can_write(self) -> bool:
        return self in (OpenMode.WRITE, OpenMode.READ_WRITE)


def _release_leaked(file: IO[str], path: str) -> None:
    """Finalizer for streams that were never closed."""
    _logger.warning("Stream was not closed, releasing it", context={'path': path})
    file.close()


class LineStream:
    """
    Line-oriented stream over one host file.

    Not safe for concurrent use; the host serializes access.

    Example:
        >>> stream = LineStream('/tmp/notes.txt', 'w')
        >>> stream.write_line('hello').flush()
        >>> stream.close()
        >>> LineStream('/tmp/notes.txt').next()
        'hello'
    """

    def __init__(
        self,
        path: str,
        mode: Optional[str] = None,
        config: Optional[StreamConfig] = None
    ):
        """
        Open a stream.

        Args:
            path: Path of the file to open
            mode: Mode string containing 'r' and/or 'w' (default: read)
            config: Encoding and buffering settings (default: global config)

        Raises:
            InvalidModeError: If the mode string is invalid (nothing is opened)
            OpenError: If path is not a string or the OS refuses to open the file
        """
        open_mode = OpenMode.parse(mode)
        config = config or get_config().stream

        # An int would be wrapped as an already-open descriptor
        if not isinstance(path, (str, bytes, os.PathLike)):
            raise OpenError(
                repr(path),
                mode=mode,
                reason=f"path must be a string, not {type(path).__name__}"
            )

        try:
            file = open(
                path,
                open_mode.value,
                buffering=config.buffering,
                encoding=config.encoding,
                errors=config.errors,
            )
        except (OSError, ValueError, LookupError) as e:
            reason = getattr(e, 'strerror', None) or str(e)
            _logger.debug(
                "Open failed",
                context={'path': path, 'mode': open_mode.value, 'error': reason}
            )
            raise OpenError(
                path,
                mode=mode,
                errno=getattr(e, 'errno', None),
                reason=reason
            ) from e

        self.name = path
        self._mode = open_mode
        self._file = file
        self._finalizer = weakref.finalize(self, _release_leaked, file, path)

        _logger.debug("Opened stream", context={'path': path, 'mode': open_mode.value})

    @property
    def mode(self) -> OpenMode:
        return self._mode

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def close(self) -> None:
        """
        Flush and release the file.

        Closing an already closed stream does nothing.
        """
        if self._finalizer.detach() is None:
            return

        try:
            self._file.close()
        except (OSError, UnicodeError) as e:
            raise self._io_error("Stream.close()", e) from e

        _logger.debug("Closed stream", context={'path': self.name})

    def flush(self) -> 'LineStream':
        """Force buffered writes to the OS. Returns the stream."""
        self._ensure_open("Stream.flush()")
        try:
            self._file.flush()
        except (OSError, UnicodeError) as e:
            raise self._io_error("Stream.flush()", e) from e
        return self

    def next(self) -> str:
        """
        Read the next line without its newline.

        A last line lacking a newline is still returned.

        Raises:
            EndOfStreamError: If no lines remain
        """
        line = self._read_raw_line("Stream.next()")
        if not line:
            raise EndOfStreamError(self.name)
        if line.endswith('\n'):
            line = line[:-1]
        return line

    def read_line(self) -> str:
        """
        Read the next line including a trailing newline.

        Returns '' at end of file instead of raising.
        """
        line = self._read_raw_line("Stream.readLine()")
        if line and not line.endswith('\n'):
            line += '\n'
        return line

    def write_line(self, text: Any) -> 'LineStream':
        """
        Write text followed by a newline. Returns the stream.

        Raises:
            StreamNotWritableError: If the stream was opened read-only
            StreamIOError: If the OS write fails or the text cannot be encoded
        """
        self._ensure_open("Stream.writeLine()")
        if not self._mode.can_write():
            raise StreamNotWritableError(self.name, mode=self._mode.value)

        try:
            self._file.write(f"{text}\n")
        except (OSError, UnicodeError) as e:
            raise self._io_error("Stream.writeLine()", e) from e
        return self

    def _read_raw_line(self, operation: str) -> str:
        self._ensure_open(operation)
        if not self._mode.can_read():
            raise StreamNotReadableError(operation, path=self.name, mode=self._mode.value)

        try:
            return self._file.readline()
        except (OSError, UnicodeError) as e:
            # Undecodable bytes must not look like end of file
            raise self._io_error(operation, e) from e

    def _io_error(self, operation: str, exc: Exception) -> StreamIOError:
        return StreamIOError(
            operation,
            path=self.name,
            errno=getattr(exc, 'errno', None),
            reason=getattr(exc, 'strerror', None) or str(exc)
        )

    def _ensure_open(self, operation: str) -> None:
        if self.closed:
            raise StreamClosedError(operation, path=self.name)

    def __iter__(self) -> 'LineStream':
        return self

    def __next__(self) -> str:
        try:
            return self.next()
        except EndOfStreamError:
            raise StopIteration from None

    def __enter__(self) -> 'LineStream':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = 'closed' if self.closed else 'open'
        return f"LineStream(name={self.name!r}, mode={self._mode.value!r}, {state})"
