"""
Filesystem Facade Module

Stateless operations over the host filesystem:
- Existence and type queries
- Single-level directory creation
- Directory listing
- Working directory lookup
- Opening line streams

Each operation is a thin wrapper around one PlatformOps call.
OS failures surface as AccessError naming the failing operation.

Version: 1.0.0
"""

import os
from typing import Any, Callable, Optional, List

from .platform import PlatformOps, detect_platform
from .stream import LineStream
from hostfs.core.config_loader import FilesystemConfig, StreamConfig, get_config
from hostfs.exceptions import AccessError
from hostfs.logger import Logger, get_logger


StreamFactory = Callable[..., Any]


class FileSystemFacade:
    """
    Host filesystem facade.

    Holds no filesystem state. The platform implementation and the
    stream factory are fixed at construction.

    Example:
        >>> facade = FileSystemFacade()
        >>> facade.make_directory('/tmp/work')
        >>> facade.is_directory('/tmp/work')
        True
        >>> facade.list('/tmp/work')
        []
    """

    def __init__(
        self,
        platform: Optional[PlatformOps] = None,
        stream_factory: Optional[StreamFactory] = None,
        config: Optional[FilesystemConfig] = None,
        stream_config: Optional[StreamConfig] = None
    ):
        """
        Args:
            platform: OS capability implementation (default: detected)
            stream_factory: Callable building a stream from (path[, mode]);
                defaults to LineStream
            config: Filesystem settings (default: global config)
            stream_config: Settings for streams built by the default factory
        """
        global_config = get_config()
        self._config = config or global_config.filesystem
        self._stream_config = stream_config or global_config.stream
        self._platform = platform or detect_platform(
            self._config.platform, self._config.max_path
        )
        self._stream_factory = stream_factory or self._default_stream_factory
        self._logger: Logger = get_logger('facade')

    @property
    def platform(self) -> PlatformOps:
        return self._platform

    @property
    def path_separator(self) -> str:
        """Platform directory separator."""
        return self._platform.separator

    def exists(self, path: str) -> bool:
        """True iff the path can be stat'd. Never raises for absence."""
        if not _is_path(path):
            return False
        try:
            self._platform.stat(path)
        except (OSError, ValueError):
            return False
        return True

    def is_directory(self, path: str) -> bool:
        """
        Check whether a path is a directory.

        Raises:
            AccessError: If the path cannot be stat'd
        """
        return self._stat(path, "fs.isDirectory()", "can't access the directory").is_directory

    def is_file(self, path: str) -> bool:
        """
        Check whether a path is a regular file.

        Raises:
            AccessError: If the path cannot be stat'd
        """
        return self._stat(path, "fs.isFile()", "can't access the file").is_regular_file

    def make_directory(self, path: str) -> None:
        """
        Create one directory level.

        Raises:
            AccessError: If the parent is missing, the path exists,
                or permission is denied
        """
        operation, description = "fs.makeDirectory()", "can't create the directory"
        self._check_path(path, operation, description)
        try:
            self._platform.mkdir(path, self._config.directory_mode)
        except (OSError, ValueError) as e:
            raise AccessError.from_error(operation, description, path, e) from e

        self._logger.debug(
            "Created directory",
            context={'path': path, 'mode': oct(self._config.directory_mode)}
        )

    def list(self, path: str) -> List[str]:
        """
        List a directory, excluding '.' and '..', in OS order.

        Raises:
            AccessError: If the directory cannot be opened
        """
        operation, description = "fs.list()", "can't access the directory"
        self._check_path(path, operation, description)
        try:
            entries = self._platform.list_directory(path)
        except (OSError, ValueError) as e:
            raise AccessError.from_error(operation, description, path, e) from e

        self._logger.debug("Listed directory", context={'path': path, 'entries': len(entries)})
        return entries

    def working_directory(self) -> str:
        """
        Return the current working directory.

        Raises:
            AccessError: If it cannot be determined or is longer than
                the platform's maximum path length
        """
        try:
            cwd = self._platform.get_current_directory()
        except OSError as e:
            raise AccessError.from_error(
                "fs.workingDirectory()", "can't get current working directory", None, e
            ) from e

        if len(cwd) > self._platform.max_path:
            raise AccessError(
                "fs.workingDirectory()",
                "can't get current working directory",
                reason="path exceeds maximum length",
                context={'length': len(cwd), 'max_path': self._platform.max_path}
            )

        return cwd

    def open(self, path: str, mode: Optional[str] = None) -> Any:
        """
        Open a stream through the configured stream factory.

        Raises:
            InvalidModeError: If the mode string is invalid
            OpenError: If the file cannot be opened
        """
        if mode is None:
            return self._stream_factory(path)
        return self._stream_factory(path, mode)

    def _default_stream_factory(self, path: str, mode: Optional[str] = None) -> LineStream:
        return LineStream(path, mode, config=self._stream_config)

    def _check_path(self, path: Any, operation: str, description: str) -> None:
        # An int would be taken as a file descriptor by the os module
        if not _is_path(path):
            raise AccessError(
                operation,
                description,
                path=repr(path),
                reason=f"path must be a string, not {type(path).__name__}"
            )

    def _stat(self, path: str, operation: str, description: str):
        self._check_path(path, operation, description)
        try:
            return self._platform.stat(path)
        except (OSError, ValueError) as e:
            raise AccessError.from_error(operation, description, path, e) from e


def _is_path(value: Any) -> bool:
    return isinstance(value, (str, bytes, os.PathLike))
