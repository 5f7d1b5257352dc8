"""
Platform Capability Module

The four OS primitives the facade needs, behind one interface:
- stat
- mkdir
- list_directory
- get_current_directory

One implementation exists per platform family. The facade never
branches on the OS itself; it asks detect_platform() for the right
implementation once.

Version: 1.0.0
"""

import os
import stat as stat_module
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, List


@dataclass(frozen=True)
class StatResult:
    """The parts of a stat() answer the facade cares about."""
    path: str
    is_directory: bool
    is_regular_file: bool
    size: int
    mtime: float


class PlatformOps(ABC):
    """
    Abstract interface for the OS calls behind the facade.

    Implementations raise OSError on failure; translating it into a
    script-visible error is the facade's job.
    """

    name: str = "abstract"
    separator: str = "/"

    @abstractmethod
    def stat(self, path: str) -> StatResult:
        """Stat a path, following symlinks."""
        pass

    @abstractmethod
    def mkdir(self, path: str, mode: int) -> None:
        """Create exactly one directory level."""
        pass

    @abstractmethod
    def list_directory(self, path: str) -> List[str]:
        """Return entry names in OS order, without '.' and '..'."""
        pass

    @abstractmethod
    def get_current_directory(self) -> str:
        """Return the current working directory."""
        pass

    @property
    @abstractmethod
    def max_path(self) -> int:
        """Longest working directory path the platform reports."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(separator={self.separator!r})"


class PosixPlatform(PlatformOps):
    """Linux, macOS and the BSDs."""

    name = "posix"
    separator = "/"

    def __init__(self, max_path: int = 0):
        self._max_path = max_path or self._detect_max_path()

    @staticmethod
    def _detect_max_path() -> int:
        try:
            return os.pathconf('/', 'PC_PATH_MAX')
        except (AttributeError, ValueError, OSError):
            return 4096

    @property
    def max_path(self) -> int:
        return self._max_path

    def stat(self, path: str) -> StatResult:
        st = os.stat(path)
        return StatResult(
            path=path,
            is_directory=stat_module.S_ISDIR(st.st_mode),
            is_regular_file=stat_module.S_ISREG(st.st_mode),
            size=st.st_size,
            mtime=st.st_mtime,
        )

    def mkdir(self, path: str, mode: int) -> None:
        os.mkdir(path, mode)

    def list_directory(self, path: str) -> List[str]:
        # Never '.' or '..'
        return [name for name in os.listdir(path) if name not in ('.', '..')]

    def get_current_directory(self) -> str:
        return os.getcwd()


class WindowsPlatform(PlatformOps):
    """
    Windows.

    Follows the file-attribute view of the filesystem: anything that
    is not a directory counts as a file, and mkdir takes no mode.
    """

    name = "windows"
    separator = "\\"

    MAX_PATH = 260

    def __init__(self, max_path: int = 0):
        self._max_path = max_path or self.MAX_PATH

    @property
    def max_path(self) -> int:
        return self._max_path

    def stat(self, path: str) -> StatResult:
        st = os.stat(path)
        is_dir = stat_module.S_ISDIR(st.st_mode)
        return StatResult(
            path=path,
            is_directory=is_dir,
            is_regular_file=not is_dir,
            size=st.st_size,
            mtime=st.st_mtime,
        )

    def mkdir(self, path: str, mode: int) -> None:
        os.mkdir(path)

    def list_directory(self, path: str) -> List[str]:
        return [name for name in os.listdir(path) if name not in ('.', '..')]

    def get_current_directory(self) -> str:
        return os.getcwd()


_PLATFORMS: dict[str, type] = {
    PosixPlatform.name: PosixPlatform,
    WindowsPlatform.name: WindowsPlatform,
}


def detect_platform(name: Optional[str] = None, max_path: int = 0) -> PlatformOps:
    """
    Pick the platform implementation.

    Args:
        name: 'posix', 'windows', or 'auto'/None to detect from the interpreter
        max_path: Override for the maximum working directory length (0 = default)

    Returns:
        A PlatformOps instance

    Raises:
        ValueError: If the name is not a known platform
    """
    if name is None or name == 'auto':
        name = WindowsPlatform.name if sys.platform.startswith('win') else PosixPlatform.name

    platform_cls = _PLATFORMS.get(name)
    if platform_cls is None:
        raise ValueError(f"Unknown platform: {name}")

    return platform_cls(max_path=max_path)
