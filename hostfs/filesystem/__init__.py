"""
hostfs Filesystem Module

Host filesystem access:
- Platform capability interface (stat, mkdir, listing, cwd)
- Stateless filesystem facade
- Line-oriented streams
"""

from .platform import (
    PlatformOps,
    PosixPlatform,
    WindowsPlatform,
    StatResult,
    detect_platform,
)
from .stream import LineStream, OpenMode
from .facade import FileSystemFacade

__all__ = [
    # Platform
    'PlatformOps',
    'PosixPlatform',
    'WindowsPlatform',
    'StatResult',
    'detect_platform',
    # Streams
    'LineStream',
    'OpenMode',
    # Facade
    'FileSystemFacade',
]
