"""
hostfs - Host filesystem bindings for embedded scripts

Exposes existence checks, directory listing and creation, and
line-oriented file streams to a script namespace as 'fs' and 'Stream'.
"""

__version__ = "1.0.0"

from typing import Any, Optional

from .bindings import BindingDispatcher
from .core.config_loader import ConfigLoader, get_config
from .filesystem import FileSystemFacade, LineStream, OpenMode
from .logger import Logger, LogLevel


def setup_fs(
    namespace: dict[str, Any],
    config_path: Optional[str] = None
) -> BindingDispatcher:
    """
    Install the filesystem bindings into a script namespace.

    Args:
        namespace: The host's global namespace
        config_path: Optional JSON configuration file to load first

    Returns:
        The dispatcher serving the installed bindings
    """
    if config_path:
        ConfigLoader().load(config_path)

    log_config = get_config().logging
    Logger.initialize(
        level=LogLevel.from_name(log_config.level),
        log_file=log_config.log_file,
        use_colors=log_config.use_colors,
        console_output=log_config.console_output,
    )

    dispatcher = BindingDispatcher()
    dispatcher.install(namespace)
    return dispatcher


__all__ = [
    'setup_fs',
    'BindingDispatcher',
    'FileSystemFacade',
    'LineStream',
    'OpenMode',
]
