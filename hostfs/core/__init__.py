"""
hostfs Core Module

Configuration shared by the facade, streams and bindings.
"""

from .config_loader import (
    Config,
    ConfigLoader,
    ConfigurationError,
    LoggingConfig,
    StreamConfig,
    FilesystemConfig,
    BindingsConfig,
    get_config,
)

__all__ = [
    'Config',
    'ConfigLoader',
    'ConfigurationError',
    'LoggingConfig',
    'StreamConfig',
    'FilesystemConfig',
    'BindingsConfig',
    'get_config',
]
