"""
hostfs Configuration Loader

Configuration management for the filesystem bindings:
- JSON configuration file loading
- Default value handling
- Runtime configuration updates
- Type-safe access to configuration values

Version: 1.0.0
"""

import codecs
import json
import threading
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional

from hostfs.exceptions import HostFSError
from hostfs.logger import LogLevel


PLATFORM_CHOICES = ("auto", "posix", "windows")


class ConfigurationError(HostFSError):
    """Raised when configuration cannot be loaded or a key is invalid."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        super().__init__(
            message=message,
            operation="config",
            error_code=9001,
            context=context
        )


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    """Return one configuration section, which must be a JSON object."""
    section = data[name]
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Configuration section '{name}' must be a JSON object",
            context={'section': name}
        )
    return section


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = True
    use_colors: bool = True


@dataclass
class StreamConfig:
    """Settings applied to every file opened by a LineStream."""
    encoding: str = "utf-8"
    errors: str = "strict"
    buffering: int = -1


@dataclass
class FilesystemConfig:
    """Filesystem facade settings."""
    platform: str = "auto"
    directory_mode: int = 0o777
    max_path: int = 0  # 0 = platform default


@dataclass
class BindingsConfig:
    """Names under which the bindings are installed into a script namespace."""
    fs_name: str = "fs"
    stream_name: str = "Stream"


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings for the bindings.
    """
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    stream: StreamConfig = field(default_factory=StreamConfig)
    filesystem: FilesystemConfig = field(default_factory=FilesystemConfig)
    bindings: BindingsConfig = field(default_factory=BindingsConfig)


class ConfigLoader:
    """
    Configuration loader and manager.

    Handles loading configuration from JSON files, validating
    settings, and providing runtime configuration access.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('hostfs.json')
        >>> print(config.stream.encoding)
        utf-8
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigurationError: If the file cannot be loaded or parsed
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                context={'path': config_path}
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in configuration file: {e}",
                context={'path': config_path}
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file: {e}",
                context={'path': config_path}
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Configuration root must be a JSON object",
                context={'path': config_path}
            )

        self._config = self._parse_config(data)
        self._loaded = True
        return self._config

    def _parse_config(self, data: dict[str, Any]) -> Config:
        """Parse configuration data into Config object."""
        config = Config()

        # Parse logging config
        if 'logging' in data:
            log_data = _section(data, 'logging')
            config.logging = LoggingConfig(
                level=log_data.get('level', config.logging.level),
                log_file=log_data.get('log_file', config.logging.log_file),
                console_output=log_data.get('console_output', config.logging.console_output),
                use_colors=log_data.get('use_colors', config.logging.use_colors),
            )

        # Parse stream config
        if 'stream' in data:
            stream_data = _section(data, 'stream')
            config.stream = StreamConfig(
                encoding=stream_data.get('encoding', config.stream.encoding),
                errors=stream_data.get('errors', config.stream.errors),
                buffering=stream_data.get('buffering', config.stream.buffering),
            )

        # Parse filesystem config
        if 'filesystem' in data:
            fs_data = _section(data, 'filesystem')
            directory_mode = fs_data.get('directory_mode', config.filesystem.directory_mode)
            if isinstance(directory_mode, str):
                # Accept "0755" / "0o755" as written in JSON
                try:
                    directory_mode = int(directory_mode, 8)
                except ValueError:
                    raise ConfigurationError(
                        f"filesystem.directory_mode is not an octal mode: {directory_mode}"
                    ) from None
            config.filesystem = FilesystemConfig(
                platform=fs_data.get('platform', config.filesystem.platform),
                directory_mode=directory_mode,
                max_path=fs_data.get('max_path', config.filesystem.max_path),
            )

        # Parse bindings config
        if 'bindings' in data:
            bind_data = _section(data, 'bindings')
            config.bindings = BindingsConfig(
                fs_name=bind_data.get('fs_name', config.bindings.fs_name),
                stream_name=bind_data.get('stream_name', config.bindings.stream_name),
            )

        self._validate(config)
        return config

    @staticmethod
    def _validate(config: Config) -> None:
        """Reject values the bindings cannot work with."""
        level = config.logging.level
        if not isinstance(level, str) or level.upper() not in LogLevel.__members__:
            raise ConfigurationError(
                f"Unknown log level: {level}",
                context={'choices': ",".join(LogLevel.__members__)}
            )

        if not isinstance(config.stream.encoding, str) or not isinstance(config.stream.errors, str):
            raise ConfigurationError("stream.encoding and stream.errors must be strings")
        try:
            codecs.lookup(config.stream.encoding)
        except LookupError:
            raise ConfigurationError(f"Unknown encoding: {config.stream.encoding}") from None
        try:
            codecs.lookup_error(config.stream.errors)
        except LookupError:
            raise ConfigurationError(
                f"Unknown encoding error handler: {config.stream.errors}"
            ) from None
        # Text streams cannot be unbuffered
        if not _is_int(config.stream.buffering) or config.stream.buffering == 0:
            raise ConfigurationError("stream.buffering must be a non-zero integer")

        if config.filesystem.platform not in PLATFORM_CHOICES:
            raise ConfigurationError(
                f"Unknown platform: {config.filesystem.platform}",
                context={'choices': ",".join(PLATFORM_CHOICES)}
            )
        if not _is_int(config.filesystem.directory_mode) \
                or not 0 <= config.filesystem.directory_mode <= 0o7777:
            raise ConfigurationError("filesystem.directory_mode must be a mode between 0 and 0o7777")
        if not _is_int(config.filesystem.max_path) or config.filesystem.max_path < 0:
            raise ConfigurationError("filesystem.max_path must be a non-negative integer")

        for name in (config.bindings.fs_name, config.bindings.stream_name):
            if not isinstance(name, str) or not name:
                raise ConfigurationError("Binding names must be non-empty strings")

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    @property
    def loaded(self) -> bool:
        return self._loaded

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'stream.encoding')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        obj: Any = self._config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Args:
            key: Dot-notation key naming one setting (e.g., 'filesystem.platform')
            value: Value to set

        Raises:
            ConfigurationError: If the key does not name a setting or the
                value fails validation (the old value is kept)

        Note:
            This modifies configuration at runtime but does not
            persist changes to disk.
        """
        parts = key.split('.')
        if len(parts) != 2:
            raise ConfigurationError(f"Invalid configuration key: {key}")

        section_name, final_key = parts
        if section_name not in {f.name for f in fields(self._config)}:
            raise ConfigurationError(f"Invalid configuration key: {key}")
        section = getattr(self._config, section_name)
        if final_key not in {f.name for f in fields(section)}:
            raise ConfigurationError(f"Invalid configuration key: {key}")

        previous = getattr(section, final_key)
        setattr(section, final_key, value)
        try:
            self._validate(self._config)
        except ConfigurationError:
            setattr(section, final_key, previous)
            raise

    def reset(self) -> None:
        """Restore the default configuration."""
        self._config = Config()
        self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            else:
                return obj

        return dataclass_to_dict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    return ConfigLoader().config
