"""
Binding Dispatcher Module

Exposes the facade and line streams to a script namespace:
- 'fs' object with the facade operations and a read-only pathSeparator
- 'Stream' constructor producing script-visible stream objects
- Argument-count checks before any OS call
- Error propagation with messages naming the failing operation

Version: 1.0.0
"""

import os
from dataclasses import dataclass
from typing import Any, Optional, Union

from .binding_table import (
    Binding,
    FS_OWNER,
    STREAM_OWNER,
    FS_BINDINGS,
    FS_CONSTANTS,
    STREAM_CONSTRUCTOR,
    STREAM_BINDINGS,
    STREAM_CONSTANTS,
)
from hostfs.core.config_loader import BindingsConfig, StreamConfig, get_config
from hostfs.exceptions import (
    HostFSError,
    ArgumentError,
    UnknownOperationError,
    ReadOnlyAttributeError,
)
from hostfs.filesystem.facade import FileSystemFacade
from hostfs.filesystem.stream import LineStream
from hostfs.logger import get_logger


@dataclass
class BindingResult:
    """Result of a dispatched call, as handed back to a host."""
    success: bool
    return_value: Any
    error: Optional[str] = None
    error_code: int = 0


class ScriptObject:
    """
    Script view of a Python object.

    Only the operations in its binding table are callable, and
    constants cannot be reassigned.
    """

    def __init__(
        self,
        owner: str,
        target: Any,
        bindings: dict[str, Binding],
        constants: dict[str, str],
        dispatcher: 'BindingDispatcher'
    ):
        object.__setattr__(self, '_owner', owner)
        object.__setattr__(self, '_target', target)
        object.__setattr__(self, '_bindings', bindings)
        object.__setattr__(self, '_constants', constants)
        object.__setattr__(self, '_dispatcher', dispatcher)

    def __getattr__(self, name: str) -> Any:
        if name.startswith('_'):
            raise AttributeError(name)

        if name in self._constants:
            return getattr(self._target, self._constants[name])

        if name in self._bindings:
            def bound(*args: Any) -> Any:
                return self._dispatcher.call(self, name, *args)
            bound.__name__ = name
            return bound

        raise UnknownOperationError(self._owner, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._constants or name in self._bindings:
            raise ReadOnlyAttributeError(self._owner, name)
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        if name in self._constants or name in self._bindings:
            raise ReadOnlyAttributeError(self._owner, name)
        object.__delattr__(self, name)

    def __dir__(self):
        return sorted(set(self._bindings) | set(self._constants))

    def __repr__(self) -> str:
        return f"<{self._owner} {self._target!r}>"


class StreamConstructor:
    """The script-visible 'Stream' class."""

    def __init__(self, dispatcher: 'BindingDispatcher'):
        self._dispatcher = dispatcher

    def __call__(self, *args: Any) -> ScriptObject:
        return self._dispatcher.construct_stream(*args)

    def __repr__(self) -> str:
        return f"<class {self._dispatcher.stream_name}>"


def script_path(value: Any) -> str:
    """
    Convert a script argument to a path string.

    Strings pass through and path-like objects are decoded; anything
    else is converted with str(), so fs.exists(0) asks about a file
    named '0' rather than descriptor 0.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, os.PathLike)):
        return os.fsdecode(value)
    return str(value)


class BindingDispatcher:
    """
    Routes script calls to the facade and to streams.

    Example:
        >>> namespace = {}
        >>> BindingDispatcher().install(namespace)
        >>> fs = namespace['fs']
        >>> fs.exists('/tmp')
        True
        >>> stream = namespace['Stream']('/tmp/out.txt', 'w')
        >>> stream.writeLine('a').writeLine('b').close()
    """

    def __init__(
        self,
        facade: Optional[FileSystemFacade] = None,
        config: Optional[BindingsConfig] = None,
        stream_config: Optional[StreamConfig] = None
    ):
        global_config = get_config()
        self._config = config or global_config.bindings
        self._stream_config = stream_config or global_config.stream
        self._logger = get_logger('bindings')

        # fs.open builds streams through the Stream constructor
        self._facade = facade or FileSystemFacade(
            stream_factory=self.construct_stream,
            stream_config=self._stream_config
        )
        self._fs = ScriptObject(self.fs_name, self._facade, FS_BINDINGS, FS_CONSTANTS, self)
        self._stream_class = StreamConstructor(self)

    @property
    def facade(self) -> FileSystemFacade:
        return self._facade

    @property
    def fs(self) -> ScriptObject:
        return self._fs

    @property
    def stream_class(self) -> StreamConstructor:
        return self._stream_class

    @property
    def fs_name(self) -> str:
        return self._config.fs_name

    @property
    def stream_name(self) -> str:
        return self._config.stream_name

    def install(self, namespace: dict[str, Any]) -> dict[str, Any]:
        """
        Publish 'fs' and 'Stream' into a script namespace.

        Args:
            namespace: The host's global namespace

        Returns:
            The same namespace
        """
        namespace[self.fs_name] = self._fs
        namespace[self.stream_name] = self._stream_class

        self._logger.info(
            "Bindings installed",
            context={'fs': self.fs_name, 'stream': self.stream_name}
        )
        return namespace

    def construct_stream(self, *args: Any) -> ScriptObject:
        """
        Stream(path[, mode])

        Raises:
            ArgumentError: Unless given 1 or 2 arguments
            InvalidModeError: If the mode string is invalid
            OpenError: If the file cannot be opened
        """
        operation = f"{self.stream_name}()"
        self._check_arity(STREAM_CONSTRUCTOR, operation, args)
        args = self._coerce_args(STREAM_CONSTRUCTOR, args)
        self._logger.debug(f"Binding call: {operation}", context={'args': str(args)[:80]})

        try:
            stream = LineStream(*args, config=self._stream_config)
        except HostFSError as e:
            self._relabel(e)
            self._logger.warning(f"Binding call failed: {operation}", context={'error': str(e)})
            raise

        return self._wrap_stream(stream)

    def call(self, script_object: ScriptObject, name: str, *args: Any) -> Any:
        """
        Invoke a bound operation on a script object.

        Raises:
            UnknownOperationError: If the name is not bound on the object
            ArgumentError: If the argument count does not match
            HostFSError: Whatever the operation itself raises
        """
        owner = script_object._owner
        binding = script_object._bindings.get(name)
        if binding is None:
            raise UnknownOperationError(owner, name)

        operation = f"{owner}.{name}()"
        self._check_arity(binding, operation, args)
        args = self._coerce_args(binding, args)

        self._logger.debug(f"Binding call: {operation}", context={'args': str(args)[:80]})

        target = script_object._target
        try:
            result = getattr(target, binding.attribute)(*args)
        except HostFSError as e:
            self._relabel(e)
            self._logger.warning(f"Binding call failed: {operation}", context={'error': str(e)})
            raise

        # Chaining returns the script view, not the raw handle
        if result is target:
            return script_object
        if isinstance(result, LineStream):
            return self._wrap_stream(result)
        return result

    def dispatch(
        self,
        target: Union[str, ScriptObject],
        name: Optional[str] = None,
        args: tuple = ()
    ) -> BindingResult:
        """
        Non-raising entry point for hosts that want error objects.

        Args:
            target: 'fs', 'Stream' (constructor, name ignored), or a stream object
            name: Operation name on the target
            args: Positional arguments

        Returns:
            BindingResult
        """
        try:
            if target == self.stream_name or target == STREAM_OWNER:
                value = self.construct_stream(*args)
            else:
                if target == self.fs_name or target == FS_OWNER:
                    target = self._fs
                if not isinstance(target, ScriptObject):
                    raise UnknownOperationError(str(target), name or '')
                if name in target._constants:
                    if args:
                        raise ArgumentError(f"{target._owner}.{name}", "no argument", len(args))
                    value = getattr(target, name)
                else:
                    value = self.call(target, name or '', *args)
        except HostFSError as e:
            return BindingResult(
                success=False,
                return_value=None,
                error=str(e),
                error_code=e.error_code
            )

        return BindingResult(success=True, return_value=value)

    def _wrap_stream(self, stream: LineStream) -> ScriptObject:
        return ScriptObject(self.stream_name, stream, STREAM_BINDINGS, STREAM_CONSTANTS, self)

    def _check_arity(self, binding: Binding, operation: str, args: tuple) -> None:
        if not binding.accepts(len(args)):
            self._logger.warning(
                f"Wrong argument count for {operation}",
                context={'received': len(args)}
            )
            raise ArgumentError(operation, binding.expected(), len(args))

    @staticmethod
    def _coerce_args(binding: Binding, args: tuple) -> tuple:
        if binding.path_arg and args:
            return (script_path(args[0]),) + tuple(args[1:])
        return args

    def _relabel(self, error: HostFSError) -> None:
        """Name the installed object, not the default one, in an error."""
        operation = error.operation or ''
        for default, installed in ((FS_OWNER, self.fs_name), (STREAM_OWNER, self.stream_name)):
            if default == installed:
                continue
            if operation.startswith((f"{default}.", f"{default}(")):
                error.operation = installed + operation[len(default):]
                error.message = error.message.replace(operation, error.operation, 1)
                error.args = (error.message,)
                return
