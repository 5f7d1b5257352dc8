"""
hostfs Bindings Module

Script-facing side of the package: the binding table and the
dispatcher that installs 'fs' and 'Stream' into a namespace.
"""

from .binding_table import (
    Binding,
    FS_BINDINGS,
    FS_CONSTANTS,
    STREAM_CONSTRUCTOR,
    STREAM_BINDINGS,
    STREAM_CONSTANTS,
)
from .dispatcher import (
    BindingDispatcher,
    BindingResult,
    ScriptObject,
    StreamConstructor,
    script_path,
)

__all__ = [
    'Binding',
    'FS_BINDINGS',
    'FS_CONSTANTS',
    'STREAM_CONSTRUCTOR',
    'STREAM_BINDINGS',
    'STREAM_CONSTANTS',
    'BindingDispatcher',
    'BindingResult',
    'ScriptObject',
    'StreamConstructor',
    'script_path',
]
