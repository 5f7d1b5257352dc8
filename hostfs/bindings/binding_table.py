"""
Binding Table Module

Defines the script-visible names, their argument counts, and the
Python attributes they map to.

Version: 1.0.0
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Binding:
    """One script-callable operation."""
    name: str
    attribute: str
    min_args: int
    max_args: int
    path_arg: bool = False  # first argument is a path

    def accepts(self, count: int) -> bool:
        return self.min_args <= count <= self.max_args

    def expected(self) -> str:
        """Describe the accepted argument count, e.g. '1 or 2 arguments'."""
        if self.max_args == 0:
            return "no argument"
        if self.min_args == self.max_args:
            noun = "argument" if self.max_args == 1 else "arguments"
            return f"{self.max_args} {noun}"
        if self.max_args == self.min_args + 1:
            return f"{self.min_args} or {self.max_args} arguments"
        return f"{self.min_args} to {self.max_args} arguments"


# Default owner names; BindingsConfig may install them under others
FS_OWNER = "fs"
STREAM_OWNER = "Stream"


# fs.<name>(...)
FS_BINDINGS: dict[str, Binding] = {
    b.name: b for b in (
        Binding("exists", "exists", 1, 1, path_arg=True),
        Binding("isDirectory", "is_directory", 1, 1, path_arg=True),
        Binding("isFile", "is_file", 1, 1, path_arg=True),
        Binding("makeDirectory", "make_directory", 1, 1, path_arg=True),
        Binding("list", "list", 1, 1, path_arg=True),
        Binding("workingDirectory", "working_directory", 0, 0),
        Binding("open", "open", 1, 2, path_arg=True),
    )
}

# Read-only values on fs
FS_CONSTANTS: dict[str, str] = {
    "pathSeparator": "path_separator",
}

# new Stream(path[, mode])
STREAM_CONSTRUCTOR = Binding("Stream", "__init__", 1, 2, path_arg=True)

# stream.<name>(...)
STREAM_BINDINGS: dict[str, Binding] = {
    b.name: b for b in (
        Binding("close", "close", 0, 0),
        Binding("flush", "flush", 0, 0),
        Binding("next", "next", 0, 0),
        Binding("readLine", "read_line", 0, 0),
        Binding("writeLine", "write_line", 1, 1),
    )
}

# Read-only values on a stream
STREAM_CONSTANTS: dict[str, str] = {
    "name": "name",
}
