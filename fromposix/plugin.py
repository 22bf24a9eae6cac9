"""Host adapter for from-posix.

Commands are exposed to a host (the Nushell plugin runtime or the bundled
CLI) by name, e.g. "from posix". Each command declares its metadata and
takes a host value, turning it into plain text before calling the
converter.

Built-in commands:
- from posix: Convert POSIX export statements to Nushell $env assignments
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from ._version import __version__
from .config import ConverterConfig
from .converter import convert
from .errors import InputTypeError


@dataclass(frozen=True)
class Example:
    """A documented usage example."""

    example: str
    description: str
    result: str | None = None


def coerce_input(value: Any) -> str:
    """Turn a host pipeline value into a single string.

    Lists of fragments are joined with newlines; non-string fragments are
    dropped unless the list holds nothing else but that one value.
    """
    if isinstance(value, str):
        return value

    if isinstance(value, (list, tuple, Iterator)):
        values = list(value)
        if len(values) == 1:
            if isinstance(values[0], str):
                return values[0]
            raise InputTypeError(values[0])
        return "\n".join(v for v in values if isinstance(v, str))

    raise InputTypeError(value)


class PluginCommand(ABC):
    """Base class for host-facing commands."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Command name (e.g., 'from posix')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """One-line description shown by the host."""
        ...

    @property
    def category(self) -> str:
        return "default"

    @property
    def signature(self) -> list[tuple[str, str]]:
        """Accepted (input type, output type) pairs."""
        return [("string", "string")]

    def examples(self) -> list[Example]:
        return []

    @abstractmethod
    def run(self, value: Any, config: ConverterConfig | None = None) -> str:
        """Run the command on a host value."""
        ...


class FromPosix(PluginCommand):
    """from posix - Convert POSIX exports to Nushell."""

    @property
    def name(self) -> str:
        return "from posix"

    @property
    def description(self) -> str:
        return "Convert POSIX export statements to Nushell $env assignments"

    @property
    def category(self) -> str:
        return "formats"

    def examples(self) -> list[Example]:
        return [
            Example(
                example="'export FOO=bar' | from posix",
                description="Convert a single export statement",
                result="$env.FOO = bar",
            ),
            Example(
                example="'export FOO=bar && export BAZ=qux' | from posix",
                description="Convert multiple exports on the same line",
                result="$env.FOO = bar\n$env.BAZ = qux",
            ),
            Example(
                example="'export PATH=\"/usr/bin:/bin\"' | from posix",
                description="Convert export with quoted value",
                result="$env.PATH = /usr/bin:/bin",
            ),
        ]

    def run(self, value: Any, config: ConverterConfig | None = None) -> str:
        return convert(coerce_input(value), config)


class FromPosixPlugin:
    """The plugin as seen by the host: a version and its commands."""

    @property
    def version(self) -> str:
        return __version__

    def commands(self) -> list[PluginCommand]:
        return list(_BUILTIN_COMMANDS.values())


# Command registry
_BUILTIN_COMMANDS: dict[str, PluginCommand] = {
    "from posix": FromPosix(),
}


def get_command(name: str) -> PluginCommand:
    """Get a command by its name (e.g., 'from posix')."""
    if name in _BUILTIN_COMMANDS:
        return _BUILTIN_COMMANDS[name]
    raise ValueError(f"Unknown command: {name}")


def list_commands() -> list[str]:
    """List all built-in command names."""
    return list(_BUILTIN_COMMANDS.keys())
