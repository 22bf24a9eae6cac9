"""Emitter - renders parsed exports as Nushell environment assignments."""

from typing import Iterable

from fromposix.parser import Export

DEFAULT_PREFIX = "$env"

# Characters that force a value into double quotes
UNSAFE_CHARS = frozenset(" \"'$\\")


def render_value(value: str) -> str:
    """Render a decoded value as a Nushell literal.

    Args:
        value: The decoded variable value.

    Returns:
        The bare value when it is safe, otherwise a double-quoted string.
    """
    if not value:
        return '""'
    if any(ch in UNSAFE_CHARS for ch in value):
        # Backslashes first so the quote escapes are not doubled again
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return value


def export_to_nushell(export: Export, prefix: str = DEFAULT_PREFIX) -> str:
    """Render one export as ``<prefix>.<name> = <value>``."""
    return f"{prefix}.{export.name} = {render_value(export.value)}"


def exports_to_nushell(exports: Iterable[Export], prefix: str = DEFAULT_PREFIX) -> str:
    """Render exports one per line, in order."""
    return "\n".join(export_to_nushell(export, prefix) for export in exports)
