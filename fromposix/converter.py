"""POSIX export to Nushell conversion."""

from __future__ import annotations

from fromposix.config import ConverterConfig
from fromposix.emitter import exports_to_nushell
from fromposix.parser import parse_posix_exports


def convert(text: str, config: ConverterConfig | None = None) -> str:
    """Convert POSIX ``export`` statements to Nushell ``$env`` assignments.

    Unrecognised input is dropped rather than reported, so this never fails
    for string input.

    Example:
        >>> convert("export FOO=bar && export MSG='hi there'")
        '$env.FOO = bar\\n$env.MSG = "hi there"'
    """
    config = config or ConverterConfig()
    return exports_to_nushell(parse_posix_exports(text), prefix=config.prefix)
