"""from-posix - convert POSIX export statements to Nushell $env assignments."""

from fromposix._version import __version__
from fromposix.converter import convert
from fromposix.emitter import exports_to_nushell, render_value
from fromposix.parser import Export, decode_value, parse_posix_exports

__all__ = [
    "__version__",
    "convert",
    "Export",
    "parse_posix_exports",
    "decode_value",
    "exports_to_nushell",
    "render_value",
]
