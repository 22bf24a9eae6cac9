"""POSIX export scanner.

Splits shell text into export statements and pulls ``name=value``
assignments out of them. Only the narrow ``export`` grammar is understood:

    export FOO=bar
    export FOO=bar && export BAZ=qux
    export FOO="hello world" BAR='literal \\n'

Anything else (comments, other commands, variable expansion) is skipped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

log = logging.getLogger(__name__)

EXPORT_KEYWORD = "export"
STATEMENT_SEPARATOR = "&&"

QUOTE_CHARS = ('"', "'")
TOKEN_SEPARATORS = (" ", "\t")

# Escapes recognised inside double quotes
DOUBLE_QUOTE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "t": "\t",
    "r": "\r",
}


@dataclass(frozen=True)
class Export:
    """A single exported variable."""

    name: str
    value: str  # decoded, quotes and escapes resolved


def parse_posix_exports(text: str) -> List[Export]:
    """Parse every export assignment found in ``text``.

    Args:
        text: Shell source, possibly multi-line.

    Returns:
        Exports in the order they appear, duplicates included.
    """
    exports: List[Export] = []

    for line in text.split("\n"):
        for segment in line.split(STATEMENT_SEPARATOR):
            statement = segment.strip()
            content = _export_content(statement)
            if content is None:
                if statement:
                    log.debug("Skipping non-export segment: %r", statement)
                continue
            exports.extend(parse_export_content(content))

    return exports


def _export_content(statement: str) -> str | None:
    """Return the text following the ``export`` keyword, or None."""
    if statement.startswith(EXPORT_KEYWORD + " "):
        return statement[len(EXPORT_KEYWORD) + 1 :].strip()
    if statement.startswith(EXPORT_KEYWORD) and len(statement) > len(EXPORT_KEYWORD):
        # export<TAB>FOO=bar, and also exportFOO=bar
        return statement[len(EXPORT_KEYWORD) :].strip()
    return None


def parse_export_content(content: str) -> List[Export]:
    """Tokenize the assignments of one export statement.

    Whitespace separates assignments unless it sits inside quotes. A quote
    closes only on the same quote character not preceded by a backslash.
    """
    exports: List[Export] = []
    token: List[str] = []
    quote_char: str | None = None

    for ch in content:
        if quote_char is None and ch in QUOTE_CHARS:
            quote_char = ch
            token.append(ch)
        elif quote_char is not None and ch == quote_char:
            if not (token and token[-1] == "\\"):
                quote_char = None
            token.append(ch)
        elif quote_char is None and ch in TOKEN_SEPARATORS:
            _flush_token(token, exports)
            token = []
        else:
            token.append(ch)

    _flush_token(token, exports)
    return exports


def _flush_token(token: List[str], exports: List[Export]) -> None:
    if not token:
        return
    assignment = "".join(token)
    name, sep, raw_value = assignment.partition("=")
    if not sep:
        log.debug("Ignoring token without '=': %r", assignment)
        return
    exports.append(Export(name=name, value=decode_value(raw_value)))


def decode_value(raw: str) -> str:
    """Decode a raw value token.

    Double-quoted values have their escapes decoded in a single pass,
    single-quoted values are taken literally, bare values are kept verbatim.
    """
    value = raw.strip()

    if len(value) >= 2 and value[0] == value[-1] == '"':
        return _decode_double_quoted(value[1:-1])
    if len(value) >= 2 and value[0] == value[-1] == "'":
        return value[1:-1]
    return value


def _decode_double_quoted(body: str) -> str:
    out: List[str] = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\" and i + 1 < len(body) and body[i + 1] in DOUBLE_QUOTE_ESCAPES:
            out.append(DOUBLE_QUOTE_ESCAPES[body[i + 1]])
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)
