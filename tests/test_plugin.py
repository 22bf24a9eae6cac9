"""Tests for the host adapter."""

import pytest

from fromposix import __version__
from fromposix.config import ConverterConfig
from fromposix.errors import InputTypeError
from fromposix.plugin import (
    FromPosix,
    FromPosixPlugin,
    coerce_input,
    get_command,
    list_commands,
)


def test_coerce_string():
    assert coerce_input("export A=1") == "export A=1"


def test_coerce_joins_fragments_with_newlines():
    assert coerce_input(["export A=1", "export B=2"]) == "export A=1\nexport B=2"
    assert coerce_input(("a", "b", "c")) == "a\nb\nc"


def test_coerce_accepts_iterators():
    fragments = iter(["export A=1", "export B=2"])
    assert coerce_input(fragments) == "export A=1\nexport B=2"


def test_coerce_single_fragment():
    assert coerce_input(["export A=1"]) == "export A=1"


def test_coerce_drops_non_string_fragments():
    assert coerce_input(["export A=1", 42, "export B=2"]) == "export A=1\nexport B=2"


def test_coerce_rejects_single_non_string_fragment():
    with pytest.raises(InputTypeError):
        coerce_input([42])


@pytest.mark.parametrize("value", [42, 1.5, None, {"A": "1"}, b"export A=1"])
def test_coerce_rejects_non_text(value):
    with pytest.raises(InputTypeError) as exc_info:
        coerce_input(value)

    err = exc_info.value
    assert err.message == "Input must be a string"
    assert err.label == "expected string input"
    assert err.type_name == type(value).__name__
    assert err.exit_code == 2


def test_command_metadata():
    cmd = FromPosix()
    assert cmd.name == "from posix"
    assert cmd.category == "formats"
    assert cmd.signature == [("string", "string")]
    assert "$env" in cmd.description


def test_examples_match_real_output():
    """Every documented example must be what the command produces."""
    cmd = FromPosix()
    examples = cmd.examples()
    assert len(examples) == 3

    for ex in examples:
        piped, _, command = ex.example.rpartition(" | ")
        assert command == cmd.name
        assert cmd.run(piped[1:-1]) == ex.result


def test_run_joins_fragments():
    cmd = FromPosix()
    assert cmd.run(["export A=1", "export B=2"]) == "$env.A = 1\n$env.B = 2"


def test_run_uses_config():
    cmd = FromPosix()
    config = ConverterConfig(prefix="$env.x")
    assert cmd.run("export A=1", config) == "$env.x.A = 1"


def test_run_rejects_non_text():
    with pytest.raises(InputTypeError):
        FromPosix().run(123)


def test_registry():
    assert list_commands() == ["from posix"]
    assert isinstance(get_command("from posix"), FromPosix)

    with pytest.raises(ValueError, match="Unknown command"):
        get_command("to posix")


def test_plugin():
    plugin = FromPosixPlugin()
    assert plugin.version == __version__
    assert [c.name for c in plugin.commands()] == ["from posix"]
