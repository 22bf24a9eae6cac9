"""from-posix CLI Main Entry Point

Converts POSIX shell export statements into Nushell $env assignments.

Usage:
    from-posix < env.sh              # Convert stdin
    from-posix a.sh b.sh             # Convert files (joined with newlines)
    from-posix -o env.nu env.sh      # Write result to a file
    from-posix -p '$env.config' ...  # Use a different namespace prefix
    from-posix --examples            # Show usage examples
    from-posix --version             # Show version
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from ._version import __version__
from .config import resolve_config
from .errors import InputReadError, handle_error
from .plugin import PluginCommand, get_command
from .utils import setup_logging

log = logging.getLogger(__name__)

COMMAND_NAME = "from posix"


def read_inputs(files: List[Path]) -> List[str]:
    """Read each input file as one text fragment."""
    fragments = []
    for path in files:
        if not path.is_file():
            raise InputReadError(path, "File not found")
        try:
            fragments.append(path.read_text(encoding="utf-8"))
        except UnicodeDecodeError as exc:
            raise InputReadError(path, "Not valid UTF-8") from exc
        except OSError as exc:
            raise InputReadError(path, exc.strerror or "Cannot read file") from exc
    return fragments


def print_examples(command: PluginCommand) -> None:
    """Print a command's examples as a table."""
    table = Table(title=f"{command.name} examples")
    table.add_column("Description")
    table.add_column("Example", style="cyan")
    table.add_column("Result", style="green")

    for ex in command.examples():
        table.add_row(ex.description, ex.example, ex.result or "")

    Console().print(table)


typer_app = typer.Typer()


@typer_app.command()
def cli(
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    examples: bool = typer.Option(
        False, "--examples", help="Show usage examples and exit."
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write the result to a file instead of stdout."
    ),
    prefix: Optional[str] = typer.Option(
        None, "-p", "--prefix", help="Namespace prefix for assignments (default: $env)."
    ),
    config_path: Optional[Path] = typer.Option(
        None, "-c", "--config", help="Path to a .fromposix.yaml file."
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logging."),
    files: Optional[List[Path]] = typer.Argument(
        None, help="Files to convert. Reads stdin when omitted."
    ),
) -> None:
    """Convert POSIX export statements to Nushell $env assignments.

    \b
    Examples:
        echo 'export FOO=bar' | from-posix
        from-posix .env
        from-posix -o env.nu .env secrets.sh
    """
    if version:
        typer.echo(f"from-posix {__version__}")
        raise typer.Exit()

    setup_logging(verbose)
    command = get_command(COMMAND_NAME)

    if examples:
        print_examples(command)
        raise typer.Exit()

    try:
        config = resolve_config(config_path, prefix)

        if files:
            text: str | List[str] = read_inputs(files)
        else:
            log.info("Reading from stdin")
            text = sys.stdin.read()

        result = command.run(text, config)

        if output is not None:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(result, encoding="utf-8")
            typer.echo(f"Wrote Nushell assignments to {output}")
        elif result:
            typer.echo(result)
    except Exception as exc:
        handle_error(exc)


def app() -> None:
    """Entry point for the CLI."""
    typer_app()


if __name__ == "__main__":
    app()
