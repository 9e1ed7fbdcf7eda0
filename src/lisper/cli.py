"""
Lisper CLI.

A thin host around the core pipeline: evaluate, tokenize, or parse source
given on the command line (or ``-`` for stdin), and list the built-ins.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.table import Table

from lisper.core.config import DEFAULT_CONFIG_FILE, LisperConfig, load_config
from lisper.core.errors import LisperError
from lisper.core.lang import parse_all, run, tokenize

app = typer.Typer(help="Evaluate Lisper S-expressions", no_args_is_help=True)
console = Console()

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Print the installed version and exit."""
    if value:
        from lisper import __version__

        typer.echo(f"lisper {__version__}")
        raise typer.Exit()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger("lisper").setLevel(level)


def _read_source(source: str) -> str:
    if source == "-":
        return typer.get_text_stream("stdin").read()
    return source


def _fail(error: LisperError) -> NoReturn:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


def _fail_too_deep() -> NoReturn:
    _fail(LisperError("Expression nested too deeply"))


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Path = typer.Option(
        Path(DEFAULT_CONFIG_FILE), "--config", "-c", help="Path to lisper.toml"
    ),
    no_aliases: bool = typer.Option(
        False, "--no-aliases", help="Do not bind add/sub/mul/div/mod"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Evaluate Lisper S-expressions."""
    try:
        settings = load_config(config)
    except LisperError as e:
        _fail(e)

    if no_aliases:
        settings = settings.model_copy(update={"aliases": False})

    _configure_logging("DEBUG" if verbose else settings.log_level.value)
    logger.debug("Loaded settings from %s: %s", config, settings)
    ctx.obj = settings


@app.command(name="eval")
def eval_command(
    ctx: typer.Context,
    source: str = typer.Argument(..., help="Source text, or - to read stdin"),
) -> None:
    """Evaluate every top-level form and print each result."""
    settings: LisperConfig = ctx.obj
    try:
        results = run(_read_source(source), settings.create_env())
        rendered = [str(result) for result in results]
    except LisperError as e:
        _fail(e)
    except RecursionError:
        _fail_too_deep()

    for line in rendered:
        typer.echo(line)


@app.command(name="tokens")
def tokens_command(
    source: str = typer.Argument(..., help="Source text, or - to read stdin"),
) -> None:
    """Print the token list."""
    typer.echo(" ".join(tokenize(_read_source(source))))


@app.command(name="parse")
def parse_command(
    source: str = typer.Argument(..., help="Source text, or - to read stdin"),
) -> None:
    """Print the rendering of each parsed form."""
    try:
        forms = parse_all(tokenize(_read_source(source)))
        rendered = [str(form) for form in forms]
    except LisperError as e:
        _fail(e)
    except RecursionError:
        _fail_too_deep()

    for line in rendered:
        typer.echo(line)


@app.command(name="builtins")
def builtins_command(ctx: typer.Context) -> None:
    """List the bound built-in names."""
    settings: LisperConfig = ctx.obj
    env = settings.create_env()

    table = Table(title="Built-ins")
    table.add_column("Name", style="cyan")
    table.add_column("Function")
    for name in env.names():
        table.add_row(name, env.data[name].__name__)
    console.print(table)


def main() -> None:
    """Console script entry point."""
    app()
