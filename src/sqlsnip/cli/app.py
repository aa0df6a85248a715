import logging
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from sqlsnip import __version__
from sqlsnip.cli.psql import psql_available, psql_executable, run_psql
from sqlsnip.core.source import snip
from sqlsnip.errors import SqlsnipError

app = typer.Typer(
    name="sqlsnip",
    help="Prefix a snippet of a SQL file with drop statements for the objects it creates.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"sqlsnip {__version__}")
        raise typer.Exit()


@app.command(no_args_is_help=True, context_settings={"help_option_names": ["-h", "--help"]})
def run(
    file: Annotated[str, typer.Argument(help="SQL source file.")],
    start: Annotated[int | None, typer.Argument(help="First line of the snippet (inclusive).")] = None,
    stop: Annotated[int | None, typer.Argument(help="Last line of the snippet (inclusive).")] = None,
    search_path: Annotated[
        str | None,
        typer.Option("--search-path", "-s", help="Schema to use. An empty string disables the search path."),
    ] = None,
    interactive: Annotated[
        bool, typer.Option("--interactive", "-i", help="Stop on the first error in interactive psql.")
    ] = False,
    source: Annotated[bool, typer.Option(help="Print the snippet after the drop statements.")] = True,
    exec_database: Annotated[
        str | None, typer.Option("--exec", "-x", help="Run the output in this database using psql.")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log to stderr.")] = False,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = None,
) -> None:
    """Generate drop statements for FILE, optionally limited to lines START..STOP."""
    _configure_logging(verbose)

    try:
        stmts = snip(
            file,
            start,
            stop,
            search_path=search_path,
            interactive=interactive,
            include_source=source,
        )
    except ValidationError as e:
        err_console.print(f"[red]Invalid line range: {escape(e.errors()[0]['msg'])}[/red]")
        raise typer.Exit(1) from e
    except SqlsnipError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e

    if exec_database is None:
        for stmt in stmts:
            typer.echo(stmt)
        return

    if not psql_available():
        err_console.print(f"[red]{escape(psql_executable())} is not installed or not in PATH.[/red]")
        raise typer.Exit(1)
    returncode = run_psql(exec_database, stmts)
    if returncode != 0:
        raise typer.Exit(returncode)


def main() -> None:
    app()
