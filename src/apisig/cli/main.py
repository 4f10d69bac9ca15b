"""apisig CLI - API method signature compiler.

This module provides the command-line interface for apisig, compiling
signature listings against Java sources and resolving type names.
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="apisig",
    help="Compile API method signatures into uniquely named method models",
    no_args_is_help=True,
)

# Rich console for formatted output
console = Console()
err_console = Console(stderr=True)

# Global verbose flag
_verbose: bool = False


def set_verbose(verbose: bool) -> None:
    """Set global verbose mode."""
    global _verbose
    _verbose = verbose


def print_exception(e: Exception) -> None:
    """Print exception details in verbose mode."""
    if _verbose:
        err_console.print("\n[dim]--- Traceback (verbose mode) ---[/dim]")
        err_console.print(f"[dim]{traceback.format_exc()}[/dim]")


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich at the configured level."""
    from apisig.core.config import get_config

    level = "DEBUG" if verbose else get_config().log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging and full tracebacks"),
    ] = False,
) -> None:
    """apisig CLI - API method signature compiler."""
    set_verbose(verbose)
    configure_logging(verbose)


@app.command()
def parse(
    signatures_file: Annotated[
        Path,
        typer.Argument(
            help="File with one method signature per line",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    target: Annotated[
        str,
        typer.Option("--target", "-t", help="Qualified name of the target type"),
    ],
    source: Annotated[
        Optional[Path],
        typer.Option(
            "--source",
            "-s",
            help="Java source directory declaring the target type",
            exists=True,
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output machine-readable JSON"),
    ] = False,
) -> None:
    """Compile a signature listing against a target type.

    Example:
        apisig parse signatures.txt --target com.example.Api --source src/main/java
    """
    from apisig.cli._helpers import build_context, load_signatures
    from apisig.cli._tables import build_methods_table
    from apisig.core.errors import ApiSignatureError
    from apisig.core.serializer import serialize
    from apisig.parser import ApiMethodParser

    signatures = load_signatures(signatures_file)
    context = build_context(source)

    try:
        parser = ApiMethodParser(target, context=context)
        models = parser.parse(signatures)
    except ApiSignatureError as e:
        err_console.print(f"[red]Error:[/red] {e.message}")
        if e.details:
            err_console.print(f"  {e.details}")
        print_exception(e)
        raise typer.Exit(1)

    if json_output:
        typer.echo(serialize(models))
        return

    console.print(build_methods_table(models, parser.target.name))
    console.print(f"[green]✓[/green] {len(models)} methods compiled")


@app.command()
def resolve(
    type_name: Annotated[str, typer.Argument(help="Type name as written in a signature")],
    source: Annotated[
        Optional[Path],
        typer.Option(
            "--source",
            "-s",
            help="Java source directory to resolve against",
            exists=True,
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
        ),
    ] = None,
) -> None:
    """Resolve a type name the way signatures resolve it.

    Example:
        apisig resolve "String[]"
    """
    from apisig.cli._helpers import build_context
    from apisig.cli._tables import build_descriptor_table
    from apisig.core.errors import TypeResolutionError
    from apisig.resolution.base import TypeResolver

    resolver = TypeResolver.for_context(build_context(source))
    try:
        descriptor = resolver.resolve(type_name)
    except TypeResolutionError as e:
        err_console.print(f"[red]Error:[/red] {e.message}")
        print_exception(e)
        raise typer.Exit(1)

    console.print(build_descriptor_table(descriptor))


if __name__ == "__main__":
    app()
