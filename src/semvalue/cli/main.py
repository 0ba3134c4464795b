"""Command-line interface for semvalue."""

from typing import Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape
from rich.table import Table

from ..identifiers import is_valid_pre_release_identifier
from ..log import LogLevel, get_logger, setup_logging
from ..semantic_version import SemanticVersion
from ._helpers import (
    console,
    print_error,
    print_success,
    print_validation_errors,
)

app = typer.Typer(help="Render and check semantic versions")
logger = get_logger(__name__)

NumberArgument = Annotated[int, typer.Argument(..., help="Version number")]


@app.callback()
def main(
    log_level: Annotated[
        LogLevel,
        typer.Option(
            ...,
            "--log-level",
            envvar="SEMVALUE_LOG_LEVEL",
            case_sensitive=False,
            help="Log level",
        ),
    ] = LogLevel.WARNING,
) -> None:
    """Render and check semantic versions."""
    setup_logging(log_level)


@app.command()
def render(
    major: NumberArgument,
    minor: NumberArgument,
    patch: NumberArgument,
    pre_release: Annotated[
        list[str] | None,
        typer.Option(
            ..., "--pre", "-p", help="Pre-release identifier (repeat for each)"
        ),
    ] = None,
    build: Annotated[
        list[str] | None,
        typer.Option(
            ..., "--build", "-b", help="Build metadata identifier (repeat for each)"
        ),
    ] = None,
) -> None:
    """Print the string form of a version.

    Examples:
        # 1.2.3
        semvalue render 1 2 3

        # 2.0.0-rc.1+001
        semvalue render 2 0 0 --pre rc --pre 1 --build 001
    """
    try:
        version = SemanticVersion(
            major, minor, patch, pre_release=pre_release or (), build=build or ()
        )
    except ValidationError as e:
        print_validation_errors(e)
        raise typer.Exit(1) from e

    logger.info("version_rendered", version=str(version))
    console.print(escape(str(version)), highlight=False)


@app.command()
def check(
    identifiers: Annotated[
        list[str], typer.Argument(..., help="Pre-release identifiers to check")
    ],
) -> None:
    """Check identifiers against the pre-release grammar."""
    table = Table(title="Pre-release Identifiers")
    table.add_column("Identifier", style="cyan")
    table.add_column("Status")

    invalid = 0
    for identifier in identifiers:
        if is_valid_pre_release_identifier(identifier):
            status = "[green]✓ valid[/green]"
        else:
            status = "[red]✗ invalid[/red]"
            invalid += 1
        table.add_row(escape(repr(identifier)), status)

    console.print(table)

    if invalid:
        logger.info("identifiers_rejected", count=invalid)
        print_error(f"{invalid} of {len(identifiers)} identifiers are invalid")
        raise typer.Exit(1)

    print_success(f"All {len(identifiers)} identifiers are valid")
