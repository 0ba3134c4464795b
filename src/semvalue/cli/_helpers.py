"""Console output helpers for the CLI."""

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

console = Console()
error_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]Error:[/red] {message}")


def print_validation_errors(error: ValidationError) -> None:
    """Print each error of a validation failure on its own line.

    Args:
        error: The pydantic validation error to report.
    """
    for detail in error.errors():
        field = ".".join(str(loc) for loc in detail["loc"])
        print_error(escape(f"{field}: {detail['msg']}"))
