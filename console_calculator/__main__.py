"""CLI for console_calculator.

Usage:
    python -m console_calculator -e "2 + 3 * 4"    # Evaluate an equation
    python -m console_calculator -e "1/0"          # Errors exit with status 1
    python -m console_calculator -e "(1+2)" -t     # Print the parsed tree too
    python -m console_calculator --version         # Print the version
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from console_calculator import __version__
from console_calculator.errors import CalculatorError
from console_calculator.evaluator import evaluate
from console_calculator.models import format_value
from console_calculator.parser import parse

app = typer.Typer(
    name="calc",
    help="Calculator",
    add_completion=False,
)
console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    """Route library logging through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def main(
    equation: Optional[str] = typer.Option(None, "--equation", "-e", help="Equation"),
    version: bool = typer.Option(False, "--version", "-v", help="Prints the version number"),
    tree: bool = typer.Option(False, "--tree", "-t", help="Also print the parsed expression tree"),
    verbose: bool = typer.Option(False, "--verbose", envvar="CALC_VERBOSE", help="Log parsing and reduction steps"),
) -> None:
    """Evaluate an arithmetic equation."""
    _configure_logging(verbose)

    if version:
        typer.echo(__version__)
    if equation is None:
        if not version:
            console.print("[red]Specify --equation or --version[/red]")
            raise typer.Exit(1)
        return

    try:
        parsed = parse(equation)
        if tree:
            typer.echo(parsed.inner_text())
        result = evaluate(parsed)
    except CalculatorError as err:
        console.print(f"[red]Error:[/red] {err}", highlight=False)
        raise typer.Exit(1)

    typer.echo(format_value(result))


if __name__ == "__main__":
    app()
