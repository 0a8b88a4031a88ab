"""CLI for the strcalc string calculator.

Usage:
    python -m strcalc add "1,2,3"                  # Print the sum
    python -m strcalc add "//[;][,]\\n1;2,3"        # Custom delimiters (\\n is decoded)
    python -m strcalc add --stdin < numbers.txt    # Read the input from stdin
    python -m strcalc add "1,-2" --json            # Machine-readable result
    python -m strcalc explain "1,-2,1001"          # Per-token breakdown
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from strcalc.calculator import StringCalculator
from strcalc.environment import load_settings
from strcalc.errors import CalculatorError
from strcalc.models import TokenStatus

app = typer.Typer(
    name="strcalc",
    help="Sum the numbers in a delimited string",
    no_args_is_help=True,
)
console = Console(stderr=True)

_STATUS_STYLES = {
    TokenStatus.KEPT: "green",
    TokenStatus.DROPPED: "dim",
    TokenStatus.NEGATIVE: "red",
    TokenStatus.INVALID: "yellow",
}


def _setup_logging(verbose: bool) -> None:
    """Route library debug logging through Rich when --verbose is given."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _read_input(numbers: Optional[str], stdin: bool) -> str:
    """Resolve the raw input from the argument or stdin.

    Arguments have literal '\\n' decoded to a newline so headers can be typed
    in a shell. Stdin is taken as-is, minus one trailing newline.
    """
    if stdin:
        text = sys.stdin.read()
        return text[:-1] if text.endswith("\n") else text
    if numbers is None:
        console.print("[red]Provide NUMBERS or --stdin[/red]")
        raise typer.Exit(1)
    return numbers.replace("\\n", "\n")


def _build_calculator(legacy: bool, max_value: Optional[int]) -> StringCalculator:
    """Settings from the environment, overridden by command-line options."""
    try:
        settings = load_settings()
    except ValueError as e:
        console.print(f"[red]Invalid environment:[/red] {escape(str(e))}")
        raise typer.Exit(2)
    if legacy:
        settings.legacy_delimiters = True
    if max_value is not None:
        settings.max_value = max_value
    return settings.build_calculator()


@app.command("add")
def cmd_add(
    numbers: Optional[str] = typer.Argument(None, help="Numbers to sum, e.g. '1,2' or '//[;]\\n1;2'"),
    stdin: bool = typer.Option(False, "--stdin", help="Read the input from stdin"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
    legacy: bool = typer.Option(False, "--legacy", help="Accept '//;\\n' single-delimiter headers"),
    max_value: Optional[int] = typer.Option(None, "--max-value", help="Ignore numbers above this (default 1000)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Sum the numbers in NUMBERS."""
    _setup_logging(verbose)
    calc = _build_calculator(legacy, max_value)
    result = calc.evaluate(_read_input(numbers, stdin))

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    elif result.ok:
        typer.echo(str(result.total))
    else:
        console.print(f"[red]Error ({result.verdict}):[/red] {escape(str(result.error))}")

    if not result.ok:
        raise typer.Exit(1)


@app.command("explain")
def cmd_explain(
    numbers: Optional[str] = typer.Argument(None, help="Numbers to break down"),
    stdin: bool = typer.Option(False, "--stdin", help="Read the input from stdin"),
    legacy: bool = typer.Option(False, "--legacy", help="Accept '//;\\n' single-delimiter headers"),
    max_value: Optional[int] = typer.Option(None, "--max-value", help="Ignore numbers above this (default 1000)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Show what happens to each token of NUMBERS."""
    _setup_logging(verbose)
    calc = _build_calculator(legacy, max_value)
    text = _read_input(numbers, stdin)

    try:
        reports = calc.explain(text)
    except CalculatorError as e:
        console.print(f"[red]Error ({e.kind.value}):[/red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(title="Tokens", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Token", min_width=10)
    table.add_column("Value", justify="right")
    table.add_column("Status")

    for i, r in enumerate(reports, 1):
        style = _STATUS_STYLES[r.status]
        value = "--" if r.value is None else str(r.value)
        table.add_row(str(i), escape(repr(r.token)), value, f"[{style}]{r.status.value}[/{style}]")

    console.print()
    console.print(table)

    result = calc.summarize(text, reports)
    if result.ok:
        console.print(f"Sum: [bold]{result.total}[/bold]")
    else:
        console.print(f"[red]Error ({result.verdict}):[/red] {escape(str(result.error))}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
