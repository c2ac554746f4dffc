"""CLI for stackcalc.

Usage:
    python -m stackcalc eval "(2+3)*4"          # Evaluate and print the result
    python -m stackcalc eval "1/0" --strict-division
    python -m stackcalc check "1--2"            # Show each validation pass
    python -m stackcalc serve --port 8080       # Run the HTTP service
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stackcalc.config import ConfigError, Settings, load_settings
from stackcalc.engine import calc
from stackcalc.errors import CalcError
from stackcalc.models import format_result
from stackcalc.validate import check_operator_adjacency, validate_brackets, validate_expression

app = typer.Typer(
    name="stackcalc",
    help="Stack-based arithmetic expression calculator",
    no_args_is_help=True,
)
console = Console(stderr=True)
out = Console()


def _settings() -> Settings:
    try:
        return load_settings()
    except ConfigError as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command("eval")
def cmd_eval(
    expression: str = typer.Argument(help="Expression to evaluate, e.g. '(2+3)*4'"),
    strict_division: Optional[bool] = typer.Option(
        None, "--strict-division/--lenient-division",
        help="Report division by zero as its own error",
    ),
) -> None:
    """Evaluate an expression and print the result."""
    settings = _settings()
    strict = settings.strict_division if strict_division is None else strict_division
    try:
        value = calc(expression, strict_division=strict)
    except CalcError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(1)
    out.print(format_result(value), highlight=False)


_PASSES: list[tuple[str, Callable[[str], None]]] = [
    ("structure", validate_expression),
    ("brackets", validate_brackets),
    ("adjacency", check_operator_adjacency),
]


@app.command("check")
def cmd_check(
    expression: str = typer.Argument(help="Expression to validate"),
) -> None:
    """Run each validation pass on its own and show which ones reject the input."""
    table = Table(title=f"Validation: {escape(expression)}", show_header=True, header_style="bold")
    table.add_column("Pass", style="dim", min_width=10)
    table.add_column("Result", min_width=6)
    table.add_column("Message")

    failed = False
    for name, check in _PASSES:
        try:
            check(expression)
        except CalcError as e:
            failed = True
            table.add_row(name, "[red]fail[/red]", e.message)
        else:
            table.add_row(name, "[green]ok[/green]", "")

    out.print(table)
    if failed:
        raise typer.Exit(1)


@app.command("serve")
def cmd_serve(
    host: Optional[str] = typer.Option(None, "--host", help="Listen address (default: STACKCALC_HOST or 0.0.0.0)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Listen port (default: STACKCALC_PORT or 8080)"),
    strict_division: Optional[bool] = typer.Option(
        None, "--strict-division/--lenient-division",
        help="Report division by zero as its own error",
    ),
) -> None:
    """Run the HTTP calculate endpoint."""
    # Imported here so eval/check don't pay for Flask
    from stackcalc.server import serve

    settings = _settings()
    overrides = {}
    if host is not None:
        overrides["host"] = host
    if port is not None:
        overrides["port"] = port
    if strict_division is not None:
        overrides["strict_division"] = strict_division
    serve(replace(settings, **overrides))


if __name__ == "__main__":
    app()
