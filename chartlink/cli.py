"""CLI entry points: `chartlink url` and `chartlink encode`."""

from __future__ import annotations

import logging
import webbrowser
from enum import StrEnum
from pathlib import Path

import typer
from rich.console import Console

from chartlink.config import load_config
from chartlink.core import Diag
from chartlink.data.encoding import Encoding, encode
from chartlink.definition import build_chart, load_definition

app = typer.Typer(name="chartlink", help="Build chart image URLs from chart definitions.")
console = Console()


class Scheme(StrEnum):
    SIMPLE = "simple"
    EXTENDED = "extended"


_SCHEMES = {Scheme.SIMPLE: Encoding.SIMPLE, Scheme.EXTENDED: Encoding.EXTENDED}


@app.callback()
def _setup(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def _print_diagnostics(diagnostics: list[Diag]) -> None:
    for d in diagnostics:
        console.print(f"[red]Error:[/red] {d.message}")
        if d.hint:
            console.print(f"  Hint: {d.hint}")


@app.command()
def url(
    path: Path = typer.Argument(help="Chart definition (YAML or JSON)"),
    open_browser: bool = typer.Option(False, "--open", help="Open the URL in a browser"),
) -> None:
    """Print the chart URL for a definition file."""
    config = load_config()

    loaded = load_definition(path)
    if not loaded.ok or loaded.data is None:
        _print_diagnostics(loaded.diagnostics)
        raise typer.Exit(1)

    built = build_chart(loaded.data, width=config.default_width, height=config.default_height)
    if not built.ok or built.data is None:
        _print_diagnostics(built.diagnostics)
        raise typer.Exit(1)

    chart_url = built.data.get_url(config.api_base)
    # soft_wrap keeps the URL on one line for copy/paste
    console.print(chart_url, soft_wrap=True, markup=False, highlight=False)

    if open_browser:
        webbrowser.open(chart_url)


@app.command("encode")
def encode_values(
    values: list[float] = typer.Argument(help="Values to encode"),
    scheme: Scheme | None = typer.Option(None, "--scheme", "-s", help="Encoding scheme"),
    min_value: float | None = typer.Option(None, "--min", help="Lower bound of the value domain"),
    max_value: float | None = typer.Option(None, "--max", help="Upper bound of the value domain"),
) -> None:
    """Encode a series of numbers as a chart data token."""
    # Typer parses every value as float; keep whole numbers as ints for the default scheme
    numbers = [int(v) if v.is_integer() else v for v in values]
    token = encode(numbers, scheme=_SCHEMES[scheme] if scheme else None, min_value=min_value, max_value=max_value)
    console.print(token, soft_wrap=True, markup=False, highlight=False)


def main() -> None:
    app()
