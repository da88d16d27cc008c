"""Command-line interface for compactnum."""

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from compactnum.config import CompactNumberOptions
from compactnum.errors import CompactNumberError
from compactnum.formatter import compact_number
from compactnum.locales import ALL_LOCALES
from compactnum.parser import uncompact_number
from compactnum.store import store

app = typer.Typer(
    name="compactnum",
    help="Format numbers as locale-aware compact strings and parse them back",
    add_completion=False,
)

SAMPLE_VALUES = (1234, 1_500_000, 2_000_000_000)


def _register_bundled() -> None:
    store.register(ALL_LOCALES)


@app.command(name="format")
def format_cmd(
    value: Annotated[str, typer.Argument(help="Number to format")],
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", "-l", help="Locale key, e.g. en, de, es-MX"),
    ] = None,
    style: Annotated[
        Optional[str],
        typer.Option("--style", "-s", help="Display style (short, long)"),
    ] = None,
    min_fraction_digits: Annotated[
        Optional[int],
        typer.Option("--min-fraction-digits", help="Minimum fraction digits"),
    ] = None,
    max_fraction_digits: Annotated[
        Optional[int],
        typer.Option("--max-fraction-digits", "-d", help="Maximum fraction digits"),
    ] = None,
    rounding_mode: Annotated[
        Optional[str],
        typer.Option("--rounding-mode", "-r", help="Rounding mode (round, floor, ceil)"),
    ] = None,
    threshold: Annotated[
        Optional[float],
        typer.Option("--threshold", help="Tier promotion threshold"),
    ] = None,
) -> None:
    """Format a number in compact notation."""
    _register_bundled()
    options = CompactNumberOptions.from_env()

    try:
        result = compact_number(
            value,
            options,
            locale=locale,
            style=style,
            minimum_fraction_digits=min_fraction_digits,
            maximum_fraction_digits=max_fraction_digits,
            rounding_mode=rounding_mode,
            threshold=threshold,
        )
    except CompactNumberError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(result)


@app.command(name="parse")
def parse_cmd(
    text: Annotated[str, typer.Argument(help="Compact string to parse, e.g. '1.2K'")],
    locale: Annotated[
        str,
        typer.Option("--locale", "-l", help="Locale whose symbols to recognize"),
    ] = "en",
) -> None:
    """Parse a compact string back into a number."""
    _register_bundled()

    try:
        number = uncompact_number(text, locale)
    except CompactNumberError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(str(int(number)) if number.is_integer() else str(number))


@app.command(name="locales")
def locales_cmd(
    style: Annotated[
        str,
        typer.Option("--style", "-s", help="Display style for the samples (short, long)"),
    ] = "short",
) -> None:
    """List registered locales with sample renderings."""
    _register_bundled()
    console = Console()

    table = Table(show_header=True, header_style="bold")
    table.add_column("Locale", style="cyan")
    for value in SAMPLE_VALUES:
        table.add_column(f"{value:,}", justify="right")

    try:
        for key in store.list_registered_keys():
            table.add_row(
                key,
                *(compact_number(value, locale=key, style=style) for value in SAMPLE_VALUES),
            )
    except CompactNumberError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
