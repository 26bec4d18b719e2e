"""Command-line interface for Markup Bridge."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from markup_bridge import __version__
from markup_bridge.config import get_settings
from markup_bridge.core.engines import get_engines
from markup_bridge.core.formatter import Formatter, FormattingError
from markup_bridge.core.scanner import has_legacy_codes, has_markup_tags, split_segments
from markup_bridge.formatting.ir import StyledText

app = typer.Typer(
    name="markup-bridge",
    help="Convert legacy color codes and tag markup into one styled form.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Markup Bridge v{__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Send package debug logs to the console when verbose."""
    if not verbose:
        return
    logger = logging.getLogger("markup_bridge")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_path=False))
    logger.setLevel(logging.DEBUG)


def runs_table(styled: StyledText) -> Table:
    """Build a table describing each run of styled text."""
    table = Table("Text", "Color", "Decorations")
    for run in styled.runs:
        color = "-"
        if run.color is not None:
            named = run.color.named
            color = f"{named.tag_name} ({run.color.hex})" if named else run.color.hex
        decorations = ", ".join(d.tag_name for d in run.style.decorations.split())
        table.add_row(Text(repr(run.text)), color, decorations or "-")
    return table


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Reconcile legacy color codes and tag markup."""


@app.command()
def convert(
    text: Optional[str] = typer.Argument(
        None,
        help="Text to convert",
    ),
    input_file: Optional[Path] = typer.Option(
        None,
        "--input",
        "-i",
        exists=True,
        dir_okay=False,
        help="Convert each line of a UTF-8 file instead",
    ),
    formatter_name: Optional[str] = typer.Option(
        None,
        "--formatter",
        "-f",
        help="Formatter to use: markup, legacy or universal (default: universal)",
    ),
    runs: bool = typer.Option(
        False,
        "--runs",
        "-r",
        help="Show a table of the styled runs",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    Print the markup a formatter produces.

    Examples:

        markup-bridge convert "&cHello &#fcfcfcWorld"

        markup-bridge convert "<bold>hi</bold> &cworld" --runs

        markup-bridge convert --input names.txt -f legacy
    """
    setup_logging(verbose)
    settings = get_settings()

    try:
        formatter = Formatter.from_name(formatter_name or settings.default_formatter)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if input_file is not None:
        lines = input_file.read_text(encoding="utf-8").splitlines()
    elif text is not None:
        lines = [text]
    else:
        console.print("[red]Error:[/red] Provide TEXT or --input")
        raise typer.Exit(1)

    if verbose:
        console.print(f"[blue]Formatter:[/blue] {formatter.display_name}")

    engines = get_engines()
    for line in lines:
        try:
            markup = formatter.to_markup(line, engines=engines)
            styled = formatter.format(line, engines=engines)
        except FormattingError as e:
            console.print(f"[red]Error:[/red] {e}")
            if verbose:
                console.print_exception()
            raise typer.Exit(1)

        console.print(markup, markup=False, highlight=False, soft_wrap=True)
        if runs:
            console.print(runs_table(styled))


@app.command()
def scan(
    text: str = typer.Argument(..., help="Text to scan"),
) -> None:
    """Report which dialects a string contains and how it would be split."""
    engines = get_engines()
    tags = has_markup_tags(text)
    legacy = has_legacy_codes(text, engines.legacy_pattern)

    console.print(f"Markup tags: {'yes' if tags else 'no'}")
    console.print(f"Legacy codes: {'yes' if legacy else 'no'}")

    table = Table("Kind", "Start", "End", "Text")
    for segment in split_segments(text):
        kind = "tag" if segment.is_tag else "text"
        table.add_row(kind, str(segment.start), str(segment.end), Text(repr(segment.text)))
    console.print(table)


if __name__ == "__main__":
    app()
