"""string-extensions – CLI entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, MofNCompleteColumn
from rich.table import Table

from string_extensions.config import Settings, load_settings
from string_extensions.errors import InvalidArgumentError
from string_extensions.extensions import (
    add_char_at_position,
    capitalize,
    chars,
    chunk,
    decapitalize,
    is_palindrome,
    is_valid_email,
    replace_characters,
    replacing_occurrences,
    reversed_string,
    with_prefix,
    word_count,
)
from string_extensions.report import TextReport, inspect_lines, inspect_text

load_dotenv()

app = typer.Typer(
    name="string-extensions",
    help="Reverse, mask, chunk and validate strings from the command line.",
    add_completion=False,
)
console = Console()
log = logging.getLogger("string_extensions")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
) -> None:
    """Load settings and configure logging before any command runs."""
    try:
        settings = load_settings()
    except InvalidArgumentError as exc:
        console.print(f"[red]Configuration error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    level = logging.DEBUG if verbose else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    log.setLevel(level)
    log.debug("Loaded settings: %s", settings)
    ctx.obj = settings


def _echo(value: object) -> None:
    """Print a raw result without rich markup, emoji or highlighting."""
    console.print(value, markup=False, emoji=False, highlight=False, soft_wrap=True)


def _fail(exc: InvalidArgumentError) -> NoReturn:
    console.print(f"[red]Error: {escape(exc.reason)}[/red]", highlight=False)
    raise typer.Exit(code=1)


@app.command()
def reverse(text: str = typer.Argument(..., help="Text to reverse.")) -> None:
    """Reverse TEXT by user-perceived character."""
    _echo(reversed_string(text))


@app.command()
def prefix(
    text: str = typer.Argument(..., help="Text to prefix."),
    prefix_: str = typer.Argument(..., metavar="PREFIX", help="Prefix to add when missing."),
) -> None:
    """Prepend PREFIX to TEXT unless it is already there."""
    _echo(with_prefix(text, prefix_))


@app.command()
def words(text: str = typer.Argument(..., help="Text to count words in.")) -> None:
    """Count the words in TEXT."""
    _echo(word_count(text))


@app.command()
def replace(
    text: str = typer.Argument(..., help="Text to search."),
    search: str = typer.Argument(..., help="Regular expression to replace."),
    replacement: str = typer.Argument(..., help="Literal replacement."),
) -> None:
    """Replace every match of the SEARCH pattern in TEXT."""
    try:
        _echo(replacing_occurrences(text, search, replacement))
    except InvalidArgumentError as exc:
        _fail(exc)


@app.command("chars")
def chars_(text: str = typer.Argument(..., help="Text to split.")) -> None:
    """Print each user-perceived character of TEXT on its own line."""
    for ch in chars(text):
        _echo(ch)


@app.command("capitalize")
def capitalize_(text: str = typer.Argument(..., help="Text to capitalize.")) -> None:
    """Upper-case the first character of TEXT."""
    _echo(capitalize(text))


@app.command("decapitalize")
def decapitalize_(text: str = typer.Argument(..., help="Text to decapitalize.")) -> None:
    """Lower-case the first character of TEXT."""
    _echo(decapitalize(text))


@app.command()
def email(text: str = typer.Argument(..., help="Address to check.")) -> None:
    """Check TEXT is formatted like an e-mail address (exit code 1 if not)."""
    if is_valid_email(text):
        console.print("[green]valid[/green]")
        return
    console.print("[red]invalid[/red]")
    raise typer.Exit(code=1)


@app.command()
def palindrome(text: str = typer.Argument(..., help="Text to check.")) -> None:
    """Check TEXT reads the same backwards (exit code 1 if not)."""
    if is_palindrome(text):
        console.print("[green]palindrome[/green]")
        return
    console.print("[red]not a palindrome[/red]")
    raise typer.Exit(code=1)


@app.command()
def mask(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to mask."),
    begin: int = typer.Option(0, "--begin", "-b", help="First index to mask."),
    end: Optional[int] = typer.Option(None, "--end", "-e", help="Index to stop masking at."),
    replace_char: Optional[str] = typer.Option(None, "--char", "-c", help="Mask character."),
) -> None:
    """Mask characters of TEXT from --begin up to --end (half the text by default)."""
    settings: Settings = ctx.obj
    masked = replace_characters(
        text,
        begin=begin,
        end=end,
        replace_char=replace_char if replace_char is not None else settings.replace_char,
    )
    if masked is None:
        console.print("[dim]Nothing to mask.[/dim]")
        return
    _echo(masked)


@app.command("chunk")
def chunk_(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to split."),
    size: Optional[int] = typer.Option(None, "--size", "-s", help="Characters per chunk."),
) -> None:
    """Split TEXT into chunks, one per line."""
    settings: Settings = ctx.obj
    chunk_size = size if size is not None else settings.chunk_size
    log.debug("Chunking %d character(s) by %d", len(text), chunk_size)
    try:
        pieces = chunk(text, chunk_size=chunk_size)
    except InvalidArgumentError as exc:
        _fail(exc)
    for piece in pieces:
        _echo(piece)


@app.command()
def insert(
    text: str = typer.Argument(..., help="Text to insert into."),
    char: str = typer.Argument(..., help="Character to insert."),
    position: int = typer.Argument(..., help="Index to insert at."),
    repeat: bool = typer.Option(False, "--repeat", "-r", help="Insert before every multiple of POSITION."),
) -> None:
    """Insert CHAR into TEXT at POSITION."""
    _echo(add_char_at_position(text, char, position, repeat=repeat))


@app.command("inspect")
def inspect_(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Text to inspect."),
) -> None:
    """Run every helper over TEXT and show the results as a table."""
    settings: Settings = ctx.obj
    report = inspect_text(text, replace_char=settings.replace_char)

    table = Table(title="Text Report")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")
    for key, value in report.as_dict().items():
        table.add_row(key, "-" if value is None else escape(str(value)))
    console.print(table)


@app.command()
def inspect_file(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Text file to inspect line by line."),
) -> None:
    """Inspect every non-blank line of a UTF-8 text file."""
    settings: Settings = ctx.obj
    if not path.is_file():
        console.print(f"[yellow]No such file: {escape(str(path))}[/yellow]")
        raise typer.Exit(code=1)

    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (UnicodeDecodeError, OSError) as exc:
        console.print(f"[red]Could not read {escape(str(path))}: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1)
    if not any(lines):
        console.print("[yellow]No lines to inspect.[/yellow]")
        return

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Inspecting lines...", total=len(lines))
        reports = inspect_lines(progress.track(lines, task_id=task), replace_char=settings.replace_char)

    table = Table(title=f"Text Report: {path.name}")
    table.add_column("Line", justify="right", style="magenta")
    table.add_column("Text", style="cyan")
    table.add_column("Words", justify="right")
    table.add_column("Email?", justify="center")
    table.add_column("Palindrome?", justify="center")
    table.add_column("Masked", style="yellow")

    for number, report in enumerate(reports, start=1):
        table.add_row(
            str(number),
            escape(report.text),
            str(report.word_count),
            "[green]yes[/green]" if report.is_valid_email else "[red]no[/red]",
            "[green]yes[/green]" if report.is_palindrome else "[red]no[/red]",
            escape(report.masked or "-"),
        )
    console.print(table)
    _print_summary(reports)


def _print_summary(reports: list[TextReport]) -> None:
    """Print a coloured summary line after inspecting a file."""
    emails = sum(1 for r in reports if r.is_valid_email)
    palindromes = sum(1 for r in reports if r.is_palindrome)
    total_words = sum(r.word_count for r in reports)
    parts = [
        f"[bold]Inspected {len(reports)} line(s)[/bold]",
        f"{total_words} word(s)",
        f"[green]{emails} e-mail address(es)[/green]",
        f"[green]{palindromes} palindrome(s)[/green]",
    ]
    console.print(" | ".join(parts))


if __name__ == "__main__":
    app()
