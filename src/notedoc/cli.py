"""Command-line interface for notedoc."""

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from notedoc import __version__
from notedoc.config import get_settings
from notedoc.core.exporter import NoteExporter
from notedoc.formats import OUTPUT_FORMATS
from notedoc.formatting.ir import NoteDocument, Run, Theme

app = typer.Typer(
    name="notedoc",
    help="Export Markdown notes to styled DOCX, PDF, HTML or plain text documents.",
    add_completion=False,
)
console = Console()

# Folder mode only picks up Markdown sources, never exported .txt files
FOLDER_EXTENSIONS = (".md", ".markdown")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"notedoc v{__version__}")
        raise typer.Exit()


def configure_logging(level: str, verbose: bool) -> None:
    """Route log records through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def generate_output_path(
    input_path: Path, fmt: str, output_dir: Optional[Path] = None
) -> Path:
    """Generate output path by swapping the extension for ``fmt``."""
    output_name = f"{input_path.stem}.{fmt}"
    if output_name == input_path.name:
        output_name = f"{input_path.stem}-notes.{fmt}"

    if output_dir:
        return output_dir / output_name
    return input_path.parent / output_name


def describe_run(run: Run) -> str:
    """Short flag summary of a run for the block outline."""
    flags = [
        name
        for name, enabled in (
            ("b", run.bold),
            ("i", run.italic),
            ("m", run.monospace),
            ("u", run.underline),
        )
        if enabled
    ]
    return f"{'+'.join(flags) or '-'}@{run.size}"


def print_outline(document: NoteDocument) -> None:
    """Print the block sequence as a table."""
    table = Table(title=document.title, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind")
    table.add_column("Indent", justify="right")
    table.add_column("Runs")
    table.add_column("Text", overflow="fold")

    for index, block in enumerate(document.blocks, start=1):
        table.add_row(
            str(index),
            block.kind.value,
            str(block.indent_level),
            " ".join(describe_run(run) for run in block.runs),
            block.plain_text,
        )

    console.print(table)


def process_file(
    input_path: Path,
    output_path: Optional[Path],
    fmt: str,
    theme: Theme,
    verbose: bool,
    dump: bool = False,
) -> bool:
    """Process a single file. Returns True on success."""
    if not input_path.exists():
        console.print(f"[red]Error:[/red] File not found: {input_path}")
        return False

    if output_path is None:
        output_path = generate_output_path(input_path, fmt)

    if verbose:
        console.print(f"[blue]Processing:[/blue] {input_path}")
        if not dump:
            console.print(f"[blue]Output:[/blue] {output_path}")

    try:
        exporter = NoteExporter(theme=theme)
        if dump:
            print_outline(exporter.load_document(input_path))
            return True

        document = exporter.export_file(input_path, output_path)
        console.print(
            f"[green]Success:[/green] {output_path} ({len(document.blocks)} blocks)"
        )
        return True
    except Exception as e:
        console.print(f"[red]Error processing {input_path.name}:[/red] {e}")
        if verbose:
            console.print_exception()
        return False


def process_folder(
    folder_path: Path,
    fmt: str,
    theme: Theme,
    verbose: bool,
    recursive: bool = True,
) -> tuple[int, int]:
    """Process all Markdown files in a folder. Returns (success_count, fail_count)."""
    if not folder_path.is_dir():
        console.print(f"[red]Error:[/red] Not a directory: {folder_path}")
        return 0, 0

    files: list[Path] = []
    for ext in FOLDER_EXTENSIONS:
        if recursive:
            files.extend(folder_path.rglob(f"*{ext}"))
        else:
            files.extend(folder_path.glob(f"*{ext}"))
    files.sort()

    if not files:
        console.print(
            f"[yellow]No Markdown files found in {folder_path}[/yellow]\n"
            f"Supported inputs: {', '.join(FOLDER_EXTENSIONS)}"
        )
        return 0, 0

    console.print(f"[blue]Found {len(files)} file(s) to export[/blue]")

    success_count = 0
    fail_count = 0

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Exporting files...", total=len(files))

        for file_path in files:
            progress.update(task, description=f"Exporting {file_path.name}...")
            if process_file(file_path, None, fmt, theme, verbose):
                success_count += 1
            else:
                fail_count += 1
            progress.advance(task)

    return success_count, fail_count


@app.command()
def main(
    path: Path = typer.Argument(
        ...,
        help="Markdown file, JSON token dump, or folder of Markdown files",
        exists=True,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (for single file only)",
    ),
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help=f"Output format: {', '.join(OUTPUT_FORMATS)} (default: docx)",
    ),
    dump: bool = typer.Option(
        False,
        "--dump",
        "-d",
        help="Print the styled block outline instead of writing a file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Export Markdown notes as styled documents.

    Examples:

        notedoc notes.md

        notedoc notes.md --format pdf

        notedoc notes.md -o minutes.docx

        notedoc /path/to/notes  # every .md file, exported beside itself

        notedoc notes.md --dump  # inspect the styled blocks
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(f"[red]Error:[/red] Invalid configuration: {escape(str(e))}")
        raise typer.Exit(2)
    configure_logging(settings.log_level, verbose)
    theme = settings.theme()

    use_format = (fmt or settings.default_format).lower().lstrip(".")
    if use_format not in OUTPUT_FORMATS:
        console.print(
            f"[red]Error:[/red] Unknown format '{use_format}'. "
            f"Choose from: {', '.join(OUTPUT_FORMATS)}"
        )
        raise typer.Exit(2)

    if path.is_file():
        # Single file mode
        success = process_file(path, output, use_format, theme, verbose, dump)
        raise typer.Exit(0 if success else 1)
    else:
        # Folder mode
        if output is not None:
            console.print(
                "[yellow]Warning:[/yellow] --output is ignored in folder mode. "
                "Files will be saved alongside the Markdown sources."
            )

        success, fail = process_folder(path, use_format, theme, verbose)
        console.print(
            f"\n[bold]Complete:[/bold] {success} succeeded, {fail} failed"
        )
        raise typer.Exit(0 if fail == 0 else 1)


if __name__ == "__main__":
    app()
