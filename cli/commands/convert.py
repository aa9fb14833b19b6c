"""
Convert command - TD-3 pattern to Crave pattern.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from cli.display.log_handler import setup_logging
from seqconv.converters.td3_to_crave import CONVERSION_LIMITATIONS, TD3ToCraveConverter
from seqconv.utils.validation import SeqConvError

console = Console()
app = typer.Typer()


@app.command()
def convert(
    source: Path = typer.Argument(..., help="Source TD-3 pattern file (.seq)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed progress"),
) -> None:
    """
    Convert a TD-3 pattern into a Crave pattern.

    The output defaults to <name>_crave.seq next to the source file.

    Examples:

        seqconv convert td3.seq

        seqconv convert td3.seq -o crave.seq
    """
    setup_logging(verbose)

    if not source.exists():
        console.print(f"[red]Error: Source file not found: {source}[/red]")
        raise typer.Exit(1)

    output_path = output or source.with_name(f"{source.stem}_crave.seq")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=not verbose,
    ) as progress:
        task = progress.add_task("Converting TD-3 to Crave...", total=None)

        try:
            converter = TD3ToCraveConverter()
            sequence = converter.convert_and_save(source, output_path)
        except SeqConvError as e:
            console.print(f"[red]Error: {e}[/red]")
            raise typer.Exit(1)

        progress.update(task, description="Done!")

    size = output_path.stat().st_size
    console.print(f"[green]Converted:[/green] {source} -> {output_path}")
    console.print(f"[dim]Output size: {size} bytes ({sequence.length} steps)[/dim]")

    console.print()
    console.print("[yellow]IMPORTANT - Conversion Limitations:[/yellow]")
    for limitation in CONVERSION_LIMITATIONS:
        console.print(f"[yellow]  - {limitation}[/yellow]")
    console.print()


if __name__ == "__main__":
    app()
