"""
Info command - display a decoded pattern step by step.
"""

from enum import Enum
from pathlib import Path

import typer
from rich.console import Console

from cli.display.log_handler import setup_logging
from cli.display.tables import display_file_info, display_sequence
from seqconv.formats.crave.reader import CraveReader
from seqconv.formats.td3.reader import TD3Reader
from seqconv.utils.validation import FormatError, SeqConvError

console = Console()
app = typer.Typer()


class PatternFormat(str, Enum):
    """Pattern file formats understood by the readers."""

    crave = "crave"
    td3 = "td3"


READERS = {
    PatternFormat.crave: CraveReader,
    PatternFormat.td3: TD3Reader,
}

FORMAT_LABELS = {
    PatternFormat.crave: "Crave",
    PatternFormat.td3: "TD-3",
}


@app.command()
def info(
    file: Path = typer.Argument(..., help="Pattern file (.seq)"),
    fmt: PatternFormat = typer.Option(
        PatternFormat.crave, "--format", "-f", help="Format of the pattern file"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show decoding details"),
) -> None:
    """
    Show the steps of a Crave or TD-3 pattern.

    Each step shows note and octave, the Glide/Slide/Accent/Rest flags,
    and for Crave patterns velocity, ratchet and gate length.

    Examples:

        seqconv info pattern.seq

        seqconv info td3.seq --format td3
    """
    setup_logging(verbose)

    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    reader = READERS[fmt]

    try:
        sequence = reader.read(file)
    except FormatError as e:
        console.print(f"[red]Error: {e}[/red]")
        if verbose:
            try:
                file_info = reader.get_file_info(file)
            except SeqConvError as info_error:
                console.print(f"[red]Error: {info_error}[/red]")
            else:
                display_file_info(file_info, str(file), FORMAT_LABELS[fmt])
        raise typer.Exit(1)
    except SeqConvError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    display_sequence(sequence, str(file))


if __name__ == "__main__":
    app()
