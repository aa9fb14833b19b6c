"""
Dump command - annotated hex dump of a pattern file.
"""

from pathlib import Path
from typing import List, Tuple

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from cli.commands.info import FORMAT_LABELS, PatternFormat

console = Console()
app = typer.Typer()

Region = Tuple[int, int, str, str, str]

# File regions with start, end, name, description, and color
CRAVE_REGIONS: List[Region] = [
    (0x00, 0x12, "DEVICE_ID", "Device identifier", "bright_blue"),
    (0x12, 0x20, "VERSION", "Firmware version string", "blue"),
    (0x20, 0x22, "RESERVED", "Unused", "dim"),
    (0x22, 0x24, "BYTE_LEN", "Byte length", "cyan"),
    (0x24, 0x26, "SWING", "Swing (50% + value)", "yellow"),
    (0x26, 0x2A, "LENGTH", "Sequence length", "yellow"),
]

# Crave note records repeat after the info block
CRAVE_NOTES_START = 0x2A
CRAVE_NOTE_SIZE = 8
CRAVE_NOTE_COLORS = ("green", "magenta")

TD3_REGIONS: List[Region] = [
    (0x00, 0x10, "DEVICE_ID", "Device identifier", "bright_blue"),
    (0x10, 0x20, "VERSION", "Firmware version string", "blue"),
    (0x20, 0x24, "FILL", "Unused", "dim"),
    (0x24, 0x44, "NOTES", "Note table (2 bytes/step)", "green"),
    (0x44, 0x64, "ACCENTS", "Accent table (2 bytes/step)", "yellow"),
    (0x64, 0x84, "SLIDES", "Slide table (2 bytes/step)", "cyan"),
    (0x84, 0x86, "FILL", "Unused", "dim"),
    (0x86, 0x88, "LENGTH", "Sequence length", "magenta"),
    (0x88, 0x8A, "FILL", "Unused", "dim"),
    (0x8A, 0x8E, "MASK", "Enable mask (negated)", "red"),
    (0x8E, 0x92, "FILL", "Unused", "dim"),
]


def get_region_for_offset(offset: int, fmt: PatternFormat) -> Tuple[str, str, str]:
    """Get region name, description, and color for an offset."""
    regions = CRAVE_REGIONS if fmt == PatternFormat.crave else TD3_REGIONS
    for start, end, name, desc, color in regions:
        if start <= offset < end:
            return name, desc, color

    if fmt == PatternFormat.crave and offset >= CRAVE_NOTES_START:
        step = (offset - CRAVE_NOTES_START) // CRAVE_NOTE_SIZE
        color = CRAVE_NOTE_COLORS[step % len(CRAVE_NOTE_COLORS)]
        return f"NOTE_{step + 1:02d}", f"Note record {step + 1}", color

    return "UNKNOWN", "Unknown region", "white"


def format_hex_line(data: bytes, offset: int, fmt: PatternFormat, bytes_per_line: int = 16) -> Text:
    """
    Format a single line of hex dump, coloring each byte by its region.

    Returns Rich Text object with colored output.
    """
    text = Text()

    text.append(f"0x{offset:03X} ", style="dim")

    # Region tag of the first byte on the line
    region_name, _, region_color = get_region_for_offset(offset, fmt)
    text.append(f"[{region_name:9s}] ", style=region_color)

    for i, byte in enumerate(data):
        _, _, color = get_region_for_offset(offset + i, fmt)
        style = "dim" if byte == 0x00 else f"bold {color}"
        text.append(f"{byte:02X}", style=style)
        text.append(" ")

    if len(data) < bytes_per_line:
        text.append("   " * (bytes_per_line - len(data)))

    text.append(" ", style="dim")
    for byte in data:
        if 32 <= byte < 127:
            text.append(chr(byte), style="green")
        else:
            text.append(".", style="dim")

    return text


def create_legend(fmt: PatternFormat) -> Table:
    """Create a legend for the hex dump colors."""
    table = Table(title="Legend", box=box.SIMPLE, show_header=False, expand=False)
    table.add_column("Region", width=12)
    table.add_column("Description", width=40)

    regions = CRAVE_REGIONS if fmt == PatternFormat.crave else TD3_REGIONS
    for start, end, name, desc, color in regions:
        size = end - start
        table.add_row(
            Text(name, style=color),
            f"{desc} ({size} bytes, 0x{start:02X}-0x{end - 1:02X})",
        )

    if fmt == PatternFormat.crave:
        table.add_row(
            Text("NOTE_NN", style=CRAVE_NOTE_COLORS[0]),
            f"Note records ({CRAVE_NOTE_SIZE} bytes each, from 0x{CRAVE_NOTES_START:02X})",
        )

    return table


@app.command()
def dump(
    file: Path = typer.Argument(..., help="Pattern file to dump"),
    fmt: PatternFormat = typer.Option(
        PatternFormat.crave, "--format", "-f", help="Format of the pattern file"
    ),
    width: int = typer.Option(8, "--width", "-w", help="Bytes per line"),
    no_legend: bool = typer.Option(False, "--no-legend", help="Hide the legend"),
) -> None:
    """
    Annotated hex dump of a pattern file.

    Bytes are colored by the file region they belong to. Crave note
    records are labelled NOTE_01, NOTE_02, ...

    Examples:

        seqconv dump pattern.seq

        seqconv dump td3.seq --format td3 --width 16
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    if width < 1:
        console.print(f"[red]Error: Invalid width: {width}[/red]")
        raise typer.Exit(1)

    try:
        with open(file, "rb") as f:
            data = f.read()
    except OSError as e:
        console.print(f"[red]Error: Can't read {file}: {e.strerror}[/red]")
        raise typer.Exit(1)

    if not no_legend:
        console.print(create_legend(fmt))
        console.print()

    console.print(
        Panel(
            f"[bold]File:[/bold] {file}\n"
            f"[bold]Format:[/bold] {FORMAT_LABELS[fmt]}\n"
            f"[bold]Size:[/bold] {len(data)} bytes",
            title="[bold]Pattern Hex Dump[/bold]",
            border_style="blue",
        )
    )
    console.print()

    lines_shown = 0
    for offset in range(0, len(data), width):
        console.print(format_hex_line(data[offset : offset + width], offset, fmt, width))
        lines_shown += 1

    console.print()
    console.print(f"[dim]Total: {lines_shown} lines displayed[/dim]")


if __name__ == "__main__":
    app()
