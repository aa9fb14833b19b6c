"""
Rich table displays for sequence information.
"""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from seqconv.models.sequence import Sequence
from cli.display.formatters import format_flags, format_note, format_swing, gate_bar, value_bar


console = Console()

FORMAT_NAMES = {
    "crave": "Crave",
    "td3": "TD-3",
}


def display_sequence(sequence: Sequence, filepath: Optional[str] = None) -> None:
    """Display a decoded sequence: summary panel plus one row per step."""

    format_name = FORMAT_NAMES.get(sequence.source_format, "Unknown")

    summary = ""
    if filepath:
        summary += f"[bold]File:[/bold] {filepath}\n"
    summary += f"""[bold]Format:[/bold] {format_name}
[bold]Length:[/bold] {sequence.length} steps ({sequence.active_steps} active)
[bold]Swing:[/bold] {format_swing(sequence.swing)}"""

    console.print(
        Panel(
            summary,
            title="[bold blue]Sequence Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )

    # TD-3 patterns carry no velocity, ratchet or gate
    crave = sequence.source_format != "td3"

    table = Table(title="Steps", box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=3, justify="right")
    table.add_column("Note", width=5)
    table.add_column("Flags", width=5)
    if crave:
        table.add_column("Velocity", width=18)
        table.add_column("Ratchet", width=7)
        table.add_column("Gate", width=10)

    for step, note in enumerate(sequence.notes, start=1):
        row = [str(step), format_note(note), format_flags(note)]
        if crave:
            row += [value_bar(note.velocity), f"x{note.ratchet}", gate_bar(note.gate)]
        table.add_row(*row)

    console.print(table)
    console.print("[dim]Flags: G=glide S=slide A=accent R=rest[/dim]")


def display_file_info(info: dict, filepath: str, format_name: str) -> None:
    """Display header-level file info for a file that failed to decode."""

    table = Table(title=f"{format_name} File", box=box.SIMPLE, show_header=False)
    table.add_column("Property", style="cyan", width=16)
    table.add_column("Value", width=60)

    table.add_row("File", filepath)
    status = "[green]Yes[/green]" if info.get("valid") else "[red]No[/red]"
    table.add_row("Header valid", status)
    table.add_row("Size", f"{info['size']} bytes")
    if "expected_size" in info:
        table.add_row("Expected size", f"{info['expected_size']} bytes")
    for key in ("version", "length", "swing"):
        if key in info:
            table.add_row(key.capitalize(), str(info[key]))
    if "mask" in info:
        table.add_row("Mask", f"0x{info['mask']:04X}")
    if "header" in info:
        table.add_row("Header", info["header"])

    console.print(table)
