"""
Display formatting utilities for CLI output.

Provides bar graphics and flag displays for sequencer steps.
"""

from seqconv.models.sequence import Note


def value_bar(
    value: int,
    max_value: int = 127,
    width: int = 10,
    filled_char: str = "█",
    empty_char: str = "░",
    show_value: bool = True,
) -> str:
    """
    Create a text-based bar graphic for a velocity-like value.

    Args:
        value: Current value
        max_value: Maximum value (default 127 for velocity)
        width: Bar width in characters
        filled_char: Character for filled portion
        empty_char: Character for empty portion
        show_value: Show numeric value

    Returns:
        Formatted string like "91 [███████░░░]"
    """
    if max_value <= 0:
        max_value = 1

    clamped = max(0, min(value, max_value))
    fill_count = int((clamped / max_value) * width)

    bar = filled_char * fill_count + empty_char * (width - fill_count)

    if show_value:
        return f"{value:3d} [{bar}]"
    return f"[{bar}]"


def gate_bar(gate: int, cells: int = 8, filled_char: str = "#", empty_char: str = " ") -> str:
    """
    Draw a gate length as a row of cells.

    Cells up to and including ``gate`` are filled, so gate 0 shows one
    cell and gate 7 shows all eight.

    Returns:
        Formatted string like "[####    ]"
    """
    bar = "".join(filled_char if i <= gate else empty_char for i in range(cells))
    return f"[{bar}]"


def format_flags(note: Note) -> str:
    """
    Format the effect flags of a step with Rich markup.

    Returns:
        String like "[cyan]G[/cyan] [yellow]A[/yellow]  "
    """
    styles = {"G": "cyan", "S": "cyan", "A": "yellow", "R": "red"}
    parts = []
    for letter in note.flags:
        if letter == " ":
            parts.append(" ")
        else:
            parts.append(f"[{styles[letter]}]{letter}[/{styles[letter]}]")
    return "".join(parts)


def format_note(note: Note) -> str:
    """
    Format pitch and octave.

    Returns:
        "C#3", or a dimmed label for rested steps
    """
    if note.rest:
        return f"[dim]{note.label}[/dim]"
    return f"[bold]{note.label}[/bold]"


def format_swing(swing: int) -> str:
    """
    Format swing percentage.

    Returns:
        "55% (+5)" or "50% (straight)"
    """
    offset = swing - 50
    if offset == 0:
        return f"{swing}% (straight)"
    return f"{swing}% ({offset:+d})"
