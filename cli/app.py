"""
SeqConv - Reader and converter for Crave and TD-3 sequencer patterns.

A CLI tool for inspecting pattern files and moving TD-3 patterns to the Crave.
"""

import typer
from rich.console import Console

from cli.commands.info import info
from cli.commands.convert import convert
from cli.commands.dump import dump
from seqconv import __version__

console = Console()

# Main app
app = typer.Typer(
    name="seqconv",
    help="Inspect and convert Crave and TD-3 sequencer pattern files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="info")(info)
app.command(name="convert")(convert)
app.command(name="dump")(dump)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]seqconv[/bold] version {__version__}")
    console.print("[dim]Reader and converter for Crave and TD-3 pattern files[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
) -> None:
    """
    SeqConv - Inspect and convert sequencer patterns.

    Supports:

    - [cyan]Crave[/cyan] pattern files (read and write)
    - [cyan]TD-3[/cyan] pattern files (read, convert to Crave)

    [bold]Quick Start:[/bold]

        seqconv info pattern.seq              # Crave pattern steps
        seqconv info td3.seq --format td3     # TD-3 pattern steps

    [bold]Utility Commands:[/bold]

        seqconv convert td3.seq -o crave.seq  # TD-3 to Crave
        seqconv dump pattern.seq              # Annotated hex dump

    Use --help with any command for more details.
    """
    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
