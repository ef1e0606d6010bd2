"""
ym5view - Inspect YM5 chiptune register dumps.

A CLI for checking YM5 containers and reading their per-VBL PSG registers.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from ym5view import __version__
from cli.commands.info import info
from cli.commands.frames import frames
from cli.commands.dump import dump
from cli.commands.validate import validate

console = Console()

app = typer.Typer(
    name="ym5view",
    help="Inspect YM5 chiptune register dumps.",
    add_completion=False,
    rich_markup_mode="rich",
)

app.command(name="info")(info)
app.command(name="frames")(frames)
app.command(name="dump")(dump)
app.command(name="validate")(validate)


def setup_logging(verbose: bool) -> None:
    """Route library logging through Rich; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]ym5view[/bold] version {__version__}")
    console.print("[dim]Decoder for YM5 chiptune register dumps[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    ym5view - Inspect YM5 chiptune register dumps.

    [bold]Quick Start:[/bold]

        ym5view info song.ym            # Header fields and metadata
        ym5view info song.ym -f 100     # Plus one frame in detail

    [bold]Frame Commands:[/bold]

        ym5view frames song.ym          # Decoded register table
        ym5view frames song.ym --hex    # Raw register bytes
        ym5view frames song.ym --plain  # One line per frame

    [bold]Utility Commands:[/bold]

        ym5view dump song.ym            # Annotated hex dump
        ym5view validate song.ym        # Validate file structure

    Use --help with any command for more details.
    """
    setup_logging(verbose)

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
