#!/usr/bin/env python3
"""
Main CLI entry point for bk
"""

from typing import Optional

import typer
from typer.core import TyperCommand

from bk import __version__
from bk.commands.show import show_shortcuts
from bk.commands.uninstall import uninstall as run_uninstall
from bk.error_handling import setup_logging
from bk.models.selection import SelectionFlags

# Newer typer releases bundle their own copy of click, so take UsageError from
# whichever click typer raises its errors with
UsageError = next(cls for cls in typer.BadParameter.__mro__ if cls.__name__ == "UsageError")

EXAMPLES = """[bold]Examples:[/bold]

  [cyan]bk[/cyan]            Show all shortcuts

  [cyan]bk -m[/cyan]         Show movement shortcuts only

  [cyan]bk -me[/cyan]        Show movement and edit shortcuts (chained)

  [cyan]bk -e -r[/cyan]      Show edit and recall shortcuts (separate)

  [cyan]bk --version[/cyan]  Show version information"""


class ShortcutCommand(TyperCommand):
    """Command class that reports usage errors with exit code 1."""

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except UsageError as e:
            e.exit_code = 1
            raise


app = typer.Typer(add_completion=False, rich_markup_mode="rich")


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"bk {__version__}")
        raise typer.Exit()


@app.command(
    cls=ShortcutCommand,
    epilog=EXAMPLES,
    context_settings={"help_option_names": ["-h", "--help"]},
)
def bk(
    movement: bool = typer.Option(
        False, "--movement", "-m", help="Show movement related shortcuts"
    ),
    edit: bool = typer.Option(False, "--edit", "-e", help="Show edit related shortcuts"),
    recall: bool = typer.Option(
        False, "--recall", "-r", help="Show command recall (history) related shortcuts"
    ),
    process: bool = typer.Option(
        False, "--process", "-p", help="Show process related shortcuts"
    ),
    uninstall: bool = typer.Option(
        False, "--uninstall", help="Remove the bk executable (asks for confirmation)"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging on stderr"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version information and exit",
    ),
):
    """
    A CLI for referencing Bash keyboard shortcuts.

    Flags can be chained Unix-style: [cyan]bk -me[/cyan] shows movement and edit shortcuts.
    Run without flags to show all shortcuts organized by category.
    """
    setup_logging(verbose)

    flags = SelectionFlags(
        movement=movement,
        edit=edit,
        recall=recall,
        process=process,
        uninstall=uninstall,
    )

    # Uninstall wins over any category flag
    if flags.uninstall:
        run_uninstall()
        return

    show_shortcuts(flags)


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
