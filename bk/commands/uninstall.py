"""
Self-uninstall for bk.

    bk --uninstall    → locate the running bk executable, confirm, delete it

The prompt is always shown and only "y" or "yes" proceeds; there is no flag
to skip it.
"""

import logging
import os
import shutil
import sys
from pathlib import Path

import typer
from rich.markup import escape

from bk.config.constants import AFFIRMATIVE_ANSWERS
from bk.error_handling import ExecutableResolutionError, UninstallError, handle_error
from bk.utils.output import console

logger = logging.getLogger(__name__)


def resolve_executable() -> Path:
    """Return the path of the running bk executable.

    Raises:
        ExecutableResolutionError: If the path cannot be determined, or bk is
            running from source (``python bk/main.py``) rather than an
            installed executable.
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve()

    argv0 = sys.argv[0] if sys.argv else ""
    if not argv0:
        raise ExecutableResolutionError(details={"argv0": argv0})

    # A bare name means bk was found on PATH
    candidate = argv0 if os.sep in argv0 else shutil.which(argv0)
    if candidate is None:
        raise ExecutableResolutionError(
            f"Cannot locate the bk executable: {argv0} is not on PATH",
            details={"argv0": argv0},
        )

    path = Path(candidate).resolve()
    if path.suffix == ".py":
        raise ExecutableResolutionError(
            "bk is running from source, not from an installed executable",
            details={"path": str(path)},
            suggestion="Uninstall the package with pip instead: pip uninstall bk",
        )
    if not path.is_file():
        raise ExecutableResolutionError(
            f"Cannot locate the bk executable: {path} is not a file",
            details={"path": str(path)},
        )
    return path


def is_affirmative(answer: str) -> bool:
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


def confirm_uninstall(path: Path) -> bool:
    """Ask whether to delete ``path``. Anything but y/yes declines."""
    console.print(f"This will remove the bk executable at [bold]{escape(str(path))}[/bold]")
    try:
        answer = typer.prompt(
            "Are you sure you want to uninstall bk? [y/N]",
            default="",
            show_default=False,
            prompt_suffix=" ",
        )
    except typer.Abort:
        # End of input or Ctrl+C at the prompt
        logger.debug("Confirmation prompt aborted")
        return False
    return is_affirmative(answer)


def remove_executable(path: Path) -> None:
    """Delete the executable at ``path``.

    Raises:
        UninstallError: If the file cannot be removed.
    """
    try:
        path.unlink()
    except OSError as e:
        raise UninstallError(path, e) from e


def uninstall() -> None:
    """Resolve, confirm and delete the running bk executable."""
    try:
        path = resolve_executable()
        logger.debug(f"Resolved executable: {path}")

        if not confirm_uninstall(path):
            logger.debug("Uninstall declined")
            console.print("[yellow]Uninstall cancelled.[/yellow]")
            return

        remove_executable(path)
        console.print(f"[green]bk has been uninstalled from {escape(str(path))}[/green]")
    except (ExecutableResolutionError, UninstallError) as e:
        handle_error(e, "uninstall", show_details=logger.isEnabledFor(logging.DEBUG))
