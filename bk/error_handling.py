"""
Centralized error handling for bk

This module provides:
- Rich Console for user-facing error messages on stderr
- Logging setup for developer diagnostics
- Exception classes for the failures bk can report
- Consistent formatting and exit codes
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

# Global console instance for error display
console = Console(stderr=True, color_system="auto")

# Global logger for diagnostics
logger = logging.getLogger("bk")


class ErrorCategory(Enum):
    """Error categories for better handling"""
    FILE_SYSTEM = "file_system"
    PERMISSION = "permission"
    INTERNAL = "internal"


class BkError(Exception):
    """Base exception class for bk-specific errors"""

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.INTERNAL,
        details: Optional[Dict[str, Any]] = None,
        suggestion: Optional[str] = None,
        exit_code: int = 1
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.details = details or {}
        self.suggestion = suggestion
        self.exit_code = exit_code


class ExecutableResolutionError(BkError):
    """The path of the running bk executable could not be determined"""

    def __init__(self, message: str = "Cannot locate the bk executable", **kwargs):
        kwargs.setdefault(
            "suggestion",
            "Run bk through its installed command, or remove it with your package manager.",
        )
        super().__init__(
            message,
            category=ErrorCategory.FILE_SYSTEM,
            **kwargs
        )


class UninstallError(BkError):
    """Deleting the bk executable failed"""

    def __init__(self, path: Path, original_error: OSError, **kwargs):
        category = (
            ErrorCategory.PERMISSION
            if isinstance(original_error, PermissionError)
            else ErrorCategory.FILE_SYSTEM
        )
        super().__init__(
            f"Failed to remove {path}: {original_error.strerror or original_error}",
            category=category,
            details={"path": str(path), "original_error": str(original_error)},
            suggestion=f"Retry with elevated privileges (sudo) or remove it manually: rm {path}",
            **kwargs
        )
        self.path = path
        self.original_error = original_error


def setup_logging(verbose: bool = False) -> None:
    """
    Set up logging for bk

    Only a stderr handler is installed; bk keeps no log file.

    Args:
        verbose: Enable verbose (DEBUG) logging
    """
    console_level = logging.DEBUG if verbose else logging.WARNING

    # Clear any existing handlers
    logger.handlers.clear()
    logger.setLevel(console_level)
    logger.propagate = False

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.addHandler(console_handler)


def handle_error(
    error: Exception,
    operation: str = "unknown",
    show_details: bool = False
) -> None:
    """
    Handle errors with consistent formatting and logging

    Args:
        error: The exception to handle
        operation: Description of the operation that failed
        show_details: Whether to show technical details to user

    Raises:
        typer.Exit: Always, with the error's exit code
    """
    if isinstance(error, BkError):
        _handle_bk_error(error, operation, show_details)
    else:
        _handle_generic_error(error, operation, show_details)


def _handle_bk_error(error: BkError, operation: str, show_details: bool) -> None:
    """Handle BkError instances with rich formatting"""

    # The panel below is the user-facing report; the log line is for --verbose
    logger.debug(f"{operation} failed: {error.category.value}: {error.message}", exc_info=error)

    _display_user_error(error, show_details)

    raise typer.Exit(error.exit_code)


def _handle_generic_error(error: Exception, operation: str, show_details: bool) -> None:
    """Handle generic Python exceptions"""

    logger.debug(f"Unexpected error during {operation}: {error}", exc_info=True)

    wrapped_error = BkError(
        message=f"An unexpected error occurred during {operation}",
        category=ErrorCategory.INTERNAL,
        details={"original_error": str(error), "error_type": type(error).__name__},
        suggestion="Run again with --verbose for more details."
    )

    _display_user_error(wrapped_error, show_details)

    raise typer.Exit(1)


def _display_user_error(error: BkError, show_details: bool) -> None:
    """Display error to user with Rich formatting"""

    color = "red"

    message = Text()
    message.append(error.message, style=f"bold {color}")

    if show_details and error.details:
        details_text = "\n".join(f"- {k}: {v}" for k, v in error.details.items())
        message.append(f"\n\nDetails:\n{details_text}", style=f"dim {color}")

    if error.suggestion:
        message.append(f"\n\nSuggestion: {error.suggestion}", style="cyan")

    panel = Panel(
        message,
        title=f"[bold]{error.category.value.replace('_', ' ').title()} Error[/bold]",
        title_align="left",
        border_style=color,
        padding=(0, 1)
    )

    console.print(panel)
