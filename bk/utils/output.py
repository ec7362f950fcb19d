"""Shared console output utilities."""

from rich.console import Console

# Shared console instance for all standard output. Colors only when stdout is
# a terminal, so `bk | less` stays plain text.
console = Console(highlight=False)
