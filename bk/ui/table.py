"""
Shortcut table rendering.

A section is a header line, one row per shortcut and a blank separator line:

    === MOVEMENT Shortcuts ===
      Ctrl+a       Go to the beginning of the line (Home)
      Ctrl+xx      Toggle between the start of line and current cursor
                   position

Descriptions wrap at word boundaries inside a fixed-width column so the
layout stays aligned in any monospaced terminal.
"""

import io
from typing import Optional, Sequence

from rich.console import Console, Group
from rich.padding import Padding
from rich.table import Table
from rich.text import Text

from bk.config import get_description_width
from bk.config.constants import KEY_COLUMN_WIDTH, ROW_INDENT
from bk.models.shortcuts import Category, ShortcutEntry


def section_header(category: Category) -> str:
    return f"=== {category.title} Shortcuts ==="


def _key_width(entries: Sequence[ShortcutEntry]) -> int:
    return max([KEY_COLUMN_WIDTH, *(len(entry.trigger) for entry in entries)])


def build_section(
    category: Category,
    entries: Optional[Sequence[ShortcutEntry]] = None,
    width: Optional[int] = None,
) -> Group:
    """
    Build the renderable for one category.

    Args:
        category: Category whose header is shown
        entries: Shortcuts to list (defaults to the category's own entries)
        width: Description column width (defaults to the configured width)
    """
    if entries is None:
        entries = category.entries
    if width is None:
        width = get_description_width()

    header = Text(section_header(category), style="bold")
    if not entries:
        return Group(header, Text(""))

    table = Table(show_header=False, box=None, padding=(0, 1, 0, 0), pad_edge=False)
    table.add_column("Key", style="bold cyan", width=_key_width(entries), no_wrap=True)
    table.add_column("Description", width=width, overflow="fold")

    # Text cells so triggers like "[" never parse as markup
    for entry in entries:
        table.add_row(Text(entry.trigger), Text(entry.description))

    rows = Padding(table, (0, 0, 0, ROW_INDENT), expand=False)
    return Group(header, rows, Text(""))


def section_width(entries: Sequence[ShortcutEntry], width: int) -> int:
    """Total character width of a rendered section."""
    return ROW_INDENT + _key_width(entries) + 1 + width


def render_category(
    category: Category,
    entries: Optional[Sequence[ShortcutEntry]] = None,
    width: Optional[int] = None,
) -> str:
    """Render one category to plain text, without colors or control codes."""
    if entries is None:
        entries = category.entries
    if width is None:
        width = get_description_width()

    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=max(section_width(entries, width), len(section_header(category))),
        color_system=None,
        force_terminal=False,
        highlight=False,
    )
    console.print(build_section(category, entries, width))
    return buffer.getvalue()
