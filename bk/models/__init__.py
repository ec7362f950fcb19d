"""Shortcut data model and category selection for bk."""

from .selection import SelectionFlags, resolve_categories
from .shortcuts import Category, ShortcutEntry, build_registry

__all__ = [
    "Category",
    "SelectionFlags",
    "ShortcutEntry",
    "build_registry",
    "resolve_categories",
]
