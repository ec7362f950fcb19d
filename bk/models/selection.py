"""Map category flags to the categories to display."""

from dataclasses import dataclass
from typing import List

from .shortcuts import Category


@dataclass(frozen=True)
class SelectionFlags:
    """Flags from the command line. ``uninstall`` plays no part in selection."""

    movement: bool = False
    edit: bool = False
    recall: bool = False
    process: bool = False
    uninstall: bool = False

    def is_selected(self, category: Category) -> bool:
        return getattr(self, category.value)

    @property
    def any_category(self) -> bool:
        return any(self.is_selected(category) for category in Category)


def resolve_categories(flags: SelectionFlags) -> List[Category]:
    """
    Return the categories to display, always in Category declaration order.

    With no category flag set every category is shown.
    """
    if not flags.any_category:
        return list(Category)
    return [category for category in Category if flags.is_selected(category)]
