"""Print shortcut tables for the selected categories."""

import logging

from bk.config import get_description_width
from bk.models.selection import SelectionFlags, resolve_categories
from bk.ui.table import build_section
from bk.utils.output import console

logger = logging.getLogger(__name__)


def show_shortcuts(flags: SelectionFlags) -> None:
    categories = resolve_categories(flags)
    logger.debug(f"Showing categories: {', '.join(c.value for c in categories)}")

    width = get_description_width()
    for category in categories:
        console.print(build_section(category, width=width))
