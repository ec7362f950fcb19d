"""
Centralized constants for bk.

Layout widths, prompt answers and the environment variables bk understands
all live here so the renderer and the uninstall flow agree on them.
"""

# =============================================================================
# TABLE LAYOUT
# =============================================================================

KEY_COLUMN_WIDTH = 12  # Minimum width of the trigger column
DESCRIPTION_WIDTH = 60  # Wrap width for the description column
MIN_DESCRIPTION_WIDTH = 20
MAX_DESCRIPTION_WIDTH = 200
ROW_INDENT = 2  # Leading spaces before each row

# =============================================================================
# UNINSTALL
# =============================================================================

AFFIRMATIVE_ANSWERS = ("y", "yes")

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_VAR_DEFINITIONS = {
    "BK_DESCRIPTION_WIDTH": {
        "description": "Wrap width for the description column",
        "default": str(DESCRIPTION_WIDTH),
        "valid_range": (MIN_DESCRIPTION_WIDTH, MAX_DESCRIPTION_WIDTH),
    },
}
