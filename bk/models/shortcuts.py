"""
Bash keyboard shortcuts, grouped by category.

The data is the readline (emacs mode) and job-control reference set. Each
Category member carries its entries in display order, and member declaration
order is the order categories are printed in.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


@dataclass(frozen=True)
class ShortcutEntry:
    """A single keyboard shortcut."""

    trigger: str  # e.g. "Ctrl+a", "Alt+.", "!!"
    description: str


_MOVEMENT = (
    ShortcutEntry("Ctrl+a", "Go to the beginning of the line (Home)"),
    ShortcutEntry("Ctrl+e", "Go to the End of the line (End)"),
    ShortcutEntry("Ctrl+f", "Forward one character (Right arrow)"),
    ShortcutEntry("Ctrl+b", "Backward one character (Left arrow)"),
    ShortcutEntry("Alt+f", "Forward (right) one word (Alt-Right arrow)"),
    ShortcutEntry("Alt+b", "Back (left) one word (Alt-Left arrow)"),
    ShortcutEntry("Ctrl+xx", "Toggle between the start of line and current cursor position"),
)

_EDIT = (
    ShortcutEntry("Ctrl+l", "Clear the Screen, similar to the clear command"),
    ShortcutEntry("Alt+Del", "Delete the Word before the cursor"),
    ShortcutEntry("Alt+d", "Delete the Word after the cursor"),
    ShortcutEntry("Ctrl+d", "Delete character under the cursor"),
    ShortcutEntry("Ctrl+h", "Delete character before the cursor (Backspace)"),
    ShortcutEntry("Ctrl+w", "Cut the Word before the cursor to the clipboard"),
    ShortcutEntry("Ctrl+k", "Cut the Line after the cursor to the clipboard"),
    ShortcutEntry("Ctrl+u", "Cut/delete the Line before the cursor to the clipboard"),
    ShortcutEntry("Alt+t", "Swap current word with previous"),
    ShortcutEntry("Ctrl+t", "Swap the last two characters before the cursor (typo)"),
    ShortcutEntry("Esc+t", "Swap the last two words before the cursor"),
    ShortcutEntry("Ctrl+y", "Paste the last thing to be cut (yank)"),
    ShortcutEntry(
        "Alt+u",
        "UPPER capitalize every character from the cursor to the end of the current word",
    ),
    ShortcutEntry(
        "Alt+l",
        "Lower the case of every character from the cursor to the end of the current word",
    ),
    ShortcutEntry(
        "Alt+c",
        "Capitalize the character under the cursor and move to the end of the word",
    ),
    ShortcutEntry(
        "Alt+r",
        "Cancel the changes and put back the line as it was in the history (revert)",
    ),
    ShortcutEntry("Ctrl+_", "Undo"),
    ShortcutEntry("Tab", "Tab completion for file/directory names"),
)

# Command history search and bang expansion
_RECALL = (
    ShortcutEntry(
        "Ctrl+r",
        "Recall the last command including the specified character(s). "
        "Search the command history as you type",
    ),
    ShortcutEntry("Ctrl+p", "Previous command in history (walk back)"),
    ShortcutEntry("Ctrl+n", "Next command in history (walk forward)"),
    ShortcutEntry("Ctrl+s", "Go back to the next most recent command"),
    ShortcutEntry("Ctrl+o", "Execute the command found via Ctrl+r or Ctrl+s"),
    ShortcutEntry("Ctrl+g", "Escape from history searching mode"),
    ShortcutEntry("!!", "Repeat last command"),
    ShortcutEntry("!n", "Repeat from the last command: args n e.g. !:2 for the second argument"),
    ShortcutEntry(
        "!n:m",
        "Repeat from the last command: args from n to m. e.g. !:2-3 for the second and third",
    ),
    ShortcutEntry("!n:$", "Repeat from the last command: args n to the last argument"),
    ShortcutEntry("!n:p", "Print last command starting with n"),
    ShortcutEntry("!string", "Print the last command beginning with string"),
    ShortcutEntry("!:q", "Quote the last command with proper Bash escaping applied"),
    ShortcutEntry("!$", "Last argument of previous command"),
    ShortcutEntry("Alt+.", "Last argument of previous command"),
    ShortcutEntry("!*", "All arguments of previous command"),
    ShortcutEntry("^abc^def", "Run previous command, replacing abc with def"),
)

_PROCESS = (
    ShortcutEntry("Ctrl+c", "Interrupt/Kill whatever you are running (SIGINT)"),
    ShortcutEntry("Ctrl+l", "Clear the screen"),
    ShortcutEntry(
        "Ctrl+s",
        "Stop output to the screen (for long running verbose commands). "
        "Then use PgUp/PgDn for navigation",
    ),
    ShortcutEntry(
        "Ctrl+q",
        "Allow output to the screen (if previously stopped using command above)",
    ),
    ShortcutEntry(
        "Ctrl+d",
        "Send an EOF marker, unless disabled by an option, "
        "this will close the current shell (EXIT)",
    ),
    ShortcutEntry(
        "Ctrl+z",
        "Send the signal SIGTSTP to the current task, which suspends it. "
        "To return to it later enter 'fg process name' (foreground)",
    ),
)


class Category(Enum):
    """
    Shortcut categories, in display order.

    Each member's value is its public name (matching the CLI flag) and
    ``entries`` holds its shortcuts in display order.
    """

    MOVEMENT = ("movement", _MOVEMENT)
    EDIT = ("edit", _EDIT)
    RECALL = ("recall", _RECALL)  # command history
    PROCESS = ("process", _PROCESS)

    def __new__(cls, value: str, entries: Tuple[ShortcutEntry, ...]):
        member = object.__new__(cls)
        member._value_ = value
        member.entries = entries
        return member

    @property
    def title(self) -> str:
        """Header label, e.g. "MOVEMENT"."""
        return self.value.upper()


def build_registry() -> Dict[Category, Tuple[ShortcutEntry, ...]]:
    """Return every category mapped to its shortcuts, in display order."""
    return {category: category.entries for category in Category}
