"""Shared Rich consoles for the taskrecur CLI.

Commands and formatters print through the same cached consoles, one per
highlight mode, so a colour setting applied once reaches every line of output.
"""

from functools import lru_cache

from rich.console import Console

_HIGHLIGHT_MODES = (True, False)


@lru_cache(maxsize=len(_HIGHLIGHT_MODES))
def get_console(highlight: bool = True) -> Console:
    """Return the shared console for the given highlight mode."""
    return Console(highlight=highlight)


def set_color(enabled: bool) -> None:
    """Enable or disable colour on every shared console."""
    for highlight in _HIGHLIGHT_MODES:
        get_console(highlight).no_color = not enabled
