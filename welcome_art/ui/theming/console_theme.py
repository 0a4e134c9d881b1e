# welcome_art/ui/theming/console_theme.py
# Console theme initialization for Rich styling

from __future__ import annotations

from rich.theme import ThemeStackError

from ...art_io.console import console


# * Replace any previously pushed theme (console may have been reconfigured)
def refresh_theme() -> None:
    from .theme_engine import get_art_theme

    try:
        console.pop_theme()
    except ThemeStackError:
        pass  # nothing pushed yet
    console.push_theme(get_art_theme())


# called once per CLI invocation from the root callback
def auto_initialize_theme() -> None:
    refresh_theme()
