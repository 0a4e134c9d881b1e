# welcome_art/art_io/console.py
# Shared Rich console for banners, listings & diagnostics

# * Every module prints through `console`; swapping the underlying Console (tests, record mode)
# * never invalidates references taken at import time
# * Theme styles are pushed later by ui/theming/console_theme.auto_initialize_theme()

from __future__ import annotations

from typing import Any, Optional

from rich.console import Console


class _ConsoleProxy:
    __slots__ = ("_console",)

    def __init__(self) -> None:
        self._console = Console()

    def __getattr__(self, name: str) -> Any:
        return getattr(self._console, name)

    def _swap(self, new_console: Console) -> Console:
        self._console = new_console
        return new_console


console = _ConsoleProxy()


# * Replace the console; width & record are what tests use to capture banner output
def configure_console(
    width: Optional[int] = None,
    record: bool = False,
    force_terminal: Optional[bool] = None,
    no_color: Optional[bool] = None,
) -> Console:
    options: dict[str, Any] = {"record": record}
    if width is not None:
        options["width"] = width
    if force_terminal is not None:
        options["force_terminal"] = force_terminal
    if no_color is not None:
        options["no_color"] = no_color
    return console._swap(Console(**options))


# fresh console picking up the current environment (COLUMNS, NO_COLOR, ...)
def reset_console() -> Console:
    return console._swap(Console())


__all__ = [
    "console",
    "configure_console",
    "reset_console",
]
