# welcome_art/ui/core/rich_components.py
# Centralized Rich component imports & configuration

from __future__ import annotations

# Core Rich components
from rich.text import Text
from rich.theme import Theme

# Layout & display components
from rich.table import Table


# * Themed Table builder for template listings & config paths
def themed_table(
    theme_colors: list[str] | None = None,
    show_header: bool = False,
    **kwargs,
) -> Table:
    # lazy import to avoid circular dependency
    from ..theming.theme_engine import ArtColors

    colors = theme_colors or ArtColors.gradient()
    return Table(
        border_style=kwargs.pop("border_style", colors[2]),
        show_header=show_header,
        padding=kwargs.pop("padding", (0, 1, 0, 0)),
        box=kwargs.pop("box", None),
        **kwargs,
    )


__all__ = [
    "Text",
    "Theme",
    "Table",
    "themed_table",
]
