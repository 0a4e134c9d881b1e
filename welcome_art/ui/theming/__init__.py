# welcome_art/ui/theming/__init__.py
# Theming system: palette, gradients & console theme

from .theme_engine import (
    ArtColors,
    accent_gradient,
    get_art_theme,
    natural_gradient,
    rainbow_block,
    success_gradient,
)
from .console_theme import auto_initialize_theme, refresh_theme

__all__ = [
    "ArtColors",
    "accent_gradient",
    "get_art_theme",
    "natural_gradient",
    "rainbow_block",
    "success_gradient",
    "auto_initialize_theme",
    "refresh_theme",
]
