# welcome_art/ui/display/__init__.py
# Display helpers for banners, template listings & settings

from .banner import show_banner

__all__ = ["show_banner"]
