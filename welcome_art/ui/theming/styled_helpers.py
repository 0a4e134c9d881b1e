# welcome_art/ui/theming/styled_helpers.py
# Pre-composed styling helpers for common CLI output patterns

from __future__ import annotations

from typing import Any

from rich.markup import escape

from .theme_engine import styled_arrow, styled_bullet, styled_checkmark, success_gradient


def styled_success_line(label: str, value: str | None = None) -> list:
    """Pre-composed success line: checkmark + gradient label [+ arrow + value].

    Returns list of renderables for console.print(*result).
    """
    parts: list[Any] = [styled_checkmark(), success_gradient(label)]
    if value is not None:
        parts.extend([styled_arrow(), escape(value)])
    return parts


def styled_setting_line(key: str, value: str) -> list:
    """Pre-composed setting display: bullet + key + arrow + value.

    Values come from config files, so they are escaped before printing.
    """
    return [
        styled_bullet(),
        f"[bold]{escape(key)}[/]",
        "[art.arrow]->[/]",
        format_setting_value(value),
    ]


def format_setting_value(value: Any) -> str:
    """Format a setting value with consistent styling."""
    if isinstance(value, bool):
        return f"[art.accent2]{str(value).lower()}[/]"
    return f"[art.accent2]{escape(str(value))}[/]"
