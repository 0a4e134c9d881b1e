# welcome_art/ui/theming/theme_engine.py
# Colour palette, gradients & Rich theme shared by banners, listings & diagnostics

from __future__ import annotations

from ..core.rich_components import Theme, Text
from .theme_definitions import ACCENT_PALETTE, RAINBOW_PALETTE


def _rgb(hex_color: str) -> tuple[int, int, int]:
    value = int(hex_color.lstrip("#"), 16)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


# * Colour at position 0.0-1.0 along evenly spaced stops
def color_at(position: float, stops: list[str]) -> str:
    if len(stops) == 1:
        return stops[0]
    scaled = max(0.0, min(position, 1.0)) * (len(stops) - 1)
    index = min(int(scaled), len(stops) - 2)
    t = scaled - index
    start, end = _rgb(stops[index]), _rgb(stops[index + 1])
    mixed = (round(a + (b - a) * t) for a, b in zip(start, end))
    return "#" + "".join(f"{channel:02x}" for channel in mixed)


# * Colour constants used across the CLI
class ArtColors:
    ACCENT_PRIMARY = ACCENT_PALETTE[0]
    ACCENT_LIGHT = ACCENT_PALETTE[1]
    ACCENT_SECONDARY = ACCENT_PALETTE[2]
    ACCENT_MEDIUM = ACCENT_PALETTE[3]
    ACCENT_DEEP = ACCENT_PALETTE[4]
    ARROW = ACCENT_SECONDARY

    SUCCESS_BRIGHT = "#10b981"
    SUCCESS_MEDIUM = "#059669"
    SUCCESS_DIM = "#047857"

    WARNING = "#ffaa00"
    ERROR = "#ff4444"
    INFO = "#4488ff"
    DIM = "#aaaaaa"

    CHECKMARK = SUCCESS_BRIGHT

    @classmethod
    def gradient(cls) -> list[str]:
        return list(ACCENT_PALETTE)


# * Left-to-right gradient over a single line of text
def natural_gradient(text: str, colors: list[str] | None = None) -> Text:
    stops = colors if colors is not None else ArtColors.gradient()
    if not text or not stops:
        return Text(text)
    if len(stops) == 1:
        return Text(text, style=stops[0])

    result = Text()
    last = max(len(text) - 1, 1)
    for i, char in enumerate(text):
        result.append(char, style=color_at(i / last, stops))
    return result


# * Diagonal rainbow across a multi-line block (local stand-in for lolcat)
def rainbow_block(text: str, colors: list[str] | None = None) -> Text:
    stops = colors or RAINBOW_PALETTE
    lines = text.split("\n")
    width = max((len(line) for line in lines), default=0)
    span = max(width - 1, 1)
    out = Text()
    for row, line in enumerate(lines):
        if row:
            out.append("\n")
        # each row shifts two columns so the bands run diagonally
        for col, char in enumerate(line):
            if char.isspace():
                out.append(char)
                continue
            out.append(char, style=color_at(((col + row * 2) % max(width, 1)) / span, stops))
    return out


def success_gradient(text: str) -> Text:
    return natural_gradient(
        text, [ArtColors.SUCCESS_BRIGHT, ArtColors.SUCCESS_MEDIUM, ArtColors.SUCCESS_DIM]
    )


def accent_gradient(text: str) -> Text:
    return natural_gradient(
        text, [ArtColors.ACCENT_PRIMARY, ArtColors.ACCENT_SECONDARY, ArtColors.ACCENT_DEEP]
    )


# * Named styles referenced from markup throughout the CLI
def get_art_theme() -> Theme:
    return Theme(
        {
            "success": ArtColors.SUCCESS_BRIGHT,
            "warning": ArtColors.WARNING,
            "error": ArtColors.ERROR,
            "info": ArtColors.INFO,
            "dim": ArtColors.DIM,
            "art.accent": ArtColors.ACCENT_PRIMARY,
            "art.accent2": ArtColors.ACCENT_SECONDARY,
            "art.accent_deep": ArtColors.ACCENT_DEEP,
            "art.checkmark": ArtColors.CHECKMARK,
            "art.arrow": ArtColors.ARROW,
        }
    )


def styled_checkmark() -> Text:
    return Text("✓", style=ArtColors.CHECKMARK)


def styled_arrow() -> Text:
    return Text("->", style=ArtColors.ARROW)


def styled_bullet() -> Text:
    return Text("•", style=ArtColors.ACCENT_SECONDARY)
