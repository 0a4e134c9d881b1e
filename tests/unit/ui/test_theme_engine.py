# tests/unit/ui/test_theme_engine.py
# Tests for gradient helpers & theme setup

from welcome_art.art_io.console import configure_console
from welcome_art.ui.theming.console_theme import auto_initialize_theme
from welcome_art.ui.theming.styled_helpers import styled_setting_line, styled_success_line
from welcome_art.ui.theming.theme_engine import (
    ArtColors,
    get_art_theme,
    natural_gradient,
    rainbow_block,
)


# * Gradient keeps the text & styles every character
def test_natural_gradient():
    text = natural_gradient("hello")
    assert text.plain == "hello"
    assert len(text.spans) == 5
    assert natural_gradient("").plain == ""
    assert natural_gradient("x", ["#ffffff"]).plain == "x"


# * Rainbow block preserves lines & whitespace
def test_rainbow_block():
    text = rainbow_block(" /\\\n\n| |")
    assert text.plain == " /\\\n\n| |"


# * Theme defines the styles markup relies on
def test_theme_styles():
    theme = get_art_theme()
    for name in ("success", "warning", "error", "art.accent", "art.accent2", "art.arrow"):
        assert name in theme.styles
    assert ArtColors.gradient()[0] == ArtColors.ACCENT_PRIMARY


# * Repeated initialisation keeps a single pushed theme
def test_auto_initialize_idempotent():
    console = configure_console(width=100, record=True)
    auto_initialize_theme()
    auto_initialize_theme()
    console.print("[art.accent]ok[/]")
    assert console.export_text() == "ok\n"


# * Setting lines escape config values containing markup
def test_styled_lines_escape():
    console = configure_console(width=100, record=True)
    console.print(*styled_setting_line("Welcome Text", "[bold]hi[/bold]"))
    console.print(*styled_success_line("Template set to", "[x]"))
    text = console.export_text()
    assert "[bold]hi[/bold]" in text
    assert "[x]" in text
